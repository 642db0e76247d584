# Generated manually for the initial farm schema

import uuid
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('coops', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='FeedInventory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('feed_type', models.CharField(choices=[('STARTER', 'Starter'), ('GROWER', 'Grower'), ('LAYER', 'Layer'), ('BREEDER', 'Breeder'), ('FINISHER', 'Finisher'), ('SUPPLEMENT', 'Supplement')], max_length=20)),
                ('brand', models.CharField(blank=True, max_length=100)),
                ('quantity_kg', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('cost_per_kg', models.DecimalField(blank=True, decimal_places=2, max_digits=8, null=True)),
                ('reorder_level', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'feed_inventory',
                'verbose_name_plural': 'feed inventory',
                'ordering': ['feed_type', 'brand'],
                'unique_together': {('feed_type', 'brand')},
            },
        ),
        migrations.CreateModel(
            name='FeedConsumption',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(default=django.utils.timezone.localdate)),
                ('quantity_kg', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('coop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='feed_consumption', to='coops.coop')),
                ('feed_inventory', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='consumption', to='feed.feedinventory')),
                ('recorded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='feed_recorded', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'feed_consumption',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['coop', 'date'], name='feed_consumption_coop_idx'),
                    models.Index(fields=['date'], name='feed_consumption_date_idx'),
                ],
            },
        ),
    ]
