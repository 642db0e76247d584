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
        ('birds', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='WeightRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(default=django.utils.timezone.localdate)),
                ('weight_grams', models.DecimalField(decimal_places=1, max_digits=7, validators=[django.core.validators.MinValueValidator(Decimal('0.1'))])),
                ('milestone', models.CharField(blank=True, choices=[('HATCH', 'Hatch'), ('WEEK_1', 'Week 1'), ('WEEK_2', 'Week 2'), ('WEEK_4', 'Week 4'), ('WEEK_6', 'Week 6'), ('WEEK_8', 'Week 8'), ('WEEK_12', 'Week 12'), ('WEEK_16', 'Week 16'), ('WEEK_20', 'Week 20'), ('ADULT', 'Adult'), ('OTHER', 'Other')], max_length=10)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('bird', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='weights', to='birds.bird')),
                ('recorded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='weights_recorded', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'weight_records',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['bird', 'date'], name='weight_records_bird_date_idx'),
                    models.Index(fields=['milestone'], name='weight_records_milestone_idx'),
                ],
            },
        ),
    ]
