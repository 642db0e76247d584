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
            name='EggRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date', models.DateField(default=django.utils.timezone.localdate)),
                ('egg_mark', models.CharField(blank=True, max_length=50)),
                ('weight_grams', models.DecimalField(blank=True, decimal_places=1, max_digits=6, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.1'))])),
                ('shell_quality', models.CharField(blank=True, choices=[('GOOD', 'Good'), ('FAIR', 'Fair'), ('POOR', 'Poor'), ('SOFT', 'Soft')], max_length=10)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('bird', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='eggs', to='birds.bird')),
                ('recorded_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='eggs_recorded', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'egg_records',
                'ordering': ['-date', '-created_at'],
                'indexes': [
                    models.Index(fields=['bird', 'date'], name='egg_records_bird_date_idx'),
                    models.Index(fields=['date'], name='egg_records_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='IncubationRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('set_date', models.DateField()),
                ('expected_hatch_date', models.DateField()),
                ('actual_hatch_date', models.DateField(blank=True, null=True)),
                ('outcome', models.CharField(choices=[('PENDING', 'Pending'), ('HATCHED', 'Hatched'), ('INFERTILE', 'Infertile'), ('DEAD_IN_SHELL', 'Dead in shell'), ('BROKEN', 'Broken')], default='PENDING', max_length=20)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('chick', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='incubation_records', to='birds.bird')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='incubations_created', to=settings.AUTH_USER_MODEL)),
                ('egg', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='incubation', to='eggs.eggrecord')),
            ],
            options={
                'db_table': 'incubation_records',
                'ordering': ['-set_date'],
                'indexes': [
                    models.Index(fields=['outcome'], name='incubation_outcome_idx'),
                    models.Index(fields=['expected_hatch_date'], name='incubation_expected_idx'),
                ],
            },
        ),
    ]
