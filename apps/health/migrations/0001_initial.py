# Generated manually for the initial farm schema

import uuid
import django.db.models.deletion
import django.utils.timezone
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
            name='HealthIncident',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('date_noticed', models.DateField(default=django.utils.timezone.localdate)),
                ('symptoms', models.TextField()),
                ('diagnosis', models.TextField(blank=True)),
                ('treatment', models.TextField(blank=True)),
                ('outcome', models.CharField(choices=[('RECOVERED', 'Recovered'), ('ONGOING', 'Ongoing'), ('DECEASED', 'Deceased')], default='ONGOING', max_length=10)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('birds', models.ManyToManyField(db_table='health_incident_birds', related_name='health_incidents', to='birds.bird')),
                ('reported_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='health_incidents_reported', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'health_incidents',
                'ordering': ['-date_noticed', '-created_at'],
                'indexes': [
                    models.Index(fields=['outcome'], name='health_incidents_outcome_idx'),
                    models.Index(fields=['date_noticed'], name='health_incidents_date_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Vaccination',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('vaccine_name', models.CharField(max_length=200)),
                ('date_given', models.DateField(default=django.utils.timezone.localdate)),
                ('dosage', models.CharField(blank=True, max_length=100)),
                ('method', models.CharField(blank=True, max_length=100)),
                ('next_due_date', models.DateField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('administered_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vaccinations_given', to=settings.AUTH_USER_MODEL)),
                ('birds', models.ManyToManyField(db_table='vaccination_birds', related_name='vaccinations', to='birds.bird')),
            ],
            options={
                'db_table': 'vaccinations',
                'ordering': ['-date_given', '-created_at'],
                'indexes': [
                    models.Index(fields=['next_due_date'], name='vaccinations_next_due_idx'),
                    models.Index(fields=['date_given'], name='vaccinations_given_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Medication',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('medication_name', models.CharField(max_length=200)),
                ('dosage', models.CharField(blank=True, max_length=100)),
                ('start_date', models.DateField(default=django.utils.timezone.localdate)),
                ('end_date', models.DateField(blank=True, null=True)),
                ('withdrawal_days', models.PositiveIntegerField(default=0)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('administered_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='medications_given', to=settings.AUTH_USER_MODEL)),
                ('birds', models.ManyToManyField(db_table='medication_birds', related_name='medications', to='birds.bird')),
                ('health_incident', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='medications', to='health.healthincident')),
            ],
            options={
                'db_table': 'medications',
                'ordering': ['-start_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['end_date'], name='medications_end_date_idx'),
                ],
            },
        ),
    ]
