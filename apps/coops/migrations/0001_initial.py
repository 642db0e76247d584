# Generated manually for the initial farm schema

import uuid
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Coop',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('capacity', models.PositiveIntegerField(default=0)),
                ('coop_type', models.CharField(choices=[('BREEDING_PEN', 'Breeding pen'), ('GROW_OUT', 'Grow-out'), ('LAYER_HOUSE', 'Layer house'), ('BROODER', 'Brooder'), ('QUARANTINE', 'Quarantine')], default='GROW_OUT', max_length=20)),
                ('status', models.CharField(choices=[('ACTIVE', 'Active'), ('MAINTENANCE', 'Maintenance'), ('INACTIVE', 'Inactive')], default='ACTIVE', max_length=20)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'coops',
                'ordering': ['name'],
                'indexes': [
                    models.Index(fields=['status'], name='coops_status_idx'),
                    models.Index(fields=['coop_type'], name='coops_type_idx'),
                ],
            },
        ),
    ]
