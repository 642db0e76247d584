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
        ('breeds', '0001_initial'),
        ('coops', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Bird',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(blank=True, max_length=100)),
                ('sex', models.CharField(choices=[('MALE', 'Male'), ('FEMALE', 'Female'), ('UNKNOWN', 'Unknown')], default='UNKNOWN', max_length=10)),
                ('status', models.CharField(choices=[('ACTIVE', 'Active'), ('BREEDING', 'Breeding'), ('SOLD', 'Sold'), ('DECEASED', 'Deceased'), ('CULLED', 'Culled'), ('LOST', 'Lost'), ('RETIRED', 'Retired'), ('ARCHIVED', 'Archived')], default='ACTIVE', max_length=10)),
                ('hatch_date', models.DateField(blank=True, null=True)),
                ('color', models.CharField(blank=True, max_length=100)),
                ('comb_type', models.CharField(blank=True, choices=[('SINGLE', 'Single'), ('PEA', 'Pea'), ('ROSE', 'Rose'), ('WALNUT', 'Walnut'), ('BUTTERCUP', 'Buttercup'), ('V_SHAPED', 'V-Shaped'), ('CUSHION', 'Cushion')], max_length=20)),
                ('early_life_notes', models.TextField(blank=True)),
                ('breed_override', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('coop', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='birds', to='coops.coop')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='birds_created', to=settings.AUTH_USER_MODEL)),
                ('dam', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='dam_offspring', to='birds.bird')),
                ('sire', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='sired_offspring', to='birds.bird')),
            ],
            options={
                'db_table': 'birds',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status'], name='birds_status_idx'),
                    models.Index(fields=['sex', 'status'], name='birds_sex_status_idx'),
                    models.Index(fields=['coop', 'status'], name='birds_coop_status_idx'),
                    models.Index(fields=['hatch_date'], name='birds_hatch_date_idx'),
                    models.Index(fields=['created_at'], name='birds_created_at_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BirdIdentifier',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('id_type', models.CharField(choices=[('BAND', 'Band'), ('WING_BAND', 'Wing band'), ('LEG_NUMBER', 'Leg number'), ('RFID', 'RFID tag'), ('OTHER', 'Other')], max_length=20)),
                ('id_value', models.CharField(max_length=100)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('bird', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='identifiers', to='birds.bird')),
            ],
            options={
                'db_table': 'bird_identifiers',
                'ordering': ['id_type', 'created_at'],
                'indexes': [
                    models.Index(fields=['id_type', 'id_value'], name='bird_ident_type_value_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BirdBreed',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('percentage', models.DecimalField(decimal_places=1, max_digits=4, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('100'))])),
                ('bird', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='breed_composition', to='birds.bird')),
                ('breed', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='bird_links', to='breeds.breed')),
            ],
            options={
                'db_table': 'bird_breeds',
                'unique_together': {('bird', 'breed')},
                'indexes': [
                    models.Index(fields=['breed', 'bird'], name='bird_breeds_breed_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='CoopAssignment',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('assigned_at', models.DateField(default=django.utils.timezone.localdate)),
                ('removed_at', models.DateField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('bird', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='coop_assignments', to='birds.bird')),
                ('coop', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='assignments', to='coops.coop')),
            ],
            options={
                'db_table': 'coop_assignments',
                'ordering': ['-assigned_at'],
                'indexes': [
                    models.Index(fields=['bird', 'removed_at'], name='coop_assign_open_idx'),
                    models.Index(fields=['coop', 'removed_at'], name='coop_assign_coop_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='BirdNote',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField()),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('bird', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='notes', to='birds.bird')),
                ('created_by', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='bird_notes', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'bird_notes',
                'ordering': ['-created_at'],
            },
        ),
    ]
