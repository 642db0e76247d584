# Generated manually for the farm settings lists

import uuid
import django.core.validators
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='BirdColor',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100, unique=True)),
                ('name_tl', models.CharField(blank=True, max_length=100)),
                ('hex_code', models.CharField(blank=True, max_length=7)),
                ('description', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'bird_colors',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='EggSizeCategory',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=50)),
                ('name_tl', models.CharField(blank=True, max_length=50)),
                ('min_weight_grams', models.DecimalField(blank=True, decimal_places=1, max_digits=6, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('max_weight_grams', models.DecimalField(blank=True, decimal_places=1, max_digits=6, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('description', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('sort_order', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'egg_size_categories',
                'verbose_name_plural': 'egg size categories',
                'ordering': ['min_weight_grams', 'sort_order'],
            },
        ),
        migrations.CreateModel(
            name='FeedStage',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=100)),
                ('name_tl', models.CharField(blank=True, max_length=100)),
                ('feed_type', models.CharField(choices=[('STARTER', 'Starter'), ('GROWER', 'Grower'), ('LAYER', 'Layer'), ('BREEDER', 'Breeder'), ('FINISHER', 'Finisher'), ('SUPPLEMENT', 'Supplement')], max_length=20)),
                ('min_age_days', models.PositiveIntegerField()),
                ('max_age_days', models.PositiveIntegerField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('is_active', models.BooleanField(default=True)),
                ('sort_order', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'feed_stages',
                'ordering': ['min_age_days', 'sort_order'],
            },
        ),
    ]
