# Generated manually for the initial farm schema

import uuid
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='ReportPreset',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('description', models.TextField(blank=True)),
                ('report_type', models.CharField(choices=[('birds', 'Birds'), ('eggs', 'Eggs'), ('health', 'Health')], max_length=10)),
                ('config', models.JSONField(default=dict)),
                ('is_default', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('created_by', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='report_presets', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'report_presets',
                'ordering': ['-updated_at'],
            },
        ),
        migrations.AddIndex(
            model_name='reportpreset',
            index=models.Index(fields=['created_by', 'report_type'], name='report_presets_owner_type_idx'),
        ),
        migrations.AddConstraint(
            model_name='reportpreset',
            constraint=models.UniqueConstraint(condition=models.Q(('is_default', True)), fields=('created_by', 'report_type'), name='report_presets_one_default'),
        ),
    ]
