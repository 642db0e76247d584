from django.db import models
from django.db.models import Q
import uuid


class ReportType(models.TextChoices):
    BIRDS = 'birds', 'Birds'
    EGGS = 'eggs', 'Eggs'
    HEALTH = 'health', 'Health'


class ReportPreset(models.Model):
    """
    A saved report configuration.

    ``config`` holds ``{columns, filters, sortColumn, sortDirection}`` in the
    same camelCase shape the report endpoints accept.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='report_presets'
    )
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    report_type = models.CharField(max_length=10, choices=ReportType.choices)
    config = models.JSONField(default=dict)
    is_default = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'report_presets'
        indexes = [
            models.Index(fields=['created_by', 'report_type'], name='report_presets_owner_type_idx'),
        ]
        constraints = [
            # At most one default preset per user and report type
            models.UniqueConstraint(
                fields=['created_by', 'report_type'],
                condition=Q(is_default=True),
                name='report_presets_one_default'
            ),
        ]
        ordering = ['-updated_at']

    def __str__(self):
        return f"{self.name} ({self.report_type})"
