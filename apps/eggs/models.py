from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class ShellQuality(models.TextChoices):
    GOOD = 'GOOD', 'Good'
    FAIR = 'FAIR', 'Fair'
    POOR = 'POOR', 'Poor'
    SOFT = 'SOFT', 'Soft'


class IncubationOutcome(models.TextChoices):
    PENDING = 'PENDING', 'Pending'
    HATCHED = 'HATCHED', 'Hatched'
    INFERTILE = 'INFERTILE', 'Infertile'
    DEAD_IN_SHELL = 'DEAD_IN_SHELL', 'Dead in shell'
    BROKEN = 'BROKEN', 'Broken'


class EggRecord(models.Model):
    """An egg laid by a hen."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bird = models.ForeignKey('birds.Bird', on_delete=models.CASCADE, related_name='eggs')
    date = models.DateField(default=timezone.localdate)
    egg_mark = models.CharField(max_length=50, blank=True)
    weight_grams = models.DecimalField(
        max_digits=6,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.1'))]
    )
    shell_quality = models.CharField(max_length=10, choices=ShellQuality.choices, blank=True)
    notes = models.TextField(blank=True)

    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='eggs_recorded'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'egg_records'
        indexes = [
            models.Index(fields=['bird', 'date'], name='egg_records_bird_date_idx'),
            models.Index(fields=['date'], name='egg_records_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"Egg {self.egg_mark or str(self.id)[:8]} ({self.date})"


class IncubationRecord(models.Model):
    """An egg set in the incubator and what became of it."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    egg = models.OneToOneField(EggRecord, on_delete=models.CASCADE, related_name='incubation')
    set_date = models.DateField()
    expected_hatch_date = models.DateField()
    actual_hatch_date = models.DateField(null=True, blank=True)
    outcome = models.CharField(
        max_length=20,
        choices=IncubationOutcome.choices,
        default=IncubationOutcome.PENDING
    )
    chick = models.ForeignKey(
        'birds.Bird',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='incubation_records'
    )
    notes = models.TextField(blank=True)

    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='incubations_created'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'incubation_records'
        indexes = [
            models.Index(fields=['outcome'], name='incubation_outcome_idx'),
            models.Index(fields=['expected_hatch_date'], name='incubation_expected_idx'),
        ]
        ordering = ['-set_date']

    def __str__(self):
        return f"Incubation of {self.egg_id} ({self.outcome})"
