from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class WeightMilestone(models.TextChoices):
    HATCH = 'HATCH', 'Hatch'
    WEEK_1 = 'WEEK_1', 'Week 1'
    WEEK_2 = 'WEEK_2', 'Week 2'
    WEEK_4 = 'WEEK_4', 'Week 4'
    WEEK_6 = 'WEEK_6', 'Week 6'
    WEEK_8 = 'WEEK_8', 'Week 8'
    WEEK_12 = 'WEEK_12', 'Week 12'
    WEEK_16 = 'WEEK_16', 'Week 16'
    WEEK_20 = 'WEEK_20', 'Week 20'
    ADULT = 'ADULT', 'Adult'
    OTHER = 'OTHER', 'Other'


class WeightRecord(models.Model):
    """A bird weighed on a given day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bird = models.ForeignKey('birds.Bird', on_delete=models.CASCADE, related_name='weights')
    date = models.DateField(default=timezone.localdate)
    weight_grams = models.DecimalField(
        max_digits=7,
        decimal_places=1,
        validators=[MinValueValidator(Decimal('0.1'))]
    )
    milestone = models.CharField(max_length=10, choices=WeightMilestone.choices, blank=True)
    notes = models.TextField(blank=True)

    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='weights_recorded'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'weight_records'
        indexes = [
            models.Index(fields=['bird', 'date'], name='weight_records_bird_date_idx'),
            models.Index(fields=['milestone'], name='weight_records_milestone_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.bird_id}: {self.weight_grams}g on {self.date}"
