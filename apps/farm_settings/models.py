from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.feed.models import FeedType


class BirdColor(models.Model):
    """A plumage colour offered when recording birds."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    name_tl = models.CharField(max_length=100, blank=True)
    hex_code = models.CharField(max_length=7, blank=True)
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'bird_colors'
        ordering = ['name']

    def __str__(self):
        return self.name


class EggSizeCategory(models.Model):
    """Weight band used to grade eggs (Small, Medium, Large...)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50)
    name_tl = models.CharField(max_length=50, blank=True)
    min_weight_grams = models.DecimalField(
        max_digits=6,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    max_weight_grams = models.DecimalField(
        max_digits=6,
        decimal_places=1,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))]
    )
    description = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    sort_order = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'egg_size_categories'
        verbose_name_plural = 'egg size categories'
        ordering = ['min_weight_grams', 'sort_order']

    def __str__(self):
        return self.name

    def contains(self, weight):
        """True when ``weight`` falls in [min, max)."""
        if self.min_weight_grams is not None and weight < self.min_weight_grams:
            return False
        if self.max_weight_grams is not None and weight >= self.max_weight_grams:
            return False
        return True


class FeedStage(models.Model):
    """Age window in which a flock is fed a given feed type."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    name_tl = models.CharField(max_length=100, blank=True)
    feed_type = models.CharField(max_length=20, choices=FeedType.choices)
    min_age_days = models.PositiveIntegerField()
    max_age_days = models.PositiveIntegerField(null=True, blank=True)
    notes = models.TextField(blank=True)
    is_active = models.BooleanField(default=True)
    sort_order = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'feed_stages'
        ordering = ['min_age_days', 'sort_order']

    def __str__(self):
        return f"{self.name} ({self.get_feed_type_display()})"
