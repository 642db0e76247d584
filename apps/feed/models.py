from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class FeedType(models.TextChoices):
    STARTER = 'STARTER', 'Starter'
    GROWER = 'GROWER', 'Grower'
    LAYER = 'LAYER', 'Layer'
    BREEDER = 'BREEDER', 'Breeder'
    FINISHER = 'FINISHER', 'Finisher'
    SUPPLEMENT = 'SUPPLEMENT', 'Supplement'


class FeedInventoryQuerySet(models.QuerySet):

    def low_stock(self):
        return self.filter(
            reorder_level__isnull=False,
            quantity_kg__lte=models.F('reorder_level')
        )


class FeedInventory(models.Model):
    """Stock of one feed type and brand."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    feed_type = models.CharField(max_length=20, choices=FeedType.choices)
    brand = models.CharField(max_length=100, blank=True)
    quantity_kg = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    cost_per_kg = models.DecimalField(max_digits=8, decimal_places=2, null=True, blank=True)
    # No alert when unset
    reorder_level = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = FeedInventoryQuerySet.as_manager()

    class Meta:
        db_table = 'feed_inventory'
        verbose_name_plural = 'feed inventory'
        unique_together = [['feed_type', 'brand']]
        ordering = ['feed_type', 'brand']

    def __str__(self):
        return f"{self.get_feed_type_display()} {self.brand}".strip()

    @property
    def is_low_stock(self):
        if self.reorder_level is None:
            return False
        return self.quantity_kg <= self.reorder_level


class FeedConsumption(models.Model):
    """Feed given to a coop on a given day."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    coop = models.ForeignKey('coops.Coop', on_delete=models.CASCADE, related_name='feed_consumption')
    feed_inventory = models.ForeignKey(
        FeedInventory,
        on_delete=models.PROTECT,
        related_name='consumption'
    )
    date = models.DateField(default=timezone.localdate)
    quantity_kg = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))]
    )
    notes = models.TextField(blank=True)

    recorded_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='feed_recorded'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'feed_consumption'
        indexes = [
            models.Index(fields=['coop', 'date'], name='feed_consumption_coop_idx'),
            models.Index(fields=['date'], name='feed_consumption_date_idx'),
        ]
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.quantity_kg}kg to {self.coop_id} on {self.date}"
