from django.db import models
import uuid


class CoopType(models.TextChoices):
    BREEDING_PEN = 'BREEDING_PEN', 'Breeding pen'
    GROW_OUT = 'GROW_OUT', 'Grow-out'
    LAYER_HOUSE = 'LAYER_HOUSE', 'Layer house'
    BROODER = 'BROODER', 'Brooder'
    QUARANTINE = 'QUARANTINE', 'Quarantine'


class CoopStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    MAINTENANCE = 'MAINTENANCE', 'Maintenance'
    INACTIVE = 'INACTIVE', 'Inactive'


class Coop(models.Model):
    """Pen, house or brooder birds are kept in."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    capacity = models.PositiveIntegerField(default=0)
    coop_type = models.CharField(max_length=20, choices=CoopType.choices, default=CoopType.GROW_OUT)
    status = models.CharField(max_length=20, choices=CoopStatus.choices, default=CoopStatus.ACTIVE)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'coops'
        indexes = [
            models.Index(fields=['status'], name='coops_status_idx'),
            models.Index(fields=['coop_type'], name='coops_type_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name
