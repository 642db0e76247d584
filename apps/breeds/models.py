from django.db import models
import uuid


class SourceFarm(models.Model):
    """Farm or breeder a bloodline was acquired from."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, unique=True)
    location = models.CharField(max_length=200, blank=True)
    contact_info = models.CharField(max_length=200, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'source_farms'
        ordering = ['name']

    def __str__(self):
        return self.name


class Breed(models.Model):
    """Named breed or bloodline used in breed compositions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    # Short code shown on cards and reports, always upper-case
    code = models.CharField(max_length=10, unique=True)
    description = models.TextField(blank=True)
    varieties = models.JSONField(default=list, blank=True)

    source_farms = models.ManyToManyField(
        SourceFarm,
        blank=True,
        related_name='breeds',
        db_table='breed_source_farms',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'breeds'
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.code})"

    def save(self, *args, **kwargs):
        self.code = (self.code or '').strip().upper()
        super().save(*args, **kwargs)
