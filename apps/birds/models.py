from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid


class BirdSex(models.TextChoices):
    MALE = 'MALE', 'Male'
    FEMALE = 'FEMALE', 'Female'
    UNKNOWN = 'UNKNOWN', 'Unknown'


class BirdStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    BREEDING = 'BREEDING', 'Breeding'
    SOLD = 'SOLD', 'Sold'
    DECEASED = 'DECEASED', 'Deceased'
    CULLED = 'CULLED', 'Culled'
    LOST = 'LOST', 'Lost'
    RETIRED = 'RETIRED', 'Retired'
    ARCHIVED = 'ARCHIVED', 'Archived'


# Statuses of birds that physically live on the farm
LIVE_STATUSES = [BirdStatus.ACTIVE, BirdStatus.BREEDING]


class CombType(models.TextChoices):
    SINGLE = 'SINGLE', 'Single'
    PEA = 'PEA', 'Pea'
    ROSE = 'ROSE', 'Rose'
    WALNUT = 'WALNUT', 'Walnut'
    BUTTERCUP = 'BUTTERCUP', 'Buttercup'
    V_SHAPED = 'V_SHAPED', 'V-Shaped'
    CUSHION = 'CUSHION', 'Cushion'


class IdentifierType(models.TextChoices):
    BAND = 'BAND', 'Band'
    WING_BAND = 'WING_BAND', 'Wing band'
    LEG_NUMBER = 'LEG_NUMBER', 'Leg number'
    RFID = 'RFID', 'RFID tag'
    OTHER = 'OTHER', 'Other'


class BirdQuerySet(models.QuerySet):

    def not_archived(self):
        return self.exclude(status=BirdStatus.ARCHIVED)

    def live(self):
        return self.filter(status__in=LIVE_STATUSES)


class Bird(models.Model):
    """A bird in the flock with pedigree, placement and breed composition."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, blank=True)
    sex = models.CharField(max_length=10, choices=BirdSex.choices, default=BirdSex.UNKNOWN)
    status = models.CharField(max_length=10, choices=BirdStatus.choices, default=BirdStatus.ACTIVE)
    hatch_date = models.DateField(null=True, blank=True)

    # Pedigree
    sire = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sired_offspring'
    )
    dam = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='dam_offspring'
    )

    # Current placement (history lives in CoopAssignment)
    coop = models.ForeignKey(
        'coops.Coop',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='birds'
    )

    # Appearance
    color = models.CharField(max_length=100, blank=True)
    comb_type = models.CharField(max_length=20, choices=CombType.choices, blank=True)

    early_life_notes = models.TextField(blank=True)

    # True once a composition was entered by hand instead of derived from parents
    breed_override = models.BooleanField(default=False)

    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='birds_created'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BirdQuerySet.as_manager()

    class Meta:
        db_table = 'birds'
        indexes = [
            models.Index(fields=['status'], name='birds_status_idx'),
            models.Index(fields=['sex', 'status'], name='birds_sex_status_idx'),
            models.Index(fields=['coop', 'status'], name='birds_coop_status_idx'),
            models.Index(fields=['hatch_date'], name='birds_hatch_date_idx'),
            models.Index(fields=['created_at'], name='birds_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.name or self.get_identifier(IdentifierType.BAND) or str(self.id)[:8]

    @property
    def display_id(self):
        """First identifier value, else the name, else the id tail."""
        identifiers = list(self.identifiers.all())
        if identifiers:
            return identifiers[0].id_value
        return self.name or str(self.id)[-6:]

    def get_identifier(self, id_type):
        """Return the first identifier value of the given type, or None."""
        for identifier in self.identifiers.all():
            if identifier.id_type == id_type:
                return identifier.id_value
        return None

    def age_in_months(self, as_of=None):
        """Whole months since hatch (30-day months), or None without a hatch date."""
        if not self.hatch_date:
            return None
        as_of = as_of or timezone.localdate()
        return max((as_of - self.hatch_date).days // 30, 0)

    def get_breed_composition(self):
        """Composition as ``[{'breed_id', 'percentage'}]`` largest share first."""
        return [
            {'breed_id': str(link.breed_id), 'percentage': link.percentage}
            for link in sorted(
                self.breed_composition.all(),
                key=lambda link: link.percentage,
                reverse=True,
            )
        ]


class BirdIdentifier(models.Model):
    """Leg band, wing band or other mark identifying a bird."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bird = models.ForeignKey(Bird, on_delete=models.CASCADE, related_name='identifiers')
    id_type = models.CharField(max_length=20, choices=IdentifierType.choices)
    id_value = models.CharField(max_length=100)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'bird_identifiers'
        indexes = [
            models.Index(fields=['id_type', 'id_value'], name='bird_ident_type_value_idx'),
        ]
        ordering = ['id_type', 'created_at']

    def __str__(self):
        return f"{self.get_id_type_display()} {self.id_value}"


class BirdBreed(models.Model):
    """One breed's share of a bird's breed composition."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bird = models.ForeignKey(Bird, on_delete=models.CASCADE, related_name='breed_composition')
    breed = models.ForeignKey('breeds.Breed', on_delete=models.PROTECT, related_name='bird_links')
    percentage = models.DecimalField(
        max_digits=4,
        decimal_places=1,
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
    )

    class Meta:
        db_table = 'bird_breeds'
        unique_together = [['bird', 'breed']]
        indexes = [
            models.Index(fields=['breed', 'bird'], name='bird_breeds_breed_idx'),
        ]

    def __str__(self):
        return f"{self.bird_id}: {self.breed_id} {self.percentage}%"


class CoopAssignment(models.Model):
    """Placement history: which coop a bird lived in and when."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bird = models.ForeignKey(Bird, on_delete=models.CASCADE, related_name='coop_assignments')
    coop = models.ForeignKey('coops.Coop', on_delete=models.CASCADE, related_name='assignments')
    assigned_at = models.DateField(default=timezone.localdate)
    # Null while the bird is still in this coop
    removed_at = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)

    class Meta:
        db_table = 'coop_assignments'
        indexes = [
            models.Index(fields=['bird', 'removed_at'], name='coop_assign_open_idx'),
            models.Index(fields=['coop', 'removed_at'], name='coop_assign_coop_idx'),
        ]
        ordering = ['-assigned_at']

    def __str__(self):
        return f"{self.bird_id} -> {self.coop_id}"


class BirdNote(models.Model):
    """Dated free-text observation about a bird."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    bird = models.ForeignKey(Bird, on_delete=models.CASCADE, related_name='notes')
    content = models.TextField()
    created_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        related_name='bird_notes'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'bird_notes'
        ordering = ['-created_at']

    def __str__(self):
        return f"Note on {self.bird_id}"
