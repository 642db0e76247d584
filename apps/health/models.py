from django.db import models
from django.utils import timezone
from datetime import timedelta
import uuid


class HealthOutcome(models.TextChoices):
    RECOVERED = 'RECOVERED', 'Recovered'
    ONGOING = 'ONGOING', 'Ongoing'
    DECEASED = 'DECEASED', 'Deceased'


class HealthIncident(models.Model):
    """Illness or injury noticed in one or more birds."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    birds = models.ManyToManyField(
        'birds.Bird',
        related_name='health_incidents',
        db_table='health_incident_birds'
    )
    date_noticed = models.DateField(default=timezone.localdate)
    symptoms = models.TextField()
    diagnosis = models.TextField(blank=True)
    treatment = models.TextField(blank=True)
    outcome = models.CharField(max_length=10, choices=HealthOutcome.choices, default=HealthOutcome.ONGOING)
    notes = models.TextField(blank=True)

    reported_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='health_incidents_reported'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'health_incidents'
        indexes = [
            models.Index(fields=['outcome'], name='health_incidents_outcome_idx'),
            models.Index(fields=['date_noticed'], name='health_incidents_date_idx'),
        ]
        ordering = ['-date_noticed', '-created_at']

    def __str__(self):
        return f"Incident {self.date_noticed} ({self.outcome})"


class Vaccination(models.Model):
    """Vaccine given to a group of birds."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    birds = models.ManyToManyField(
        'birds.Bird',
        related_name='vaccinations',
        db_table='vaccination_birds'
    )
    vaccine_name = models.CharField(max_length=200)
    date_given = models.DateField(default=timezone.localdate)
    dosage = models.CharField(max_length=100, blank=True)
    method = models.CharField(max_length=100, blank=True)
    next_due_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)

    administered_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='vaccinations_given'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'vaccinations'
        indexes = [
            models.Index(fields=['next_due_date'], name='vaccinations_next_due_idx'),
            models.Index(fields=['date_given'], name='vaccinations_given_idx'),
        ]
        ordering = ['-date_given', '-created_at']

    def __str__(self):
        return f"{self.vaccine_name} ({self.date_given})"


class Medication(models.Model):
    """Course of medication, optionally tied to a health incident."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    birds = models.ManyToManyField(
        'birds.Bird',
        related_name='medications',
        db_table='medication_birds'
    )
    health_incident = models.ForeignKey(
        HealthIncident,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='medications'
    )
    medication_name = models.CharField(max_length=200)
    dosage = models.CharField(max_length=100, blank=True)
    start_date = models.DateField(default=timezone.localdate)
    # Null while the course is still running
    end_date = models.DateField(null=True, blank=True)
    withdrawal_days = models.PositiveIntegerField(default=0)
    notes = models.TextField(blank=True)

    administered_by = models.ForeignKey(
        'accounts.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='medications_given'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'medications'
        indexes = [
            models.Index(fields=['end_date'], name='medications_end_date_idx'),
        ]
        ordering = ['-start_date', '-created_at']

    def __str__(self):
        return f"{self.medication_name} from {self.start_date}"

    @property
    def withdrawal_end_date(self):
        """Last day eggs or meat should be withheld."""
        return (self.end_date or self.start_date) + timedelta(days=self.withdrawal_days)
