"""Flock health overview."""

from django.conf import settings
from django.db.models import Count, Q
from django.utils import timezone
from datetime import date, timedelta
from typing import Optional

from ..models import HealthIncident, HealthOutcome, Medication, Vaccination

SUMMARY_ITEMS = 10


def upcoming_vaccinations(*, today: date, days: int):
    """Vaccinations falling due between today and ``days`` from now, inclusive."""
    return Vaccination.objects.filter(
        next_due_date__gte=today,
        next_due_date__lte=today + timedelta(days=days),
    ).order_by('next_due_date')


def active_medications(*, today: date):
    """Medication courses without an end date or ending today or later."""
    return Medication.objects.filter(Q(end_date__isnull=True) | Q(end_date__gte=today))


def birds_in_withdrawal(*, today: date) -> list[dict]:
    """Birds whose medication withdrawal period has not yet ended."""
    rows = []
    medications = (
        Medication.objects
        .filter(withdrawal_days__gt=0)
        .prefetch_related('birds')
        .order_by('start_date')
    )
    for medication in medications:
        if medication.withdrawal_end_date < today:
            continue
        for bird in medication.birds.all():
            rows.append({
                'bird_id': str(bird.id),
                'bird_name': str(bird),
                'medication_name': medication.medication_name,
                'withdrawal_end_date': medication.withdrawal_end_date,
            })
    return rows


def get_health_summary(today: Optional[date] = None) -> dict:
    """
    Overview for the health dashboard.

    Returns:
        dict with upcoming_vaccinations, active_incidents,
        recent_vaccinations and birds_in_withdrawal
    """
    today = today or timezone.localdate()
    window = settings.HEALTH_SUMMARY_DAYS

    upcoming = (
        upcoming_vaccinations(today=today, days=window)
        .annotate(bird_count=Count('birds'))[:SUMMARY_ITEMS]
    )
    incidents = (
        HealthIncident.objects
        .filter(outcome=HealthOutcome.ONGOING)
        .annotate(bird_count=Count('birds'))[:SUMMARY_ITEMS]
    )
    recent = (
        Vaccination.objects
        .filter(date_given__gte=today - timedelta(days=window))
        .annotate(bird_count=Count('birds'))[:SUMMARY_ITEMS]
    )

    return {
        'upcoming_vaccinations': [
            {
                'id': str(vaccination.id),
                'vaccine_name': vaccination.vaccine_name,
                'next_due_date': vaccination.next_due_date,
                'bird_count': vaccination.bird_count,
            }
            for vaccination in upcoming
        ],
        'active_incidents': [
            {
                'id': str(incident.id),
                'date_noticed': incident.date_noticed,
                'symptoms': incident.symptoms,
                'outcome': incident.outcome,
                'bird_count': incident.bird_count,
            }
            for incident in incidents
        ],
        'recent_vaccinations': [
            {
                'id': str(vaccination.id),
                'vaccine_name': vaccination.vaccine_name,
                'date_given': vaccination.date_given,
                'bird_count': vaccination.bird_count,
            }
            for vaccination in recent
        ],
        'birds_in_withdrawal': birds_in_withdrawal(today=today),
    }
