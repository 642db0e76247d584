"""
Flat data exports.

Each exporter returns ``(header, rows)`` for one data set. Records linked
to several birds (vaccinations, health incidents) yield one row per bird.
"""

from datetime import date
from typing import Optional

from apps.birds.models import Bird, IdentifierType
from apps.eggs.models import EggRecord
from apps.health.models import HealthIncident, Vaccination
from apps.weights.models import WeightRecord
from ..exceptions import InvalidExportTypeError

# Filter value meaning "no filter"
ALL = 'all'


def bird_display_name(bird: Optional[Bird]) -> str:
    """Name, else first identifier value, else blank."""
    if bird is None:
        return ''
    if bird.name:
        return bird.name
    identifiers = list(bird.identifiers.all())
    return identifiers[0].id_value if identifiers else ''


def _in_range(queryset, field_name, start_date, end_date):
    if start_date and end_date:
        return queryset.filter(**{f'{field_name}__range': (start_date, end_date)})
    return queryset


def export_birds(*, status: Optional[str] = None, **_):
    queryset = (
        Bird.objects
        .select_related('coop', 'sire', 'dam')
        .prefetch_related('identifiers', 'sire__identifiers', 'dam__identifiers')
        .order_by('-created_at')
    )
    if status and status != ALL:
        queryset = queryset.filter(status=status)

    header = [
        'name', 'sex', 'hatch_date', 'status', 'color', 'comb_type',
        'coop', 'sire', 'dam', 'band_number', 'early_life_notes',
    ]
    rows = [
        [
            bird.name,
            bird.sex,
            bird.hatch_date,
            bird.status,
            bird.color,
            bird.comb_type,
            bird.coop.name if bird.coop else '',
            bird_display_name(bird.sire),
            bird_display_name(bird.dam),
            bird.get_identifier(IdentifierType.BAND) or '',
            bird.early_life_notes,
        ]
        for bird in queryset
    ]
    return header, rows


def export_weights(*, start_date: Optional[date] = None, end_date: Optional[date] = None, **_):
    queryset = WeightRecord.objects.select_related('bird').prefetch_related('bird__identifiers')
    queryset = _in_range(queryset, 'date', start_date, end_date).order_by('-date', '-created_at')

    header = ['bird_id', 'bird_name', 'date', 'weight_grams', 'milestone', 'notes']
    rows = [
        [
            str(record.bird_id),
            bird_display_name(record.bird),
            record.date,
            record.weight_grams,
            record.milestone,
            record.notes,
        ]
        for record in queryset
    ]
    return header, rows


def export_eggs(*, start_date: Optional[date] = None, end_date: Optional[date] = None, **_):
    queryset = EggRecord.objects.select_related('bird').prefetch_related('bird__identifiers')
    queryset = _in_range(queryset, 'date', start_date, end_date).order_by('-date', '-created_at')

    header = ['bird_id', 'bird_name', 'date', 'egg_mark', 'weight_grams', 'shell_quality', 'notes']
    rows = [
        [
            str(egg.bird_id),
            bird_display_name(egg.bird),
            egg.date,
            egg.egg_mark,
            egg.weight_grams,
            egg.shell_quality,
            egg.notes,
        ]
        for egg in queryset
    ]
    return header, rows


def export_vaccinations(**_):
    queryset = (
        Vaccination.objects
        .prefetch_related('birds__identifiers')
        .order_by('-date_given', '-created_at')
    )

    header = [
        'bird_id', 'bird_name', 'vaccine_name', 'date_given',
        'next_due_date', 'dosage', 'method', 'notes',
    ]
    rows = [
        [
            str(bird.id),
            bird_display_name(bird),
            vaccination.vaccine_name,
            vaccination.date_given,
            vaccination.next_due_date,
            vaccination.dosage,
            vaccination.method,
            vaccination.notes,
        ]
        for vaccination in queryset
        for bird in vaccination.birds.all()
    ]
    return header, rows


def export_health_incidents(*, outcome: Optional[str] = None, **_):
    queryset = (
        HealthIncident.objects
        .prefetch_related('birds__identifiers')
        .order_by('-date_noticed', '-created_at')
    )
    if outcome and outcome != ALL:
        queryset = queryset.filter(outcome=outcome)

    header = [
        'bird_id', 'bird_name', 'date', 'symptoms', 'diagnosis',
        'treatment', 'outcome', 'notes',
    ]
    rows = [
        [
            str(bird.id),
            bird_display_name(bird),
            incident.date_noticed,
            incident.symptoms,
            incident.diagnosis,
            incident.treatment,
            incident.outcome,
            incident.notes,
        ]
        for incident in queryset
        for bird in incident.birds.all()
    ]
    return header, rows


EXPORTERS = {
    'birds': export_birds,
    'weights': export_weights,
    'eggs': export_eggs,
    'vaccinations': export_vaccinations,
    'health-incidents': export_health_incidents,
}


def build_flat_export(*, export_type: str, **params) -> tuple[list[str], list[list]]:
    """
    Header and rows of a flat data export.

    Args:
        export_type: birds, weights, eggs, vaccinations or health-incidents
        **params: status (birds), start_date/end_date (weights, eggs),
            outcome (health-incidents); others are ignored

    Raises:
        InvalidExportTypeError: If the export type is unknown
    """
    exporter = EXPORTERS.get(export_type)
    if exporter is None:
        raise InvalidExportTypeError(f"Invalid export type: {export_type}")
    return exporter(**params)
