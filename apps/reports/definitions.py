"""Report definitions for the birds, eggs and health reports."""

from django.db.models import OuterRef, Q, Subquery

from apps.birds.models import Bird, BirdIdentifier, IdentifierType
from apps.birds.serializers import breed_composition_payload
from apps.birds.services import get_primary_breed
from apps.breeds.models import Breed
from apps.coops.models import Coop
from apps.eggs.models import EggRecord
from apps.health.models import HealthIncident
from .exceptions import InvalidReportTypeError
from .models import ReportType
from .query import (
    ReportDefinition,
    in_filter,
    date_filter,
    name_filter,
    contains_any_filter,
)


def _values(queryset, field_name):
    return lambda: queryset.values_list(field_name, flat=True)


# =============================================================================
# Birds
# =============================================================================

def _first_identifier(id_type):
    return Subquery(
        BirdIdentifier.objects
        .filter(bird=OuterRef('pk'), id_type=id_type)
        .order_by('created_at')
        .values('id_value')[:1]
    )


def _bird_queryset():
    return (
        Bird.objects
        .select_related('coop', 'sire', 'dam')
        .prefetch_related('identifiers', 'breed_composition__breed')
        .annotate(
            band_number_sort=_first_identifier(IdentifierType.BAND),
            wingband_sort=_first_identifier(IdentifierType.WING_BAND),
        )
    )


def identifier_filter(id_type):
    """Birds carrying an identifier of ``id_type`` with one of the values."""
    def apply(queryset, values):
        bird_ids = list(
            BirdIdentifier.objects
            .filter(id_type=id_type, id_value__in=values)
            .values_list('bird_id', flat=True)
        )
        if not bird_ids:
            return queryset.none()
        return queryset.filter(id__in=bird_ids)
    return apply


def breed_filter(queryset, values):
    """Birds with any of the breeds (by name or code) in their composition."""
    return queryset.filter(
        Q(breed_composition__breed__name__in=values)
        | Q(breed_composition__breed__code__in=values)
    ).distinct()


def _primary_breed_name(bird):
    primary = get_primary_breed(breed_composition_payload(bird))
    return primary['breed_name'] if primary else None


def _name(related):
    return related.name if related is not None else None


BIRD_REPORT = ReportDefinition(
    report_type=ReportType.BIRDS,
    get_queryset=_bird_queryset,
    filters={
        'band_number': identifier_filter(IdentifierType.BAND),
        'wingband_color': identifier_filter(IdentifierType.WING_BAND),
        'name': in_filter('name'),
        'sex': in_filter('sex'),
        'status': in_filter('status'),
        'hatch_date': date_filter('hatch_date'),
        'color': in_filter('color'),
        'comb_type': in_filter('comb_type'),
        'coop': name_filter(Coop, 'coop'),
        'breed': breed_filter,
        'sire': name_filter(Bird, 'sire'),
        'dam': name_filter(Bird, 'dam'),
        'created_at': date_filter('created_at__date'),
    },
    sort_fields={
        'band_number': 'band_number_sort',
        'wingband_color': 'wingband_sort',
        'name': 'name',
        'sex': 'sex',
        'status': 'status',
        'hatch_date': 'hatch_date',
        'color': 'color',
        'comb_type': 'comb_type',
        'coop': 'coop__name',
        # Older birds have earlier hatch dates
        'age': '-hatch_date',
        'created_at': 'created_at',
    },
    default_ordering=('-created_at',),
    accessors={
        'band_number': lambda bird: bird.get_identifier(IdentifierType.BAND),
        'wingband_color': lambda bird: bird.get_identifier(IdentifierType.WING_BAND),
        'name': lambda bird: bird.name,
        'sex': lambda bird: bird.sex,
        'status': lambda bird: bird.status,
        'hatch_date': lambda bird: bird.hatch_date,
        'color': lambda bird: bird.color,
        'comb_type': lambda bird: bird.comb_type,
        'coop': lambda bird: _name(bird.coop),
        'breed': _primary_breed_name,
        'sire': lambda bird: _name(bird.sire),
        'dam': lambda bird: _name(bird.dam),
        'age': lambda bird: bird.age_in_months(),
        'created_at': lambda bird: bird.created_at,
    },
    value_sources={
        'band_number': _values(
            BirdIdentifier.objects.filter(id_type=IdentifierType.BAND), 'id_value'
        ),
        'wingband_color': _values(
            BirdIdentifier.objects.filter(id_type=IdentifierType.WING_BAND), 'id_value'
        ),
        'name': _values(Bird.objects.all(), 'name'),
        'hatch_date': _values(Bird.objects.all(), 'hatch_date'),
        'color': _values(Bird.objects.all(), 'color'),
        'coop': _values(Coop.objects.all(), 'name'),
        'breed': _values(Breed.objects.filter(bird_links__isnull=False), 'name'),
        'sire': _values(Bird.objects.filter(sired_offspring__isnull=False), 'name'),
        'dam': _values(Bird.objects.filter(dam_offspring__isnull=False), 'name'),
        'created_at': _values(Bird.objects.all(), 'created_at__date'),
    },
)


# =============================================================================
# Eggs
# =============================================================================

EGG_REPORT = ReportDefinition(
    report_type=ReportType.EGGS,
    get_queryset=lambda: EggRecord.objects.select_related('bird'),
    filters={
        'bird_name': name_filter(Bird, 'bird'),
        'date': date_filter('date'),
        'egg_mark': in_filter('egg_mark'),
        'shell_quality': in_filter('shell_quality'),
    },
    sort_fields={
        'bird_name': 'bird__name',
        'date': 'date',
        'egg_mark': 'egg_mark',
        'weight_grams': 'weight_grams',
        'shell_quality': 'shell_quality',
    },
    default_ordering=('-date',),
    accessors={
        'bird_name': lambda egg: egg.bird.name,
        'date': lambda egg: egg.date,
        'egg_mark': lambda egg: egg.egg_mark,
        'weight_grams': lambda egg: egg.weight_grams,
        'shell_quality': lambda egg: egg.shell_quality,
        'notes': lambda egg: egg.notes,
    },
    value_sources={
        'bird_name': _values(Bird.objects.filter(eggs__isnull=False), 'name'),
        'date': _values(EggRecord.objects.all(), 'date'),
        'egg_mark': _values(EggRecord.objects.all(), 'egg_mark'),
    },
)


# =============================================================================
# Health
# =============================================================================

def _health_queryset():
    first_bird_name = (
        Bird.objects
        .filter(health_incidents=OuterRef('pk'))
        .order_by('name')
        .values('name')[:1]
    )
    return (
        HealthIncident.objects
        .prefetch_related('birds')
        .annotate(bird_name_sort=Subquery(first_bird_name))
    )


def _incident_bird_names(incident):
    names = sorted(bird.name for bird in incident.birds.all() if bird.name)
    return ', '.join(names)


HEALTH_REPORT = ReportDefinition(
    report_type=ReportType.HEALTH,
    get_queryset=_health_queryset,
    filters={
        'bird_name': name_filter(Bird, 'birds'),
        'date_noticed': date_filter('date_noticed'),
        'symptoms': contains_any_filter('symptoms'),
        'diagnosis': contains_any_filter('diagnosis'),
        'treatment': contains_any_filter('treatment'),
        'outcome': in_filter('outcome'),
    },
    sort_fields={
        'bird_name': 'bird_name_sort',
        'date_noticed': 'date_noticed',
        'outcome': 'outcome',
    },
    default_ordering=('-date_noticed',),
    accessors={
        'bird_name': _incident_bird_names,
        'date_noticed': lambda incident: incident.date_noticed,
        'symptoms': lambda incident: incident.symptoms,
        'diagnosis': lambda incident: incident.diagnosis,
        'treatment': lambda incident: incident.treatment,
        'outcome': lambda incident: incident.outcome,
        'notes': lambda incident: incident.notes,
    },
    value_sources={
        'bird_name': _values(Bird.objects.filter(health_incidents__isnull=False), 'name'),
        'date_noticed': _values(HealthIncident.objects.all(), 'date_noticed'),
        'symptoms': _values(HealthIncident.objects.all(), 'symptoms'),
        'diagnosis': _values(HealthIncident.objects.all(), 'diagnosis'),
        'treatment': _values(HealthIncident.objects.all(), 'treatment'),
    },
)


REPORT_DEFINITIONS = {
    ReportType.BIRDS: BIRD_REPORT,
    ReportType.EGGS: EGG_REPORT,
    ReportType.HEALTH: HEALTH_REPORT,
}


def get_report_definition(report_type) -> ReportDefinition:
    """
    Definition of a report type.

    Raises:
        InvalidReportTypeError: If the type is not birds, eggs or health
    """
    try:
        return REPORT_DEFINITIONS[report_type]
    except KeyError:
        raise InvalidReportTypeError(f"Invalid report type: {report_type}")
