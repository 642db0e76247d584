"""Bird search and filtering service."""

from django.db.models import Q, QuerySet
from django.utils import timezone
from datetime import date
from typing import Optional
from uuid import UUID
import calendar

from ..models import Bird, IdentifierType
from .exceptions import BirdNotFoundError


def months_ago(months: int, today: Optional[date] = None) -> date:
    """Same day-of-month ``months`` calendar months back, clamped to month end."""
    today = today or timezone.localdate()
    month_index = today.year * 12 + (today.month - 1) - months
    year, month0 = divmod(month_index, 12)
    month = month0 + 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def search_birds(
    *,
    search: Optional[str] = None,
    status: Optional[str] = None,
    sex: Optional[str] = None,
    coop: Optional[UUID] = None,
    parent: Optional[UUID] = None,
    color: Optional[str] = None,
    breed: Optional[UUID] = None,
    source_farm: Optional[UUID] = None,
    age_min: Optional[int] = None,
    age_max: Optional[int] = None,
    include_archived: bool = False
) -> QuerySet[Bird]:
    """
    Search and filter birds.

    Args:
        search: Matches bird name or any identifier value
        status: Exact status; ARCHIVED birds only appear when asked for
        sex: Exact sex
        coop: Current coop id
        parent: Sire or dam id (lists that parent's offspring)
        color: Color substring
        breed: Birds carrying this breed in their composition
        source_farm: Birds carrying any breed sourced from this farm
        age_min: Minimum age in months
        age_max: Maximum age in months
        include_archived: Include soft-deleted birds

    Returns:
        Filtered QuerySet of Bird, newest first
    """
    queryset = Bird.objects.select_related(
        'coop', 'sire', 'dam'
    ).prefetch_related('identifiers', 'breed_composition__breed')

    if status:
        queryset = queryset.filter(status=status)
    elif not include_archived:
        queryset = queryset.not_archived()

    if search:
        queryset = queryset.filter(
            Q(name__icontains=search) |
            Q(identifiers__id_value__icontains=search)
        )

    if sex:
        queryset = queryset.filter(sex=sex)

    if coop:
        queryset = queryset.filter(coop_id=coop)

    if parent:
        queryset = queryset.filter(Q(sire_id=parent) | Q(dam_id=parent))

    if color:
        queryset = queryset.filter(color__icontains=color)

    if breed:
        queryset = queryset.filter(breed_composition__breed_id=breed)

    if source_farm:
        queryset = queryset.filter(breed_composition__breed__source_farms__id=source_farm)

    today = timezone.localdate()
    if age_min is not None:
        queryset = queryset.filter(hatch_date__lte=months_ago(age_min, today))
    if age_max is not None:
        queryset = queryset.filter(hatch_date__gte=months_ago(age_max, today))

    return queryset.distinct()


def get_offspring(*, bird_id: UUID) -> QuerySet[Bird]:
    """Birds whose sire or dam is the given bird."""
    return (
        Bird.objects
        .filter(Q(sire_id=bird_id) | Q(dam_id=bird_id))
        .select_related('coop', 'sire', 'dam')
        .prefetch_related('identifiers', 'breed_composition__breed')
        .order_by('hatch_date', 'created_at')
    )


def get_bird_by_id(*, bird_id: UUID) -> Bird:
    """
    Fetch a single bird with its relations.

    Raises:
        BirdNotFoundError: If the bird doesn't exist
    """
    try:
        return Bird.objects.select_related('coop', 'sire', 'dam').prefetch_related(
            'identifiers', 'breed_composition__breed'
        ).get(id=bird_id)
    except Bird.DoesNotExist:
        raise BirdNotFoundError(f"Bird {bird_id} not found")


def find_bird_by_rfid(*, tag_id: str) -> Bird:
    """
    Resolve a scanned RFID tag to its bird.

    Raises:
        BirdNotFoundError: If no bird carries the tag
    """
    bird = (
        Bird.objects
        .filter(identifiers__id_type=IdentifierType.RFID, identifiers__id_value=tag_id)
        .prefetch_related('identifiers')
        .first()
    )
    if bird is None:
        raise BirdNotFoundError("Bird not found for this tag")
    return bird
