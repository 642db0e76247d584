"""Egg laying records service."""

from django.contrib.auth import get_user_model
from django.db.models import QuerySet
from django.utils import timezone
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID
import logging

from apps.birds.models import Bird, BirdSex
from ..models import EggRecord
from .exceptions import LayingBirdNotFoundError, NotAHenError

User = get_user_model()
logger = logging.getLogger(__name__)


def record_egg(
    *,
    bird_id: UUID,
    recorded_by: User,
    date: Optional[date] = None,
    egg_mark: str = '',
    weight_grams: Optional[Decimal] = None,
    shell_quality: str = '',
    notes: str = ''
) -> EggRecord:
    """
    Record an egg for a hen.

    Args:
        bird_id: Laying bird (must be female)
        recorded_by: User recording the egg
        date: Laying date (defaults to today)
        egg_mark: Mark written on the shell
        weight_grams: Egg weight
        shell_quality: Shell quality grade
        notes: Free text

    Returns:
        Created EggRecord

    Raises:
        LayingBirdNotFoundError: If the bird doesn't exist
        NotAHenError: If the bird isn't female
    """
    bird = Bird.objects.filter(id=bird_id).only('id', 'sex').first()
    if bird is None:
        raise LayingBirdNotFoundError("Bird not found")
    if bird.sex != BirdSex.FEMALE:
        raise NotAHenError("Eggs can only be recorded for female birds")

    return EggRecord.objects.create(
        bird=bird,
        date=date or timezone.localdate(),
        egg_mark=egg_mark,
        weight_grams=weight_grams,
        shell_quality=shell_quality,
        notes=notes,
        recorded_by=recorded_by,
    )


def filter_eggs(
    *,
    bird: Optional[UUID] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    shell_quality: Optional[str] = None
) -> QuerySet[EggRecord]:
    """Egg records filtered by hen, date range and shell quality."""
    queryset = EggRecord.objects.select_related('bird', 'recorded_by', 'incubation')

    if bird:
        queryset = queryset.filter(bird_id=bird)
    if date_from:
        queryset = queryset.filter(date__gte=date_from)
    if date_to:
        queryset = queryset.filter(date__lte=date_to)
    if shell_quality:
        queryset = queryset.filter(shell_quality=shell_quality)

    return queryset
