"""Lookup list queries and guarded deletes."""

from django.db import transaction
from django.db.models import Count
from django.db.models.functions import Lower
from decimal import Decimal
from typing import Iterable, Optional
from uuid import UUID
import logging

from apps.birds.models import Bird
from ..models import BirdColor, EggSizeCategory
from .exceptions import ColorInUseError

logger = logging.getLogger(__name__)


def colors_by_breed_preference(*, breed_ids: Iterable[UUID]) -> list[BirdColor]:
    """
    All colours, those most common among birds of the given breeds first.

    Each colour gets a ``usage`` attribute: how many such birds carry it.
    Ties keep alphabetical order.
    """
    usage = dict(
        Bird.objects
        .filter(breed_composition__breed_id__in=list(breed_ids))
        .exclude(color='')
        .annotate(color_key=Lower('color'))
        .values('color_key')
        .annotate(total=Count('id', distinct=True))
        .values_list('color_key', 'total')
    )

    colors = list(BirdColor.objects.order_by('name'))
    for color in colors:
        color.usage = usage.get(color.name.lower(), 0)
    colors.sort(key=lambda color: -color.usage)
    return colors


@transaction.atomic
def delete_bird_color(*, color: BirdColor) -> None:
    """
    Delete a colour no bird uses.

    Raises:
        ColorInUseError: If any bird's colour matches (case-insensitive)
    """
    in_use = Bird.objects.filter(color__iexact=color.name).count()
    if in_use:
        raise ColorInUseError(f"Cannot delete: {in_use} birds are using this color")

    logger.info("Deleted bird color %s", color.name)
    color.delete()


def classify_egg_weight(weight_grams: Decimal) -> Optional[EggSizeCategory]:
    """Active size category whose weight band holds the weight, or None."""
    for category in EggSizeCategory.objects.filter(is_active=True):
        if category.contains(weight_grams):
            return category
    return None
