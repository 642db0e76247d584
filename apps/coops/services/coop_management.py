"""Coop queries and lifecycle operations."""

from django.db import transaction
from django.db.models import Count, Q, QuerySet
from uuid import UUID
import logging

from apps.birds.models import Bird, LIVE_STATUSES
from ..models import Coop
from .exceptions import CoopNotFoundError, CoopNotEmptyError

logger = logging.getLogger(__name__)


def coops_with_occupancy() -> QuerySet[Coop]:
    """Coops annotated with ``occupancy``: live birds currently housed."""
    return Coop.objects.annotate(
        occupancy=Count('birds', filter=Q(birds__status__in=LIVE_STATUSES))
    )


def get_coop_residents(*, coop_id: UUID) -> QuerySet[Bird]:
    """Live birds currently in the coop."""
    return (
        Bird.objects
        .live()
        .filter(coop_id=coop_id)
        .prefetch_related('identifiers', 'breed_composition__breed')
    )


@transaction.atomic
def delete_coop(*, coop_id: UUID) -> None:
    """
    Delete a coop that holds no live birds.

    Sold or deceased birds still pointing at the coop have it cleared.

    Raises:
        CoopNotFoundError: If coop doesn't exist
        CoopNotEmptyError: If live birds are still assigned
    """
    try:
        coop = Coop.objects.select_for_update().get(id=coop_id)
    except Coop.DoesNotExist:
        raise CoopNotFoundError(f"Coop {coop_id} not found")

    if coop.birds.live().exists():
        raise CoopNotEmptyError("Cannot delete a coop that still houses active birds")

    logger.info("Deleted coop %s", coop.name)
    coop.delete()
