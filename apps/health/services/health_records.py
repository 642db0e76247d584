"""Health incident, vaccination and medication records service."""

from django.db import models, transaction
from typing import Iterable, Optional
from uuid import UUID

from apps.birds.models import Bird
from .exceptions import UnknownBirdsError


def resolve_birds(bird_ids: Iterable[UUID]) -> list[Bird]:
    """
    Fetch every bird named in ``bird_ids``.

    Raises:
        UnknownBirdsError: If any id doesn't match a bird
    """
    wanted = {str(bird_id) for bird_id in bird_ids}
    birds = list(Bird.objects.filter(id__in=wanted))
    if len(birds) != len(wanted):
        raise UnknownBirdsError("One or more birds not found")
    return birds


@transaction.atomic
def create_health_record(model: type[models.Model], *, bird_ids: Iterable[UUID], **fields) -> models.Model:
    """
    Create an incident, vaccination or medication and link its birds.

    Args:
        model: HealthIncident, Vaccination or Medication
        bird_ids: Birds the record applies to
        **fields: Model fields

    Returns:
        Created record

    Raises:
        UnknownBirdsError: If any bird doesn't exist
    """
    birds = resolve_birds(bird_ids)
    record = model.objects.create(**fields)
    record.birds.set(birds)
    return record


@transaction.atomic
def update_health_record(
    record: models.Model,
    *,
    bird_ids: Optional[Iterable[UUID]] = None,
    **fields
) -> models.Model:
    """
    Update a health record; the bird list is replaced only when given.

    Raises:
        UnknownBirdsError: If any bird doesn't exist
    """
    birds = resolve_birds(bird_ids) if bird_ids is not None else None

    for field, value in fields.items():
        setattr(record, field, value)
    record.save()

    if birds is not None:
        record.birds.set(birds)
    return record
