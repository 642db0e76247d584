"""Incubation tracking service."""

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction
from datetime import date, timedelta
from uuid import UUID
import logging

from ..models import EggRecord, IncubationRecord, IncubationOutcome
from .exceptions import (
    EggNotFoundError,
    AlreadyIncubatingError,
    IncubationNotFoundError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


def calculate_expected_hatch_date(set_date: date) -> date:
    """Set date plus the incubation period."""
    return set_date + timedelta(days=settings.INCUBATION_DAYS)


@transaction.atomic
def start_incubation(
    *,
    egg_id: UUID,
    set_date: date,
    created_by: User,
    notes: str = ''
) -> IncubationRecord:
    """
    Put an egg in the incubator.

    Args:
        egg_id: Egg record to incubate
        set_date: Day the egg was set
        created_by: Owner starting the incubation
        notes: Free text

    Returns:
        Created IncubationRecord with its expected hatch date

    Raises:
        EggNotFoundError: If the egg doesn't exist
        AlreadyIncubatingError: If the egg is already incubating
    """
    try:
        egg = EggRecord.objects.select_for_update().get(id=egg_id)
    except EggRecord.DoesNotExist:
        raise EggNotFoundError("Egg record not found")

    if IncubationRecord.objects.filter(egg=egg).exists():
        raise AlreadyIncubatingError("This egg is already in incubation")

    incubation = IncubationRecord.objects.create(
        egg=egg,
        set_date=set_date,
        expected_hatch_date=calculate_expected_hatch_date(set_date),
        notes=notes,
        created_by=created_by,
    )

    logger.info("Egg %s set for incubation, due %s", egg.id, incubation.expected_hatch_date)
    return incubation


@transaction.atomic
def update_incubation(*, incubation_id: UUID, **fields) -> IncubationRecord:
    """
    Update an incubation record.

    Changing the set date moves the expected hatch date with it.

    Args:
        incubation_id: Record to update
        **fields: Any of set_date, actual_hatch_date, outcome, chick, notes

    Returns:
        Updated IncubationRecord

    Raises:
        IncubationNotFoundError: If the record doesn't exist
    """
    try:
        incubation = IncubationRecord.objects.select_for_update().get(id=incubation_id)
    except IncubationRecord.DoesNotExist:
        raise IncubationNotFoundError(f"Incubation {incubation_id} not found")

    for field, value in fields.items():
        setattr(incubation, field, value)

    if 'set_date' in fields:
        incubation.expected_hatch_date = calculate_expected_hatch_date(incubation.set_date)

    incubation.save()
    return incubation


def active_incubations():
    """Incubations still waiting on a result."""
    return IncubationRecord.objects.filter(outcome=IncubationOutcome.PENDING)
