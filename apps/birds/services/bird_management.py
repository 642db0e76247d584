"""Bird CRUD operations service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
from datetime import date
from uuid import UUID
from typing import Optional, Iterable
import logging

from apps.breeds.models import Breed
from apps.coops.models import Coop
from ..models import (
    Bird,
    BirdBreed,
    BirdIdentifier,
    BirdNote,
    BirdSex,
    BirdStatus,
    CoopAssignment,
)
from .breed_composition import calculate_child_breed_composition
from .exceptions import (
    BirdNotFoundError,
    InvalidParentError,
    InvalidBreedCompositionError,
    BulkActionError,
)

User = get_user_model()
logger = logging.getLogger(__name__)

# Sentinel for "argument not supplied" where None is a meaningful value
UNSET = object()


def validate_parents(
    *,
    sire_id: Optional[UUID],
    dam_id: Optional[UUID],
    bird_id: Optional[UUID] = None
) -> tuple[Optional[Bird], Optional[Bird]]:
    """
    Resolve and check a sire/dam pair.

    Args:
        sire_id: Proposed sire, may be None
        dam_id: Proposed dam, may be None
        bird_id: The bird being edited (cannot be its own parent)

    Returns:
        (sire, dam) Bird instances or None

    Raises:
        InvalidParentError: If a parent is missing, the wrong sex,
            or the bird itself
    """
    if bird_id is not None and bird_id in (sire_id, dam_id):
        raise InvalidParentError("A bird cannot be its own parent")

    sire = dam = None

    if sire_id:
        sire = Bird.objects.filter(id=sire_id).first()
        if sire is None:
            raise InvalidParentError("Sire not found")
        if sire.sex != BirdSex.MALE:
            raise InvalidParentError("Sire must be male")

    if dam_id:
        dam = Bird.objects.filter(id=dam_id).first()
        if dam is None:
            raise InvalidParentError("Dam not found")
        if dam.sex != BirdSex.FEMALE:
            raise InvalidParentError("Dam must be female")

    return sire, dam


def composition_from_parents(
    sire: Optional[Bird],
    dam: Optional[Bird]
) -> list[dict]:
    """Child composition derived from the parents' stored compositions."""
    return calculate_child_breed_composition(
        sire.get_breed_composition() if sire else None,
        dam.get_breed_composition() if dam else None,
    )


def _write_breed_composition(bird: Bird, composition: Iterable[dict]) -> None:
    """Replace the bird's BirdBreed rows."""
    entries = [
        {'breed_id': str(entry['breed_id']), 'percentage': entry['percentage']}
        for entry in composition
    ]
    breed_ids = [entry['breed_id'] for entry in entries]

    if len(set(breed_ids)) != len(breed_ids):
        raise InvalidBreedCompositionError("Each breed may appear only once in a composition")

    known = {
        str(pk) for pk in Breed.objects.filter(id__in=breed_ids).values_list('id', flat=True)
    }
    missing = [breed_id for breed_id in breed_ids if breed_id not in known]
    if missing:
        raise InvalidBreedCompositionError(f"Unknown breed: {missing[0]}")

    bird.breed_composition.all().delete()
    BirdBreed.objects.bulk_create([
        BirdBreed(bird=bird, breed_id=entry['breed_id'], percentage=entry['percentage'])
        for entry in entries
    ])


def _write_identifiers(bird: Bird, identifiers: Iterable[dict]) -> None:
    """Replace the bird's identifiers."""
    bird.identifiers.all().delete()
    BirdIdentifier.objects.bulk_create([
        BirdIdentifier(
            bird=bird,
            id_type=identifier['id_type'],
            id_value=identifier['id_value'],
            notes=identifier.get('notes', ''),
        )
        for identifier in identifiers
    ])


def move_bird_to_coop(
    *,
    bird: Bird,
    coop: Optional[Coop],
    moved_on: Optional[date] = None
) -> Optional[CoopAssignment]:
    """
    Close the bird's open coop assignment and open a new one.

    Args:
        bird: Bird to move
        coop: Destination coop, or None to take the bird out of all coops
        moved_on: Date of the move (defaults to today)

    Returns:
        The new CoopAssignment, or None when the bird leaves all coops
    """
    moved_on = moved_on or timezone.localdate()

    CoopAssignment.objects.filter(
        bird=bird,
        removed_at__isnull=True
    ).update(removed_at=moved_on)

    bird.coop = coop
    bird.save(update_fields=['coop', 'updated_at'])

    if coop is None:
        return None

    logger.info("Moved bird %s to coop %s", bird.id, coop.name)
    return CoopAssignment.objects.create(bird=bird, coop=coop, assigned_at=moved_on)


@transaction.atomic
def create_bird(
    *,
    created_by: User,
    sex: str = BirdSex.UNKNOWN,
    name: str = '',
    status: str = BirdStatus.ACTIVE,
    hatch_date: Optional[date] = None,
    sire_id: Optional[UUID] = None,
    dam_id: Optional[UUID] = None,
    coop: Optional[Coop] = None,
    color: str = '',
    comb_type: str = '',
    early_life_notes: str = '',
    identifiers: Optional[list[dict]] = None,
    breed_composition: Optional[list[dict]] = None,
    breed_override: Optional[bool] = None
) -> Bird:
    """
    Create a bird with its identifiers, breed composition and coop placement.

    All rows are written in one transaction.

    Args:
        created_by: User recording the bird
        sex: Bird sex
        name: Optional name
        status: Initial status
        hatch_date: Hatch date
        sire_id: Father (must be male)
        dam_id: Mother (must be female)
        coop: Initial coop
        color: Plumage color
        comb_type: Comb type
        early_life_notes: Free text
        identifiers: List of {'id_type', 'id_value', 'notes'}
        breed_composition: Explicit composition; derived from the parents
            when omitted
        breed_override: Marks the composition as hand-entered; defaults to
            True exactly when a composition is supplied

    Returns:
        Created Bird instance

    Raises:
        InvalidParentError: If sire/dam are invalid
        InvalidBreedCompositionError: If the composition names unknown breeds
    """
    sire, dam = validate_parents(sire_id=sire_id, dam_id=dam_id)

    if breed_override is None:
        breed_override = breed_composition is not None

    bird = Bird.objects.create(
        name=name,
        sex=sex,
        status=status,
        hatch_date=hatch_date,
        sire=sire,
        dam=dam,
        color=color,
        comb_type=comb_type,
        early_life_notes=early_life_notes,
        breed_override=breed_override,
        created_by=created_by,
    )

    if identifiers:
        _write_identifiers(bird, identifiers)

    if breed_composition is None and not breed_override:
        breed_composition = composition_from_parents(sire, dam)
    if breed_composition:
        _write_breed_composition(bird, breed_composition)

    if coop is not None:
        move_bird_to_coop(bird=bird, coop=coop)

    logger.info("Created bird %s (%s) by %s", bird.id, bird.sex, created_by)
    return bird


@transaction.atomic
def update_bird(
    *,
    bird_id: UUID,
    sire_id=UNSET,
    dam_id=UNSET,
    coop=UNSET,
    identifiers: Optional[list[dict]] = None,
    breed_composition: Optional[list[dict]] = None,
    breed_override: Optional[bool] = None,
    **fields
) -> Bird:
    """
    Update a bird.

    Parents are re-validated when changed. A coop change closes the open
    assignment and opens a new one. Supplying identifiers replaces them.
    Supplying a composition replaces it and marks it hand-entered; changing
    parents of a bird without an override recomputes it.

    Args:
        bird_id: Bird to update
        sire_id: New sire id (None clears it)
        dam_id: New dam id (None clears it)
        coop: New coop (None removes the bird from all coops)
        identifiers: Replacement identifiers
        breed_composition: Replacement composition
        breed_override: Explicit override flag
        **fields: Plain Bird fields (name, sex, status, hatch_date, ...)

    Returns:
        Updated Bird instance

    Raises:
        BirdNotFoundError: If bird doesn't exist
        InvalidParentError: If new parents are invalid
        InvalidBreedCompositionError: If the composition is invalid
    """
    try:
        bird = Bird.objects.select_for_update().get(id=bird_id)
    except Bird.DoesNotExist:
        raise BirdNotFoundError(f"Bird {bird_id} not found")

    parents_changed = False
    if sire_id is not UNSET or dam_id is not UNSET:
        new_sire_id = bird.sire_id if sire_id is UNSET else sire_id
        new_dam_id = bird.dam_id if dam_id is UNSET else dam_id
        sire, dam = validate_parents(sire_id=new_sire_id, dam_id=new_dam_id, bird_id=bird.id)
        parents_changed = (new_sire_id, new_dam_id) != (bird.sire_id, bird.dam_id)
        bird.sire, bird.dam = sire, dam

    for field, value in fields.items():
        setattr(bird, field, value)

    if breed_override is not None:
        bird.breed_override = breed_override
    if breed_composition is not None and breed_override is None:
        bird.breed_override = True

    bird.save()

    if identifiers is not None:
        _write_identifiers(bird, identifiers)

    if breed_composition is not None:
        _write_breed_composition(bird, breed_composition)
    elif parents_changed and not bird.breed_override:
        _write_breed_composition(bird, composition_from_parents(bird.sire, bird.dam))

    if coop is not UNSET and getattr(coop, 'id', None) != bird.coop_id:
        move_bird_to_coop(bird=bird, coop=coop)

    return bird


@transaction.atomic
def set_breed_composition(*, bird_id: UUID, breed_composition: list[dict]) -> Bird:
    """
    Replace a bird's composition by hand and mark it as overridden.

    Raises:
        BirdNotFoundError: If bird doesn't exist
        InvalidBreedCompositionError: If the composition is invalid
    """
    return update_bird(bird_id=bird_id, breed_composition=breed_composition, breed_override=True)


@transaction.atomic
def archive_bird(*, bird_id: UUID) -> Bird:
    """
    Soft delete a bird (status ARCHIVED) and take it out of its coop.

    Raises:
        BirdNotFoundError: If bird doesn't exist
    """
    try:
        bird = Bird.objects.select_for_update().get(id=bird_id)
    except Bird.DoesNotExist:
        raise BirdNotFoundError(f"Bird {bird_id} not found")

    bird.status = BirdStatus.ARCHIVED
    bird.save(update_fields=['status', 'updated_at'])

    if bird.coop_id is not None:
        move_bird_to_coop(bird=bird, coop=None)

    logger.info("Archived bird %s", bird.id)
    return bird


def add_bird_note(*, bird_id: UUID, content: str, created_by: User) -> BirdNote:
    """
    Attach a note to a bird.

    Raises:
        BirdNotFoundError: If bird doesn't exist
    """
    if not Bird.objects.filter(id=bird_id).exists():
        raise BirdNotFoundError(f"Bird {bird_id} not found")

    return BirdNote.objects.create(bird_id=bird_id, content=content, created_by=created_by)


BULK_ACTIONS = ('move', 'status', 'delete')


@transaction.atomic
def bulk_update_birds(*, action: str, bird_ids: list[UUID], value: Optional[str] = None) -> int:
    """
    Apply one action to many birds.

    Args:
        action: 'move' (value is a coop id, empty takes the birds out of
            their coops), 'status' (value is a BirdStatus) or 'delete'
            (archive)
        bird_ids: Birds to update; unknown ids are skipped
        value: Action argument

    Returns:
        Number of birds updated

    Raises:
        BulkActionError: If the action, coop or status is invalid
    """
    if action not in BULK_ACTIONS:
        raise BulkActionError(f"Unknown action: {action}")

    birds = list(Bird.objects.select_for_update().filter(id__in=bird_ids))

    if action == 'move':
        coop = None
        if value:
            try:
                coop = Coop.objects.filter(id=UUID(str(value))).first()
            except ValueError:
                coop = None
            if coop is None:
                raise BulkActionError("Coop not found")
        for bird in birds:
            move_bird_to_coop(bird=bird, coop=coop)

    elif action == 'status':
        if value not in BirdStatus.values:
            raise BulkActionError("Invalid status")
        Bird.objects.filter(id__in=[bird.id for bird in birds]).update(
            status=value,
            updated_at=timezone.now(),
        )

    else:
        for bird in birds:
            archive_bird(bird_id=bird.id)

    logger.info("Bulk %s applied to %d birds", action, len(birds))
    return len(birds)
