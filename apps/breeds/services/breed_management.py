"""Breed CRUD operations service."""

from django.db import transaction
from django.db.models import Q
from uuid import UUID
from typing import Optional, Iterable
import logging

from ..models import Breed, SourceFarm
from .exceptions import BreedNotFoundError, DuplicateBreedError, BreedInUseError

logger = logging.getLogger(__name__)


def _check_unique(name: str, code: str, exclude_id: Optional[UUID] = None) -> None:
    queryset = Breed.objects.filter(
        Q(name__iexact=name.strip()) | Q(code__iexact=code.strip())
    )
    if exclude_id:
        queryset = queryset.exclude(id=exclude_id)
    if queryset.exists():
        raise DuplicateBreedError("Breed with this name or code already exists")


@transaction.atomic
def create_breed(
    *,
    name: str,
    code: str,
    description: str = '',
    varieties: Optional[list] = None,
    source_farms: Optional[Iterable[SourceFarm]] = None
) -> Breed:
    """
    Create a new breed.

    Args:
        name: Breed name (unique, case-insensitive)
        code: Short code (unique, stored upper-case)
        description: Free-text description
        varieties: Known color/pattern varieties
        source_farms: Farms this bloodline comes from

    Returns:
        Created Breed instance

    Raises:
        DuplicateBreedError: If the name or code is taken
    """
    _check_unique(name, code)

    breed = Breed.objects.create(
        name=name.strip(),
        code=code,
        description=description,
        varieties=varieties or [],
    )
    if source_farms:
        breed.source_farms.set(source_farms)

    logger.info("Created breed %s", breed)
    return breed


@transaction.atomic
def update_breed(*, breed_id: UUID, **fields) -> Breed:
    """
    Update a breed.

    Args:
        breed_id: Breed to update
        **fields: Any of name, code, description, varieties, source_farms

    Returns:
        Updated Breed instance

    Raises:
        BreedNotFoundError: If breed doesn't exist
        DuplicateBreedError: If the new name or code is taken
    """
    try:
        breed = Breed.objects.select_for_update().get(id=breed_id)
    except Breed.DoesNotExist:
        raise BreedNotFoundError(f"Breed {breed_id} not found")

    name = fields.get('name', breed.name)
    code = fields.get('code', breed.code)
    _check_unique(name, code, exclude_id=breed.id)

    source_farms = fields.pop('source_farms', None)
    for field, value in fields.items():
        setattr(breed, field, value)
    breed.save()

    if source_farms is not None:
        breed.source_farms.set(source_farms)

    return breed


@transaction.atomic
def delete_breed(*, breed_id: UUID) -> None:
    """
    Delete a breed that no bird composition references.

    Raises:
        BreedNotFoundError: If breed doesn't exist
        BreedInUseError: If birds still carry this breed
    """
    try:
        breed = Breed.objects.get(id=breed_id)
    except Breed.DoesNotExist:
        raise BreedNotFoundError(f"Breed {breed_id} not found")

    if breed.bird_links.exists():
        raise BreedInUseError("Breed is used in bird compositions and cannot be deleted")

    breed.delete()
    logger.info("Deleted breed %s", breed_id)
