"""Services for breeds business logic."""

from .exceptions import (
    BreedsServiceError,
    BreedNotFoundError,
    DuplicateBreedError,
    BreedInUseError,
)
from .breed_management import (
    create_breed,
    update_breed,
    delete_breed,
)

__all__ = [
    # Exceptions
    'BreedsServiceError',
    'BreedNotFoundError',
    'DuplicateBreedError',
    'BreedInUseError',
    # Breed Management
    'create_breed',
    'update_breed',
    'delete_breed',
]
