"""Services for birds business logic."""

from .exceptions import (
    BirdsServiceError,
    BirdNotFoundError,
    InvalidParentError,
    InvalidBreedCompositionError,
    BulkActionError,
)
from .breed_composition import (
    calculate_child_breed_composition,
    get_total_percentage,
    normalize_breed_percentages,
    get_primary_breed,
    is_complete,
    round_percentage,
)
from .bird_management import (
    validate_parents,
    composition_from_parents,
    move_bird_to_coop,
    create_bird,
    update_bird,
    set_breed_composition,
    archive_bird,
    add_bird_note,
    bulk_update_birds,
)
from .bird_search import (
    search_birds,
    get_offspring,
    get_bird_by_id,
    months_ago,
    find_bird_by_rfid,
)

__all__ = [
    # Exceptions
    'BirdsServiceError',
    'BirdNotFoundError',
    'InvalidParentError',
    'InvalidBreedCompositionError',
    'BulkActionError',
    # Breed Composition
    'calculate_child_breed_composition',
    'get_total_percentage',
    'normalize_breed_percentages',
    'get_primary_breed',
    'is_complete',
    'round_percentage',
    # Bird Management
    'validate_parents',
    'composition_from_parents',
    'move_bird_to_coop',
    'create_bird',
    'update_bird',
    'set_breed_composition',
    'archive_bird',
    'add_bird_note',
    'bulk_update_birds',
    # Bird Search
    'search_birds',
    'get_offspring',
    'get_bird_by_id',
    'months_ago',
    'find_bird_by_rfid',
]
