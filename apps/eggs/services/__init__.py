"""Services for eggs business logic."""

from .exceptions import (
    EggsServiceError,
    LayingBirdNotFoundError,
    NotAHenError,
    EggNotFoundError,
    AlreadyIncubatingError,
    IncubationNotFoundError,
)
from .egg_records import (
    record_egg,
    filter_eggs,
)
from .incubation import (
    calculate_expected_hatch_date,
    start_incubation,
    update_incubation,
    active_incubations,
)

__all__ = [
    # Exceptions
    'EggsServiceError',
    'LayingBirdNotFoundError',
    'NotAHenError',
    'EggNotFoundError',
    'AlreadyIncubatingError',
    'IncubationNotFoundError',
    # Egg Records
    'record_egg',
    'filter_eggs',
    # Incubation
    'calculate_expected_hatch_date',
    'start_incubation',
    'update_incubation',
    'active_incubations',
]
