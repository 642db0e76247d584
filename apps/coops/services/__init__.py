"""Services for coops business logic."""

from .exceptions import (
    CoopsServiceError,
    CoopNotFoundError,
    CoopNotEmptyError,
)
from .coop_management import (
    coops_with_occupancy,
    get_coop_residents,
    delete_coop,
)

__all__ = [
    # Exceptions
    'CoopsServiceError',
    'CoopNotFoundError',
    'CoopNotEmptyError',
    # Coop Management
    'coops_with_occupancy',
    'get_coop_residents',
    'delete_coop',
]
