"""Services for health business logic."""

from .exceptions import (
    HealthServiceError,
    UnknownBirdsError,
)
from .health_records import (
    resolve_birds,
    create_health_record,
    update_health_record,
)
from .health_summary import (
    upcoming_vaccinations,
    active_medications,
    birds_in_withdrawal,
    get_health_summary,
)

__all__ = [
    # Exceptions
    'HealthServiceError',
    'UnknownBirdsError',
    # Health Records
    'resolve_birds',
    'create_health_record',
    'update_health_record',
    # Health Summary
    'upcoming_vaccinations',
    'active_medications',
    'birds_in_withdrawal',
    'get_health_summary',
]
