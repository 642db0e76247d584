"""Services for farm settings lists."""

from .exceptions import (
    FarmSettingsServiceError,
    ColorInUseError,
)
from .settings_management import (
    colors_by_breed_preference,
    delete_bird_color,
    classify_egg_weight,
)

__all__ = [
    # Exceptions
    'FarmSettingsServiceError',
    'ColorInUseError',
    # Settings Management
    'colors_by_breed_preference',
    'delete_bird_color',
    'classify_egg_weight',
]
