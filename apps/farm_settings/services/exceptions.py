"""Domain exceptions for farm settings."""


class FarmSettingsServiceError(Exception):
    """Base exception for farm settings services."""
    pass


class ColorInUseError(FarmSettingsServiceError):
    """Raised when deleting a colour that birds still carry."""
    pass
