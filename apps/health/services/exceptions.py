"""Domain exceptions for health app."""


class HealthServiceError(Exception):
    """Base exception for health service errors."""
    pass


class UnknownBirdsError(HealthServiceError):
    """Raised when a health record names birds that don't exist."""
    pass
