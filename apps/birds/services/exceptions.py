"""Domain-specific exceptions for birds services."""


class BirdsServiceError(Exception):
    """Base exception for birds services."""
    pass


class BirdNotFoundError(BirdsServiceError):
    """Raised when bird does not exist."""
    pass


class InvalidParentError(BirdsServiceError):
    """Raised when a sire/dam is missing, the wrong sex, or the bird itself."""
    pass


class InvalidBreedCompositionError(BirdsServiceError):
    """Raised when a composition names unknown or repeated breeds."""
    pass


class BulkActionError(BirdsServiceError):
    """Raised when a bulk action names an unknown coop or status."""
    pass
