"""Domain-specific exceptions for breeds services."""


class BreedsServiceError(Exception):
    """Base exception for breeds services."""
    pass


class BreedNotFoundError(BreedsServiceError):
    """Raised when breed does not exist."""
    pass


class DuplicateBreedError(BreedsServiceError):
    """Raised when a breed name or code is already taken."""
    pass


class BreedInUseError(BreedsServiceError):
    """Raised when deleting a breed still used in bird compositions."""
    pass
