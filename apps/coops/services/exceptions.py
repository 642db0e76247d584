"""Domain exceptions for coops app."""


class CoopsServiceError(Exception):
    """Base exception for coop service errors."""
    pass


class CoopNotFoundError(CoopsServiceError):
    """Raised when a coop doesn't exist."""
    pass


class CoopNotEmptyError(CoopsServiceError):
    """Raised when deleting a coop that still houses live birds."""
    pass
