"""Domain exceptions for eggs app."""


class EggsServiceError(Exception):
    """Base exception for egg service errors."""
    pass


class LayingBirdNotFoundError(EggsServiceError):
    """Raised when the laying bird doesn't exist."""
    pass


class NotAHenError(EggsServiceError):
    """Raised when an egg is recorded for a bird that isn't female."""
    pass


class EggNotFoundError(EggsServiceError):
    """Raised when an egg record doesn't exist."""
    pass


class AlreadyIncubatingError(EggsServiceError):
    """Raised when an egg already has an incubation record."""
    pass


class IncubationNotFoundError(EggsServiceError):
    """Raised when an incubation record doesn't exist."""
    pass
