"""Domain exceptions for feed app."""


class FeedServiceError(Exception):
    """Base exception for feed service errors."""
    pass


class FeedNotFoundError(FeedServiceError):
    """Raised when a feed inventory row doesn't exist."""
    pass


class InsufficientFeedError(FeedServiceError):
    """Raised when consumption exceeds the stock on hand."""
    pass
