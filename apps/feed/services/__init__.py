"""Services for feed business logic."""

from .exceptions import (
    FeedServiceError,
    FeedNotFoundError,
    InsufficientFeedError,
)
from .feed_management import (
    add_feed_stock,
    record_feed_consumption,
)

__all__ = [
    # Exceptions
    'FeedServiceError',
    'FeedNotFoundError',
    'InsufficientFeedError',
    # Feed Management
    'add_feed_stock',
    'record_feed_consumption',
]
