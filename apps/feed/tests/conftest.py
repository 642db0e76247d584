import pytest
from decimal import Decimal
from apps.feed.models import FeedInventory, FeedType


@pytest.fixture
def grower_feed(db):
    """Create and return 50kg of grower feed."""
    return FeedInventory.objects.create(
        feed_type=FeedType.GROWER,
        brand='B-Meg',
        quantity_kg=Decimal('50.00'),
        cost_per_kg=Decimal('38.50'),
        reorder_level=Decimal('10.00'),
    )
