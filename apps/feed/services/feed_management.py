"""Feed inventory and consumption service."""

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID
import logging

from apps.coops.models import Coop
from ..models import FeedInventory, FeedConsumption
from .exceptions import FeedNotFoundError, InsufficientFeedError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def add_feed_stock(
    *,
    feed_type: str,
    quantity_kg: Decimal,
    brand: str = '',
    cost_per_kg: Optional[Decimal] = None,
    reorder_level: Optional[Decimal] = None
) -> tuple[FeedInventory, bool]:
    """
    Add stock, merging into an existing row of the same type and brand.

    Cost and reorder level only overwrite the stored values when given.

    Args:
        feed_type: Feed type
        quantity_kg: Kilograms added
        brand: Brand name, blank when unbranded
        cost_per_kg: Purchase price per kilogram
        reorder_level: Stock level that triggers a low-stock alert

    Returns:
        (inventory row, created) tuple
    """
    brand = (brand or '').strip()

    feed = (
        FeedInventory.objects
        .select_for_update()
        .filter(feed_type=feed_type, brand=brand)
        .first()
    )

    if feed is None:
        feed = FeedInventory.objects.create(
            feed_type=feed_type,
            brand=brand,
            quantity_kg=quantity_kg,
            cost_per_kg=cost_per_kg,
            reorder_level=reorder_level,
        )
        logger.info("Added new feed stock %s: %skg", feed, quantity_kg)
        return feed, True

    feed.quantity_kg += quantity_kg
    if cost_per_kg is not None:
        feed.cost_per_kg = cost_per_kg
    if reorder_level is not None:
        feed.reorder_level = reorder_level
    feed.save()

    logger.info("Merged %skg into feed stock %s (now %skg)", quantity_kg, feed, feed.quantity_kg)
    return feed, False


@transaction.atomic
def record_feed_consumption(
    *,
    coop: Coop,
    feed_inventory_id: UUID,
    quantity_kg: Decimal,
    recorded_by: User,
    date: Optional[date] = None,
    notes: str = ''
) -> FeedConsumption:
    """
    Record feed given to a coop and take it out of stock.

    The inventory row is locked for the check and decrement so concurrent
    requests cannot overdraw it.

    Raises:
        FeedNotFoundError: If the inventory row doesn't exist
        InsufficientFeedError: If the stock is short
    """
    try:
        feed = FeedInventory.objects.select_for_update().get(id=feed_inventory_id)
    except FeedInventory.DoesNotExist:
        raise FeedNotFoundError("Feed not found")

    if feed.quantity_kg < quantity_kg:
        logger.warning(
            "Rejected feed consumption of %skg from %s: only %skg left",
            quantity_kg, feed, feed.quantity_kg
        )
        raise InsufficientFeedError("Insufficient feed in inventory")

    feed.quantity_kg -= quantity_kg
    feed.save(update_fields=['quantity_kg', 'updated_at'])

    consumption = FeedConsumption.objects.create(
        coop=coop,
        feed_inventory=feed,
        date=date or timezone.localdate(),
        quantity_kg=quantity_kg,
        notes=notes,
        recorded_by=recorded_by,
    )

    logger.info("Coop %s consumed %skg of %s", coop.name, quantity_kg, feed)
    return consumption
