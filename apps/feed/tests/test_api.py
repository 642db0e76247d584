import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.feed.models import FeedInventory, FeedConsumption, FeedType


# =============================================================================
# Inventory Tests
# =============================================================================

@pytest.mark.django_db
class TestFeedInventory:
    """Tests for /api/feed/inventory/"""

    def test_create_new_stock(self, worker_client):
        url = reverse('feed:inventory-list')
        data = {'feed_type': 'STARTER', 'brand': 'Pigrolac', 'quantity_kg': '25.00'}
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['is_low_stock'] is False

    def test_post_merges_same_type_and_brand(self, worker_client, grower_feed):
        url = reverse('feed:inventory-list')
        data = {'feed_type': 'GROWER', 'brand': 'B-Meg', 'quantity_kg': '20.00'}
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert FeedInventory.objects.count() == 1
        grower_feed.refresh_from_db()
        assert grower_feed.quantity_kg == Decimal('70.00')
        assert grower_feed.cost_per_kg == Decimal('38.50')

    def test_other_brand_is_separate(self, worker_client, grower_feed):
        url = reverse('feed:inventory-list')
        data = {'feed_type': 'GROWER', 'quantity_kg': '5.00'}
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert FeedInventory.objects.count() == 2

    def test_quantity_must_be_positive(self, worker_client):
        url = reverse('feed:inventory-list')
        response = worker_client.post(url, {'feed_type': 'LAYER', 'quantity_kg': '0'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'quantity_kg: Quantity must be positive'

    def test_low_stock_filter(self, worker_client, grower_feed):
        FeedInventory.objects.create(
            feed_type=FeedType.LAYER,
            quantity_kg=Decimal('5.00'),
            reorder_level=Decimal('10.00'),
        )
        FeedInventory.objects.create(feed_type=FeedType.BREEDER, quantity_kg=Decimal('0'))
        url = reverse('feed:inventory-list')
        response = worker_client.get(url, {'low_stock': 'true'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['feed_type'] == 'LAYER'
        assert response.data['results'][0]['is_low_stock'] is True


# =============================================================================
# Consumption Tests
# =============================================================================

@pytest.mark.django_db
class TestFeedConsumption:
    """Tests for /api/feed/consumption/"""

    def test_consumption_decrements_stock(self, worker_client, coop, grower_feed):
        url = reverse('feed:consumption-list')
        data = {
            'coop': str(coop.id),
            'feed_inventory_id': str(grower_feed.id),
            'quantity_kg': '12.50',
            'date': '2024-06-01',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['coop_name'] == 'Pen A'
        grower_feed.refresh_from_db()
        assert grower_feed.quantity_kg == Decimal('37.50')

    def test_insufficient_feed(self, worker_client, coop, grower_feed):
        url = reverse('feed:consumption-list')
        data = {
            'coop': str(coop.id),
            'feed_inventory_id': str(grower_feed.id),
            'quantity_kg': '50.01',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Insufficient feed in inventory'
        grower_feed.refresh_from_db()
        assert grower_feed.quantity_kg == Decimal('50.00')
        assert FeedConsumption.objects.count() == 0

    def test_can_use_entire_stock(self, worker_client, coop, grower_feed):
        url = reverse('feed:consumption-list')
        data = {
            'coop': str(coop.id),
            'feed_inventory_id': str(grower_feed.id),
            'quantity_kg': '50.00',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        grower_feed.refresh_from_db()
        assert grower_feed.quantity_kg == Decimal('0.00')

    def test_unknown_feed(self, worker_client, coop):
        url = reverse('feed:consumption-list')
        data = {
            'coop': str(coop.id),
            'feed_inventory_id': '00000000-0000-0000-0000-000000000000',
            'quantity_kg': '1.00',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_filter_by_coop(self, worker_client, coop, grower_feed, worker_user):
        FeedConsumption.objects.create(
            coop=coop, feed_inventory=grower_feed,
            quantity_kg=Decimal('1.00'), recorded_by=worker_user
        )
        url = reverse('feed:consumption-list')

        assert worker_client.get(url, {'coop': str(coop.id)}).data['count'] == 1
        assert worker_client.get(url, {'date_from': '2999-01-01'}).data['count'] == 0
