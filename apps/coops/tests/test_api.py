import pytest
from django.urls import reverse
from rest_framework import status
from apps.birds.models import BirdStatus
from apps.birds.services import move_bird_to_coop
from apps.coops.models import Coop


@pytest.mark.django_db
class TestCoopList:
    """Tests for GET /api/coops/"""

    def test_occupancy_counts_live_birds(self, worker_client, coop, rooster, hen):
        move_bird_to_coop(bird=rooster, coop=coop)
        move_bird_to_coop(bird=hen, coop=coop)
        hen.status = BirdStatus.SOLD
        hen.save()

        url = reverse('coops:coop-detail', kwargs={'pk': coop.id})
        response = worker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['occupancy'] == 1
        assert response.data['is_full'] is False

    def test_is_full(self, worker_client, rooster):
        small = Coop.objects.create(name='Solo pen', capacity=1)
        move_bird_to_coop(bird=rooster, coop=small)

        response = worker_client.get(reverse('coops:coop-list'))

        assert response.data['results'][0]['is_full'] is True

    def test_filter_by_type(self, worker_client, coop):
        Coop.objects.create(name='Brooder 1', coop_type='BROODER')

        response = worker_client.get(reverse('coops:coop-list'), {'coop_type': 'BROODER'})

        assert response.data['count'] == 1

    def test_residents(self, worker_client, coop, rooster, hen):
        move_bird_to_coop(bird=rooster, coop=coop)

        url = reverse('coops:coop-birds', kwargs={'pk': coop.id})
        response = worker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [bird['id'] for bird in response.data] == [str(rooster.id)]


@pytest.mark.django_db
class TestCoopWrite:
    """Tests for POST/PATCH/DELETE /api/coops/"""

    def test_create_coop(self, worker_client):
        data = {'name': 'Layer House 1', 'capacity': 30, 'coop_type': 'LAYER_HOUSE'}
        response = worker_client.post(reverse('coops:coop-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['occupancy'] == 0

    def test_duplicate_name(self, worker_client, coop):
        response = worker_client.post(reverse('coops:coop-list'), {'name': 'Pen A'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('name:')

    def test_cannot_delete_occupied_coop(self, owner_client, coop, rooster):
        move_bird_to_coop(bird=rooster, coop=coop)

        response = owner_client.delete(reverse('coops:coop-detail', kwargs={'pk': coop.id}))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Coop.objects.filter(id=coop.id).exists()

    def test_delete_empty_coop(self, owner_client, coop):
        response = owner_client.delete(reverse('coops:coop-detail', kwargs={'pk': coop.id}))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Coop.objects.filter(id=coop.id).exists()
