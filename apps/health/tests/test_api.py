import pytest
from datetime import timedelta
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from apps.health.models import HealthIncident, HealthOutcome, Vaccination, Medication


def _today():
    return timezone.localdate()


# =============================================================================
# Incident Tests
# =============================================================================

@pytest.mark.django_db
class TestHealthIncidents:
    """Tests for /api/health/incidents/"""

    def test_report_incident(self, worker_client, rooster, hen, worker_user):
        url = reverse('health:incident-list')
        data = {
            'bird_ids': [str(rooster.id), str(hen.id)],
            'symptoms': 'Sneezing, watery eyes',
            'date_noticed': '2024-06-01',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['outcome'] == HealthOutcome.ONGOING
        assert len(response.data['birds']) == 2
        incident = HealthIncident.objects.get(id=response.data['id'])
        assert incident.reported_by == worker_user

    def test_requires_a_bird(self, worker_client):
        url = reverse('health:incident-list')
        response = worker_client.post(url, {'bird_ids': [], 'symptoms': 'Limping'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'bird_ids: At least one bird is required'

    def test_requires_symptoms(self, worker_client, hen):
        url = reverse('health:incident-list')
        response = worker_client.post(url, {'bird_ids': [str(hen.id)], 'symptoms': ''}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'symptoms: Symptoms are required'

    def test_unknown_bird(self, worker_client, hen):
        url = reverse('health:incident-list')
        data = {
            'bird_ids': [str(hen.id), '00000000-0000-0000-0000-000000000000'],
            'symptoms': 'Limping',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert HealthIncident.objects.count() == 0

    def test_update_outcome(self, worker_client, hen):
        incident = HealthIncident.objects.create(symptoms='Lethargy')
        incident.birds.add(hen)
        url = reverse('health:incident-detail', kwargs={'pk': incident.id})
        response = worker_client.patch(url, {'outcome': 'RECOVERED'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        incident.refresh_from_db()
        assert incident.outcome == HealthOutcome.RECOVERED
        assert list(incident.birds.all()) == [hen]

    def test_filters(self, worker_client, rooster, hen):
        ongoing = HealthIncident.objects.create(symptoms='Cough')
        ongoing.birds.add(rooster, hen)
        recovered = HealthIncident.objects.create(symptoms='Mites', outcome=HealthOutcome.RECOVERED)
        recovered.birds.add(hen)
        url = reverse('health:incident-list')

        assert worker_client.get(url, {'bird': str(hen.id)}).data['count'] == 2
        assert worker_client.get(url, {'bird': str(rooster.id)}).data['count'] == 1
        assert worker_client.get(url, {'outcome': 'RECOVERED'}).data['count'] == 1


# =============================================================================
# Vaccination Tests
# =============================================================================

@pytest.mark.django_db
class TestVaccinations:
    """Tests for /api/health/vaccinations/"""

    def test_record_vaccination(self, worker_client, hen):
        url = reverse('health:vaccination-list')
        data = {
            'bird_ids': [str(hen.id)],
            'vaccine_name': 'Newcastle (B1)',
            'date_given': '2024-06-01',
            'method': 'Eye drop',
            'next_due_date': '2024-09-01',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['birds'][0]['band_number'] == 'B-002'

    def test_next_due_after_given(self, worker_client, hen):
        url = reverse('health:vaccination-list')
        data = {
            'bird_ids': [str(hen.id)],
            'vaccine_name': 'Fowl pox',
            'date_given': '2024-06-01',
            'next_due_date': '2024-05-01',
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_upcoming_within_a_week(self, worker_client, hen):
        today = _today()
        for name, due in [('today', 0), ('week', 7), ('later', 8), ('past', -1)]:
            vaccination = Vaccination.objects.create(
                vaccine_name=name,
                date_given=today - timedelta(days=30),
                next_due_date=today + timedelta(days=due),
            )
            vaccination.birds.add(hen)

        url = reverse('health:vaccination-list')
        response = worker_client.get(url, {'upcoming': 'true'})

        assert [row['vaccine_name'] for row in response.data['results']] == ['today', 'week']


# =============================================================================
# Medication Tests
# =============================================================================

@pytest.mark.django_db
class TestMedications:
    """Tests for /api/health/medications/"""

    def test_withdrawal_end_date(self, worker_client, hen):
        url = reverse('health:medication-list')
        data = {
            'bird_ids': [str(hen.id)],
            'medication_name': 'Amoxicillin',
            'start_date': '2024-06-01',
            'end_date': '2024-06-05',
            'withdrawal_days': 7,
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['withdrawal_end_date'] == '2024-06-12'

    def test_active_filter(self, worker_client, hen):
        today = _today()
        running = Medication.objects.create(medication_name='Vitamins', start_date=today)
        running.birds.add(hen)
        finished = Medication.objects.create(
            medication_name='Dewormer',
            start_date=today - timedelta(days=10),
            end_date=today - timedelta(days=3),
        )
        finished.birds.add(hen)
        url = reverse('health:medication-list')

        active = worker_client.get(url, {'active': 'true'}).data['results']
        inactive = worker_client.get(url, {'active': 'false'}).data['results']

        assert [row['medication_name'] for row in active] == ['Vitamins']
        assert [row['medication_name'] for row in inactive] == ['Dewormer']


# =============================================================================
# Summary Tests
# =============================================================================

@pytest.mark.django_db
class TestHealthSummary:
    """Tests for GET /api/health/summary/"""

    def test_summary(self, worker_client, hen):
        today = _today()
        vaccination = Vaccination.objects.create(
            vaccine_name='Newcastle',
            date_given=today - timedelta(days=2),
            next_due_date=today + timedelta(days=20),
        )
        vaccination.birds.add(hen)
        incident = HealthIncident.objects.create(symptoms='Cough')
        incident.birds.add(hen)
        medication = Medication.objects.create(
            medication_name='Tylosin',
            start_date=today - timedelta(days=3),
            end_date=today - timedelta(days=1),
            withdrawal_days=5,
        )
        medication.birds.add(hen)

        response = worker_client.get(reverse('health:summary'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['upcoming_vaccinations'][0]['bird_count'] == 1
        assert response.data['recent_vaccinations'][0]['vaccine_name'] == 'Newcastle'
        assert response.data['active_incidents'][0]['symptoms'] == 'Cough'
        assert response.data['birds_in_withdrawal'][0]['bird_id'] == str(hen.id)
