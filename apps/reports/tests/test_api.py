import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.birds.models import Bird
from apps.coops.models import Coop, CoopType
from apps.feed.models import FeedInventory, FeedType
from apps.reports.models import ReportPreset


def _preset_body(**overrides):
    body = {
        'name': 'Breeding hens',
        'description': 'Hens in the breeding pens',
        'reportType': 'birds',
        'config': {
            'columns': ['band_number', 'name', 'coop'],
            'filters': {'sex': ['FEMALE']},
            'sortColumn': 'name',
            'sortDirection': 'asc',
        },
    }
    body.update(overrides)
    return body


# =============================================================================
# Report Builder Tests
# =============================================================================

@pytest.mark.django_db
class TestReportColumns:
    """Tests for /api/reports/columns/"""

    def test_bird_columns(self, worker_client):
        url = reverse('reports:columns')
        response = worker_client.get(url, {'type': 'birds'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['reportType'] == 'birds'
        assert len(response.data['columns']) == 14
        assert 'age' not in response.data['filterableColumns']
        assert 'breed' not in response.data['sortableColumns']
        assert response.data['defaultColumns'][0] == 'band_number'
        assert len(response.data['availableReportTypes']) == 3

    def test_invalid_type(self, worker_client):
        url = reverse('reports:columns')
        response = worker_client.get(url, {'type': 'fights'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid report type: fights'

    def test_requires_authentication(self, api_client):
        url = reverse('reports:columns')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestReportValues:
    """Tests for /api/reports/values/"""

    def test_coop_values(self, worker_client, flock):
        url = reverse('reports:values')
        response = worker_client.get(url, {'type': 'birds', 'column': 'coop'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['values'] == ['Pen A']

    def test_unfilterable_column(self, worker_client):
        url = reverse('reports:values')
        response = worker_client.get(url, {'type': 'birds', 'column': 'age'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Column is not filterable: age'

    def test_missing_column(self, worker_client):
        url = reverse('reports:values')
        response = worker_client.get(url, {'type': 'birds'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestReportExecute:
    """Tests for /api/reports/execute/"""

    def test_execute(self, worker_client, flock):
        url = reverse('reports:execute')
        data = {
            'reportType': 'birds',
            'columns': ['name', 'breed'],
            'filters': {'breed': ['Asil']},
            'sortColumn': 'name',
            'sortDirection': 'asc',
            'limit': 2,
        }
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['totalCount'] == 4
        assert response.data['limit'] == 2
        assert response.data['offset'] == 0
        assert [row['name'] for row in response.data['results']] == ['Chick', 'Pullet 1']

    @pytest.mark.parametrize('overrides, message', [
        ({'reportType': 'fights'}, 'Invalid report type: fights'),
        ({'columns': ['weight']}, 'Invalid column: weight'),
        ({'filters': {'age': ['2']}}, 'Column is not filterable: age'),
        ({'sortColumn': 'breed'}, 'Column is not sortable: breed'),
        ({'filters': {'hatch_date': ['yesterday']}}, 'Invalid date: yesterday'),
    ])
    def test_invalid_requests(self, worker_client, overrides, message):
        url = reverse('reports:execute')
        data = {'reportType': 'birds', 'columns': ['name'], **overrides}
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == message

    def test_requires_columns(self, worker_client):
        url = reverse('reports:execute')
        response = worker_client.post(url, {'reportType': 'birds', 'columns': []}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('columns:')

    def test_limit_above_maximum(self, worker_client):
        url = reverse('reports:execute')
        data = {'reportType': 'birds', 'columns': ['name'], 'limit': 1000000}
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'].startswith('limit:')


@pytest.mark.django_db
class TestReportSummary:
    """Tests for /api/reports/summary/"""

    def test_summary(self, worker_client, flock):
        url = reverse('reports:summary')
        response = worker_client.post(url, {'reportType': 'birds', 'columns': ['coop']}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['results'] == [
            {'coop': '-', 'count': 3},
            {'coop': 'Pen A', 'count': 2},
        ]
        assert response.data['totalCount'] == 2
        assert response.data['totalRecordCount'] == 5


@pytest.mark.django_db
class TestReportExport:
    """Tests for /api/reports/export/"""

    def test_csv_download(self, worker_client, flock):
        url = reverse('reports:export')
        data = {'reportType': 'birds', 'columns': ['name', 'sex'], 'sortColumn': 'name'}
        response = worker_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response['Content-Type'] == 'text/csv; charset=utf-8'
        assert response['Content-Disposition'].startswith('attachment; filename="birds_export_')
        lines = response.content.decode('utf-8').split('\r\n')
        assert lines[0] == 'Name,Sex'
        assert lines[1] == 'Blanca,FEMALE'
        assert len([line for line in lines if line]) == 6

    def test_user_language_for_headers(self, worker_client, worker_user, flock):
        worker_user.language = 'tl'
        worker_user.save()
        url = reverse('reports:export')
        response = worker_client.post(url, {'reportType': 'eggs', 'columns': ['date', 'egg_mark']}, format='json')

        assert response.content.decode('utf-8').split('\r\n')[0] == 'Petsa,Marka ng Itlog'

    def test_body_language_wins(self, worker_client, worker_user):
        worker_user.language = 'tl'
        worker_user.save()
        url = reverse('reports:export')
        data = {'reportType': 'health', 'columns': ['outcome'], 'language': 'en'}
        response = worker_client.post(url, data, format='json')

        assert response.content.decode('utf-8').split('\r\n')[0] == 'Outcome'

    def test_escaping(self, worker_client, owner_user):
        Bird.objects.create(name='Big, "Boss"', created_by=owner_user)
        url = reverse('reports:export')
        response = worker_client.post(url, {'reportType': 'birds', 'columns': ['name']}, format='json')

        assert response.content.decode('utf-8').split('\r\n')[1] == '"Big, ""Boss"""'


@pytest.mark.django_db
class TestFlatExport:
    """Tests for /api/reports/export/<type>/"""

    def test_eggs_export(self, worker_client, eggs):
        url = reverse('reports:flat-export', args=['eggs'])
        response = worker_client.get(url, {'startDate': '2024-06-02', 'endDate': '2024-06-30'})

        assert response.status_code == status.HTTP_200_OK
        lines = [line for line in response.content.decode('utf-8').split('\r\n') if line]
        assert lines[0] == 'bird_id,bird_name,date,egg_mark,weight_grams,shell_quality,notes'
        assert len(lines) == 3
        assert response['Content-Disposition'].startswith('attachment; filename="eggs_export_')

    def test_vaccinations_export(self, worker_client):
        url = reverse('reports:flat-export', args=['vaccinations'])
        response = worker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.content.decode('utf-8').startswith('bird_id,bird_name,vaccine_name')

    def test_unknown_type(self, worker_client):
        url = reverse('reports:flat-export', args=['fights'])
        response = worker_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'Invalid export type: fights'

    def test_reversed_range(self, worker_client):
        url = reverse('reports:flat-export', args=['weights'])
        response = worker_client.get(url, {'startDate': '2024-06-30', 'endDate': '2024-06-01'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'startDate: Start date must be before end date'


@pytest.mark.django_db
class TestDashboard:
    """Tests for /api/reports/dashboard/"""

    def test_dashboard(self, worker_client, flock, owner_user):
        full_pen = Coop.objects.create(name='Stag Pen 1', capacity=1, coop_type=CoopType.BREEDING_PEN)
        flock['pullets'][0].coop = full_pen
        flock['pullets'][0].save()
        FeedInventory.objects.create(
            feed_type=FeedType.LAYER, brand='B-Meg',
            quantity_kg=Decimal('5'), reorder_level=Decimal('10'),
        )

        url = reverse('reports:dashboard')
        response = worker_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        summary = response.data['summary']
        assert summary['totalBirds'] == 5
        assert summary['males'] == 1
        assert summary['females'] == 3
        assert summary['byStatus']['ACTIVE'] == 5
        alerts = response.data['alerts']
        assert alerts['lowStockFeedsCount'] == 1
        assert [coop['name'] for coop in alerts['coopsAtCapacity']] == ['Stag Pen 1']
        assert alerts['activeIncubations'] == 0
        assert len(response.data['recentBirds']) == 5


# =============================================================================
# Preset Tests
# =============================================================================

@pytest.mark.django_db
class TestReportPresets:
    """Tests for /api/reports/presets/"""

    def test_create_preset(self, worker_client, worker_user):
        url = reverse('reports:preset-list')
        response = worker_client.post(url, _preset_body(isDefault=True), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['reportType'] == 'birds'
        assert response.data['isDefault'] is True
        assert response.data['config']['sortColumn'] == 'name'
        preset = ReportPreset.objects.get(id=response.data['id'])
        assert preset.created_by == worker_user
        assert preset.config['filters'] == {'sex': ['FEMALE']}

    def test_default_is_unique_per_type(self, worker_client, worker_user):
        url = reverse('reports:preset-list')
        worker_client.post(url, _preset_body(name='First', isDefault=True), format='json')
        worker_client.post(url, _preset_body(name='Second', isDefault=True), format='json')

        defaults = ReportPreset.objects.filter(created_by=worker_user, report_type='birds', is_default=True)
        assert [preset.name for preset in defaults] == ['Second']

    def test_set_default_on_update(self, worker_client):
        url = reverse('reports:preset-list')
        first = worker_client.post(url, _preset_body(name='First', isDefault=True), format='json').data
        second = worker_client.post(url, _preset_body(name='Second'), format='json').data

        detail = reverse('reports:preset-detail', args=[second['id']])
        response = worker_client.patch(detail, {'isDefault': True}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert ReportPreset.objects.get(id=first['id']).is_default is False
        assert ReportPreset.objects.get(id=second['id']).is_default is True

    def test_list_filters_by_type_and_owner(self, worker_client, owner_client):
        url = reverse('reports:preset-list')
        worker_client.post(url, _preset_body(), format='json')
        worker_client.post(
            url,
            _preset_body(name='Egg log', reportType='eggs', config={'columns': ['date', 'egg_mark']}),
            format='json'
        )
        owner_client.post(url, _preset_body(name='Owner birds'), format='json')

        response = worker_client.get(url, {'type': 'eggs'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['results'][0]['name'] == 'Egg log'
        assert worker_client.get(url).data['count'] == 2

    def test_other_users_get_404(self, worker_client, owner_client):
        url = reverse('reports:preset-list')
        preset = owner_client.post(url, _preset_body(), format='json').data
        detail = reverse('reports:preset-detail', args=[preset['id']])

        assert worker_client.get(detail).status_code == status.HTTP_404_NOT_FOUND
        assert worker_client.delete(detail).status_code == status.HTTP_404_NOT_FOUND
        assert ReportPreset.objects.filter(id=preset['id']).exists()

    def test_invalid_config_column(self, worker_client):
        url = reverse('reports:preset-list')
        body = _preset_body(reportType='eggs')
        response = worker_client.post(url, body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'config: Invalid column: band_number'

    def test_unsortable_config_sort(self, worker_client):
        url = reverse('reports:preset-list')
        body = _preset_body()
        body['config']['sortColumn'] = 'breed'
        response = worker_client.post(url, body, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'config: Column is not sortable: breed'

    def test_patch_config_without_filters(self, worker_client):
        url = reverse('reports:preset-list')
        preset = worker_client.post(url, _preset_body(), format='json').data
        detail = reverse('reports:preset-detail', args=[preset['id']])

        response = worker_client.patch(detail, {'config': {'columns': ['name', 'sex']}}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert ReportPreset.objects.get(id=preset['id']).config == {
            'columns': ['name', 'sex'],
            'filters': {},
            'sortColumn': None,
            'sortDirection': None,
        }

    def test_patch_config_without_columns(self, worker_client):
        url = reverse('reports:preset-list')
        preset = worker_client.post(url, _preset_body(), format='json').data
        detail = reverse('reports:preset-detail', args=[preset['id']])

        response = worker_client.patch(detail, {'config': {'filters': {}}}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'config: columns: This field is required.'

    def test_delete_preset(self, worker_client):
        url = reverse('reports:preset-list')
        preset = worker_client.post(url, _preset_body(), format='json').data
        detail = reverse('reports:preset-detail', args=[preset['id']])

        response = worker_client.delete(detail)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not ReportPreset.objects.filter(id=preset['id']).exists()
