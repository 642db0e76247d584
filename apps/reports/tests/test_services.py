import pytest
from apps.reports.exceptions import (
    InvalidReportTypeError,
    InvalidColumnError,
    ColumnNotFilterableError,
    ColumnNotSortableError,
    InvalidFilterValueError,
    InvalidExportTypeError,
)
from apps.reports.models import ReportPreset
from apps.reports.services import (
    execute_report,
    summarize_report,
    distinct_column_values,
    build_report_export,
    build_flat_export,
    create_preset,
    update_preset,
)

BIRD_CONFIG = {'columns': ['name'], 'filters': {}, 'sortColumn': None, 'sortDirection': None}


def _names(result):
    return [row['name'] for row in result['results']]


@pytest.mark.django_db
class TestExecuteReport:
    """Tests for execute_report"""

    def test_breed_count_independent_of_window(self, flock):
        first_page = execute_report(
            report_type='birds', columns=['name'], filters={'breed': ['Asil']}, limit=1
        )
        second_page = execute_report(
            report_type='birds', columns=['name'], filters={'breed': ['Asil']}, limit=1, offset=3
        )

        assert first_page['totalCount'] == 4
        assert second_page['totalCount'] == 4
        assert len(first_page['results']) == 1
        assert len(second_page['results']) == 1

    def test_breed_filter_by_code_and_union(self, flock):
        by_code = execute_report(report_type='birds', columns=['name'], filters={'breed': ['KLS']})
        both = execute_report(report_type='birds', columns=['name'], filters={'breed': ['Asil', 'Kelso']})

        assert sorted(_names(by_code)) == ['Blanca', 'Chick']
        assert both['totalCount'] == 5
        assert len(both['results']) == 5

    def test_coop_filter_resolves_names(self, flock):
        result = execute_report(report_type='birds', columns=['name'], filters={'coop': ['Pen A']})
        assert sorted(_names(result)) == ['Blanca', 'Red']

    def test_unknown_name_matches_nothing(self, flock):
        result = execute_report(report_type='birds', columns=['name'], filters={'coop': ['Pen Z']})
        assert result['totalCount'] == 0
        assert result['results'] == []

    def test_parent_and_band_filters(self, flock):
        by_sire = execute_report(report_type='birds', columns=['name'], filters={'sire': ['Red']})
        by_band = execute_report(report_type='birds', columns=['name'], filters={'band_number': ['B-002']})

        assert _names(by_sire) == ['Chick']
        assert _names(by_band) == ['Blanca']

    def test_empty_filter_values_are_ignored(self, flock):
        result = execute_report(report_type='birds', columns=['name'], filters={'sex': []})
        assert result['totalCount'] == 5

    def test_date_filter(self, flock):
        result = execute_report(report_type='birds', columns=['name'], filters={'hatch_date': ['2024-02-01']})
        assert sorted(_names(result)) == ['Pullet 1', 'Pullet 2']

    def test_invalid_date(self, flock):
        with pytest.raises(InvalidFilterValueError):
            execute_report(report_type='birds', columns=['name'], filters={'hatch_date': ['2024-13-01']})

    def test_sort_by_name(self, flock):
        ascending = execute_report(report_type='birds', columns=['name'], sort_column='name')
        descending = execute_report(
            report_type='birds', columns=['name'], sort_column='name', sort_direction='desc'
        )

        assert _names(ascending) == ['Blanca', 'Chick', 'Pullet 1', 'Pullet 2', 'Red']
        assert _names(descending) == ['Red', 'Pullet 2', 'Pullet 1', 'Chick', 'Blanca']

    def test_age_sorts_youngest_first(self, flock):
        result = execute_report(report_type='birds', columns=['name'], sort_column='age')
        names = _names(result)
        assert names[0] == 'Chick'
        assert names[-1] == 'Red'

    def test_projection(self, flock):
        result = execute_report(
            report_type='birds',
            columns=['band_number', 'wingband_color', 'breed', 'coop', 'sire', 'age', 'hatch_date'],
            filters={'name': ['Red']},
        )
        row = result['results'][0]

        assert row['id'] == str(flock['rooster'].id)
        assert row['band_number'] == 'B-001'
        assert row['wingband_color'] == '-'
        assert row['breed'] == 'Asil'
        assert row['coop'] == 'Pen A'
        assert row['sire'] == '-'
        assert isinstance(row['age'], int)
        assert row['hatch_date'] == '2023-01-10'

    def test_chick_parents_by_name(self, flock):
        row = execute_report(
            report_type='birds', columns=['sire', 'dam'], filters={'name': ['Chick']}
        )['results'][0]
        assert row == {'id': str(flock['chick'].id), 'sire': 'Red', 'dam': 'Blanca'}

    def test_limit_is_capped(self, flock, settings):
        settings.REPORT_MAX_LIMIT = 2
        result = execute_report(report_type='birds', columns=['name'], limit=100)
        assert result['limit'] == 2
        assert len(result['results']) == 2

    def test_default_limit(self, flock, settings):
        settings.REPORT_DEFAULT_LIMIT = 3
        result = execute_report(report_type='birds', columns=['name'])
        assert result['limit'] == 3
        assert result['offset'] == 0

    def test_eggs_report(self, eggs):
        result = execute_report(
            report_type='eggs',
            columns=['bird_name', 'egg_mark', 'weight_grams'],
            filters={'bird_name': ['Blanca']},
            sort_column='egg_mark',
        )

        assert result['totalCount'] == 2
        assert result['results'][0]['egg_mark'] == 'H-01'
        assert result['results'][0]['weight_grams'] == 52.5
        assert result['results'][1]['weight_grams'] == '-'

    def test_eggs_default_order_is_newest_first(self, eggs):
        result = execute_report(report_type='eggs', columns=['date'])
        assert [row['date'] for row in result['results']] == ['2024-06-02', '2024-06-02', '2024-06-01']

    def test_health_free_text_matches_any_term(self, incidents):
        result = execute_report(
            report_type='health',
            columns=['bird_name', 'symptoms'],
            filters={'symptoms': ['SNEEZ', 'coughing']},
        )

        assert result['totalCount'] == 1
        assert result['results'][0]['bird_name'] == 'Blanca, Red'

    def test_health_bird_filter(self, incidents):
        result = execute_report(report_type='health', columns=['outcome'], filters={'bird_name': ['Red', 'Blanca']})
        assert result['totalCount'] == 1
        assert result['results'][0]['outcome'] == 'ONGOING'

    def test_health_sort_by_bird(self, incidents):
        result = execute_report(report_type='health', columns=['bird_name'], sort_column='bird_name')
        assert [row['bird_name'] for row in result['results']] == ['Blanca, Red', 'Chick']


@pytest.mark.django_db
class TestReportValidation:
    """Invalid requests raise domain errors"""

    def test_invalid_report_type(self):
        with pytest.raises(InvalidReportTypeError):
            execute_report(report_type='fights', columns=['name'])

    def test_invalid_column(self):
        with pytest.raises(InvalidColumnError, match='Invalid column: weight'):
            execute_report(report_type='birds', columns=['weight'])

    def test_filter_on_unfilterable_column(self):
        with pytest.raises(ColumnNotFilterableError):
            execute_report(report_type='birds', columns=['name'], filters={'age': ['3']})

    def test_filter_on_unknown_column(self):
        with pytest.raises(InvalidColumnError):
            execute_report(report_type='eggs', columns=['date'], filters={'coop': ['Pen A']})

    def test_sort_on_unsortable_column(self):
        with pytest.raises(ColumnNotSortableError):
            execute_report(report_type='birds', columns=['name'], sort_column='breed')


@pytest.mark.django_db
class TestSummarizeReport:
    """Tests for summarize_report"""

    def test_groups_by_column(self, flock):
        result = summarize_report(report_type='birds', columns=['sex'])

        assert result['totalCount'] == 3
        assert result['totalRecordCount'] == 5
        assert result['results'][0] == {'sex': 'FEMALE', 'count': 3}
        assert {row['sex']: row['count'] for row in result['results']} == {
            'FEMALE': 3, 'MALE': 1, 'UNKNOWN': 1,
        }

    def test_missing_values_form_a_group(self, flock):
        result = summarize_report(report_type='birds', columns=['color'])
        counts = {row['color']: row['count'] for row in result['results']}
        assert counts == {'Red': 3, 'White': 1, '-': 1}

    def test_groups_by_several_columns_with_filters(self, flock):
        result = summarize_report(
            report_type='birds', columns=['sex', 'color'], filters={'breed': ['Asil']}
        )

        assert result['totalRecordCount'] == 4
        assert result['results'][0] == {'sex': 'FEMALE', 'color': 'Red', 'count': 2}

    def test_counts_sorted_descending(self, eggs):
        result = summarize_report(report_type='eggs', columns=['shell_quality'])
        assert [row['count'] for row in result['results']] == [2, 1]


@pytest.mark.django_db
class TestDistinctValues:
    """Tests for distinct_column_values"""

    def test_relation_values(self, flock):
        assert distinct_column_values(report_type='birds', column_id='coop') == ['Pen A']
        assert distinct_column_values(report_type='birds', column_id='breed') == ['Asil', 'Kelso']
        assert distinct_column_values(report_type='birds', column_id='sire') == ['Red']

    def test_blank_values_are_skipped(self, flock):
        assert distinct_column_values(report_type='birds', column_id='color') == ['Red', 'White']

    def test_select_column_returns_options(self, db):
        assert distinct_column_values(report_type='health', column_id='outcome') == [
            'RECOVERED', 'ONGOING', 'DECEASED',
        ]

    def test_dates(self, eggs):
        assert distinct_column_values(report_type='eggs', column_id='date') == ['2024-06-01', '2024-06-02']

    def test_unfilterable_column(self, db):
        with pytest.raises(ColumnNotFilterableError):
            distinct_column_values(report_type='birds', column_id='age')


@pytest.mark.django_db
class TestBuildReportExport:
    """Tests for build_report_export"""

    def test_localized_header_and_all_rows(self, flock, settings):
        settings.REPORT_DEFAULT_LIMIT = 1
        header, rows = build_report_export(
            report_type='birds', columns=['name', 'coop'], sort_column='name', language='tl'
        )

        assert header == ['Pangalan', 'Kulungan']
        assert len(rows) == 5
        assert rows[0] == ['Blanca', 'Pen A']
        assert rows[1] == ['Chick', '']


@pytest.mark.django_db
class TestFlatExports:
    """Tests for build_flat_export"""

    def test_birds_with_status_filter(self, flock):
        header, rows = build_flat_export(export_type='birds', status='ACTIVE')
        assert header[0] == 'name'
        assert len(rows) == 5

        header, rows = build_flat_export(export_type='birds', status='SOLD')
        assert rows == []

    def test_health_incidents_one_row_per_bird(self, incidents):
        header, rows = build_flat_export(export_type='health-incidents')
        assert len(rows) == 3

        header, rows = build_flat_export(export_type='health-incidents', outcome='RECOVERED')
        assert [row[1] for row in rows] == ['Chick']

    def test_unknown_type(self, db):
        with pytest.raises(InvalidExportTypeError):
            build_flat_export(export_type='fights')


@pytest.mark.django_db
class TestPresets:
    """Tests for create_preset / update_preset"""

    def test_new_default_replaces_old(self, owner_user):
        first = create_preset(
            created_by=owner_user, name='All birds', report_type='birds',
            config=BIRD_CONFIG, is_default=True,
        )
        second = create_preset(
            created_by=owner_user, name='Hens', report_type='birds',
            config=BIRD_CONFIG, is_default=True,
        )

        first.refresh_from_db()
        assert first.is_default is False
        assert second.is_default is True
        assert ReportPreset.objects.filter(created_by=owner_user, report_type='birds', is_default=True).count() == 1

    def test_defaults_are_per_report_type_and_user(self, owner_user, worker_user):
        create_preset(created_by=owner_user, name='Birds', report_type='birds', config=BIRD_CONFIG, is_default=True)
        create_preset(created_by=owner_user, name='Eggs', report_type='eggs', config={'columns': ['date']}, is_default=True)
        create_preset(created_by=worker_user, name='Mine', report_type='birds', config=BIRD_CONFIG, is_default=True)

        assert ReportPreset.objects.filter(is_default=True).count() == 3

    def test_update_to_default(self, owner_user):
        first = create_preset(created_by=owner_user, name='A', report_type='birds', config=BIRD_CONFIG, is_default=True)
        second = create_preset(created_by=owner_user, name='B', report_type='birds', config=BIRD_CONFIG)

        update_preset(preset_id=second.id, user=owner_user, is_default=True)

        first.refresh_from_db()
        second.refresh_from_db()
        assert first.is_default is False
        assert second.is_default is True
