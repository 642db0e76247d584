import pytest
from apps.reports.columns import (
    DEFAULT_COLUMNS,
    REPORT_COLUMNS,
    REPORT_TYPES,
    get_report_columns,
    get_filterable_columns,
    get_sortable_columns,
    get_column,
    get_column_label,
    get_option_label,
)
from apps.reports.definitions import REPORT_DEFINITIONS

REPORT_TYPE_IDS = ['birds', 'eggs', 'health']


class TestColumnRegistry:
    """Registry lookups and consistency (no database)."""

    @pytest.mark.parametrize('report_type', REPORT_TYPE_IDS)
    def test_default_columns_are_registered(self, report_type):
        ids = {column.id for column in get_report_columns(report_type)}
        assert set(DEFAULT_COLUMNS[report_type]) <= ids

    @pytest.mark.parametrize('report_type', REPORT_TYPE_IDS)
    def test_filterable_and_sortable_subsets(self, report_type):
        assert all(column.filterable for column in get_filterable_columns(report_type))
        assert all(column.sortable for column in get_sortable_columns(report_type))
        assert len(get_filterable_columns(report_type)) < len(get_report_columns(report_type))

    def test_unknown_report_type_has_no_columns(self):
        assert get_report_columns('fights') == []
        assert get_filterable_columns('fights') == []
        assert get_column('fights', 'name') is None

    def test_get_column(self):
        assert get_column('birds', 'band_number').label == 'Band #'
        assert get_column('birds', 'weight') is None

    def test_known_flags(self):
        assert get_column('birds', 'age').filterable is False
        assert get_column('birds', 'breed').sortable is False
        assert get_column('eggs', 'notes').filterable is False
        assert get_column('health', 'symptoms').sortable is False

    def test_column_label_language(self):
        column = get_column('birds', 'coop')
        assert get_column_label(column, 'en') == 'Coop'
        assert get_column_label(column, 'tl') == 'Kulungan'

    def test_option_label(self):
        assert get_option_label('birds', 'sex', 'MALE', 'en') == 'Stag'
        assert get_option_label('birds', 'sex', 'MALE', 'tl') == 'Tandang'
        assert get_option_label('eggs', 'shell_quality', 'SOFT', 'tl') == 'Malambot'

    def test_option_label_falls_back_to_value(self):
        assert get_option_label('birds', 'sex', 'ROOSTER', 'en') == 'ROOSTER'
        assert get_option_label('birds', 'unknown', 'MALE', 'en') == 'MALE'

    def test_select_columns_carry_options(self):
        for columns in REPORT_COLUMNS.values():
            for column in columns:
                assert bool(column.options) == (column.type == 'select')

    def test_to_dict_is_camel_case(self):
        data = get_column('birds', 'sex').to_dict()
        assert data['labelLocalized'] == 'Kasarian'
        assert data['options'][1] == {'value': 'FEMALE', 'label': 'Hen', 'labelLocalized': 'Inahin'}
        assert 'options' not in get_column('birds', 'name').to_dict()

    def test_report_types(self):
        assert [report_type['id'] for report_type in REPORT_TYPES] == REPORT_TYPE_IDS


class TestReportDefinitions:
    """Every registered column can be projected, filtered and sorted as flagged."""

    @pytest.mark.parametrize('report_type', REPORT_TYPE_IDS)
    def test_definitions_cover_registry(self, report_type):
        definition = REPORT_DEFINITIONS[report_type]

        assert {c.id for c in get_report_columns(report_type)} == set(definition.accessors)
        assert {c.id for c in get_filterable_columns(report_type)} == set(definition.filters)
        assert {c.id for c in get_sortable_columns(report_type)} == set(definition.sort_fields)

        for column in get_filterable_columns(report_type):
            if not column.options:
                assert column.id in definition.value_sources
