"""
Report Column Registry
======================

Static descriptions of the columns each report type can show, filter and
sort on. The registry drives column pickers, filter pickers and CSV header
labels, and is the source of truth for request validation in the query
builder.

Every column carries an English label and a Tagalog one
(``label_localized``). Enum-typed columns list their allowed option values,
each with both labels.

Example::

    >>> column = get_column('birds', 'sex')
    >>> get_column_label(column, 'tl')
    'Kasarian'
    >>> get_option_label('birds', 'sex', 'FEMALE', 'en')
    'Hen'
"""

from dataclasses import dataclass
from typing import Optional

from apps.birds.models import BirdSex, BirdStatus, CombType
from apps.eggs.models import ShellQuality
from apps.health.models import HealthOutcome
from .models import ReportType

TEXT = 'text'
SELECT = 'select'
DATE = 'date'
NUMBER = 'number'
BOOLEAN = 'boolean'

TAGALOG = 'tl'


@dataclass(frozen=True)
class ColumnOption:
    value: str
    label: str
    label_localized: str

    def to_dict(self):
        return {
            'value': self.value,
            'label': self.label,
            'labelLocalized': self.label_localized,
        }


@dataclass(frozen=True)
class ReportColumn:
    id: str
    label: str
    label_localized: str
    type: str
    filterable: bool = True
    sortable: bool = True
    options: tuple[ColumnOption, ...] = ()

    def to_dict(self):
        data = {
            'id': self.id,
            'label': self.label,
            'labelLocalized': self.label_localized,
            'type': self.type,
            'filterable': self.filterable,
            'sortable': self.sortable,
        }
        if self.options:
            data['options'] = [option.to_dict() for option in self.options]
        return data


# =============================================================================
# Options
# =============================================================================

SEX_OPTIONS = (
    ColumnOption(BirdSex.MALE, 'Stag', 'Tandang'),
    ColumnOption(BirdSex.FEMALE, 'Hen', 'Inahin'),
    ColumnOption(BirdSex.UNKNOWN, 'Unknown', 'Hindi Alam'),
)

STATUS_OPTIONS = (
    ColumnOption(BirdStatus.ACTIVE, 'Active', 'Aktibo'),
    ColumnOption(BirdStatus.BREEDING, 'Breeding', 'Nag-aanak'),
    ColumnOption(BirdStatus.SOLD, 'Sold', 'Nabenta'),
    ColumnOption(BirdStatus.DECEASED, 'Deceased', 'Patay'),
    ColumnOption(BirdStatus.CULLED, 'Culled', 'Inalis'),
    ColumnOption(BirdStatus.LOST, 'Lost', 'Nawawala'),
    ColumnOption(BirdStatus.RETIRED, 'Retired', 'Retirado'),
    ColumnOption(BirdStatus.ARCHIVED, 'Archived', 'Naka-archive'),
)

COMB_TYPE_OPTIONS = (
    ColumnOption(CombType.SINGLE, 'Single', 'Isahan'),
    ColumnOption(CombType.PEA, 'Pea', 'Pea'),
    ColumnOption(CombType.ROSE, 'Rose', 'Rose'),
    ColumnOption(CombType.WALNUT, 'Walnut', 'Walnut'),
    ColumnOption(CombType.BUTTERCUP, 'Buttercup', 'Buttercup'),
    ColumnOption(CombType.V_SHAPED, 'V-Shaped', 'Hugis V'),
    ColumnOption(CombType.CUSHION, 'Cushion', 'Cushion'),
)

SHELL_QUALITY_OPTIONS = (
    ColumnOption(ShellQuality.GOOD, 'Good', 'Mabuti'),
    ColumnOption(ShellQuality.FAIR, 'Fair', 'Katamtaman'),
    ColumnOption(ShellQuality.POOR, 'Poor', 'Mahina'),
    ColumnOption(ShellQuality.SOFT, 'Soft', 'Malambot'),
)

OUTCOME_OPTIONS = (
    ColumnOption(HealthOutcome.RECOVERED, 'Recovered', 'Gumaling'),
    ColumnOption(HealthOutcome.ONGOING, 'Ongoing', 'Nagpapatuloy'),
    ColumnOption(HealthOutcome.DECEASED, 'Deceased', 'Patay'),
)


# =============================================================================
# Columns per report type
# =============================================================================

BIRD_COLUMNS = (
    ReportColumn('band_number', 'Band #', 'Numero ng Band', TEXT),
    ReportColumn('wingband_color', 'Wingband Color', 'Kulay ng Wingband', TEXT),
    ReportColumn('name', 'Name', 'Pangalan', TEXT),
    ReportColumn('sex', 'Sex', 'Kasarian', SELECT, options=SEX_OPTIONS),
    ReportColumn('status', 'Status', 'Status', SELECT, options=STATUS_OPTIONS),
    ReportColumn('hatch_date', 'Hatch Date', 'Petsa ng Pagpisa', DATE),
    ReportColumn('color', 'Color', 'Kulay', TEXT),
    ReportColumn('comb_type', 'Comb Type', 'Uri ng Palong', SELECT, options=COMB_TYPE_OPTIONS),
    ReportColumn('coop', 'Coop', 'Kulungan', TEXT),
    ReportColumn('breed', 'Breed', 'Breed', TEXT, sortable=False),
    ReportColumn('sire', 'Sire', 'Ama', TEXT, sortable=False),
    ReportColumn('dam', 'Dam', 'Ina', TEXT, sortable=False),
    ReportColumn('age', 'Age', 'Edad', NUMBER, filterable=False),
    ReportColumn('created_at', 'Date Added', 'Petsa ng Pagdagdag', DATE),
)

EGG_COLUMNS = (
    ReportColumn('bird_name', 'Bird', 'Ibon', TEXT),
    ReportColumn('date', 'Date', 'Petsa', DATE),
    ReportColumn('egg_mark', 'Egg Mark', 'Marka ng Itlog', TEXT),
    ReportColumn('weight_grams', 'Weight (g)', 'Timbang (g)', NUMBER, filterable=False),
    ReportColumn('shell_quality', 'Shell Quality', 'Kalidad ng Balat', SELECT, options=SHELL_QUALITY_OPTIONS),
    ReportColumn('notes', 'Notes', 'Mga Tala', TEXT, filterable=False, sortable=False),
)

HEALTH_COLUMNS = (
    ReportColumn('bird_name', 'Bird', 'Ibon', TEXT),
    ReportColumn('date_noticed', 'Date Noticed', 'Petsa ng Napansin', DATE),
    ReportColumn('symptoms', 'Symptoms', 'Mga Sintomas', TEXT, sortable=False),
    ReportColumn('diagnosis', 'Diagnosis', 'Diagnosis', TEXT, sortable=False),
    ReportColumn('treatment', 'Treatment', 'Gamot', TEXT, sortable=False),
    ReportColumn('outcome', 'Outcome', 'Resulta', SELECT, options=OUTCOME_OPTIONS),
    ReportColumn('notes', 'Notes', 'Mga Tala', TEXT, filterable=False, sortable=False),
)

REPORT_COLUMNS = {
    ReportType.BIRDS: BIRD_COLUMNS,
    ReportType.EGGS: EGG_COLUMNS,
    ReportType.HEALTH: HEALTH_COLUMNS,
}

DEFAULT_COLUMNS = {
    ReportType.BIRDS: ['band_number', 'wingband_color', 'name', 'sex', 'status', 'hatch_date', 'coop'],
    ReportType.EGGS: ['bird_name', 'date', 'egg_mark', 'weight_grams', 'shell_quality'],
    ReportType.HEALTH: ['bird_name', 'date_noticed', 'symptoms', 'outcome'],
}

REPORT_TYPES = (
    {'id': ReportType.BIRDS.value, 'label': 'Birds', 'labelLocalized': 'Mga Ibon'},
    {'id': ReportType.EGGS.value, 'label': 'Eggs', 'labelLocalized': 'Mga Itlog'},
    {'id': ReportType.HEALTH.value, 'label': 'Health', 'labelLocalized': 'Kalusugan'},
)


# =============================================================================
# Lookups
# =============================================================================

def is_report_type(report_type) -> bool:
    return report_type in REPORT_COLUMNS


def get_report_columns(report_type) -> list[ReportColumn]:
    """All columns of a report type, empty for an unknown type."""
    return list(REPORT_COLUMNS.get(report_type, ()))


def get_filterable_columns(report_type) -> list[ReportColumn]:
    return [column for column in get_report_columns(report_type) if column.filterable]


def get_sortable_columns(report_type) -> list[ReportColumn]:
    return [column for column in get_report_columns(report_type) if column.sortable]


def get_column(report_type, column_id) -> Optional[ReportColumn]:
    for column in get_report_columns(report_type):
        if column.id == column_id:
            return column
    return None


def get_column_label(column: ReportColumn, language: str) -> str:
    """Column header in the user's language (English unless Tagalog)."""
    return column.label_localized if language == TAGALOG else column.label


def get_option_label(report_type, column_id, value, language: str) -> str:
    """
    Label of an enum value, or the value itself when it has none.

    Args:
        report_type: birds, eggs or health
        column_id: Column holding the enum
        value: Stored enum value (e.g. 'FEMALE')
        language: 'en' or 'tl'
    """
    column = get_column(report_type, column_id)
    if column is None:
        return value

    for option in column.options:
        if option.value == value:
            return option.label_localized if language == TAGALOG else option.label
    return value
