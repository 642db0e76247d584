"""
Filterable Entity Query
=======================

One query builder shared by every report type. A ``ReportDefinition``
tells it how to fetch, filter, sort and project one kind of record; the
builder validates a report request against the column registry and turns
it into a Django queryset plus display rows.

Filter strategies are small factories returning ``(queryset, values) ->
queryset`` callables:

    in_filter('sex')                      sex IN values
    date_filter('hatch_date')             exact ISO dates
    name_filter(Coop, 'coop')             names resolved to ids first
    contains_any_filter('symptoms')       any term, case-insensitive

Example::

    query = FilterableEntityQuery(
        BIRD_REPORT,
        filters={'breed': ['Asil']},
        sort_column='hatch_date',
        sort_direction='asc',
    )
    total = query.count()
    rows = query.rows(query.page(limit=50, offset=0), ['name', 'breed'])

Note:
    Every filter runs in the database, so counts and pagination windows
    never depend on which page is requested.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from functools import reduce
from operator import or_
from typing import Any, Callable, Iterable, Mapping, Optional

from django.db.models import F, Q, QuerySet
from django.utils import timezone
from django.utils.dateparse import parse_date

from .columns import get_column
from .exceptions import (
    InvalidColumnError,
    ColumnNotFilterableError,
    ColumnNotSortableError,
    InvalidFilterValueError,
)

# Display value for anything missing
EMPTY = '-'

FilterFn = Callable[[QuerySet, list[str]], QuerySet]


@dataclass(frozen=True)
class ReportDefinition:
    """
    Everything the query builder needs to know about one report type.

    Attributes:
        report_type: birds, eggs or health
        get_queryset: Returns the unfiltered queryset with related data
            loaded for projection
        filters: Filter strategy per filterable column
        sort_fields: ORM field per sortable column; a leading '-' marks a
            column whose ascending order is the field's descending order
        default_ordering: Ordering when no sort column is requested
        accessors: Raw value per column for a record
        value_sources: Distinct candidate values per filterable column,
            used to fill filter pickers
    """

    report_type: str
    get_queryset: Callable[[], QuerySet]
    filters: Mapping[str, FilterFn]
    sort_fields: Mapping[str, str]
    default_ordering: tuple[str, ...]
    accessors: Mapping[str, Callable[[Any], Any]]
    value_sources: Mapping[str, Callable[[], Iterable]] = field(default_factory=dict)


# =============================================================================
# Filter strategies
# =============================================================================

def in_filter(field_name: str) -> FilterFn:
    """Equality / IN against a column of the record."""
    def apply(queryset, values):
        return queryset.filter(**{f'{field_name}__in': values})
    return apply


def date_filter(field_name: str) -> FilterFn:
    """Exact ISO date match (YYYY-MM-DD)."""
    def apply(queryset, values):
        dates = []
        for value in values:
            try:
                parsed = parse_date(value)
            except ValueError:
                parsed = None
            if parsed is None:
                raise InvalidFilterValueError(f"Invalid date: {value}")
            dates.append(parsed)
        return queryset.filter(**{f'{field_name}__in': dates})
    return apply


def name_filter(model, field_name: str, name_field: str = 'name') -> FilterFn:
    """
    Resolve names of related records to ids, then filter by id.

    Matches nothing when no name resolves.
    """
    def apply(queryset, values):
        ids = list(
            model.objects.filter(**{f'{name_field}__in': values}).values_list('id', flat=True)
        )
        if not ids:
            return queryset.none()
        return queryset.filter(**{f'{field_name}__in': ids}).distinct()
    return apply


def contains_any_filter(field_name: str) -> FilterFn:
    """Free text containing any of the terms, case-insensitive."""
    def apply(queryset, values):
        terms = [value for value in values if value]
        if not terms:
            return queryset
        condition = reduce(or_, (Q(**{f'{field_name}__icontains': term}) for term in terms))
        return queryset.filter(condition)
    return apply


# =============================================================================
# Display values
# =============================================================================

def display_value(value):
    """
    Turn a raw column value into what a report shows.

    Missing values become '-', dates become ISO strings and decimals
    become floats. Enum values are kept as stored.
    """
    if value is None or value == '':
        return EMPTY
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    return value


# =============================================================================
# Query builder
# =============================================================================

class FilterableEntityQuery:
    """
    A validated report request over one report definition.

    Args:
        definition: ReportDefinition of the report type
        filters: ``{column_id: [values]}``; empty value lists are ignored
        sort_column: Optional sortable column id
        sort_direction: 'asc' or 'desc' (default 'asc' with a sort column)

    Raises:
        InvalidColumnError: If a filter names an unknown column
        ColumnNotFilterableError: If a filter targets a non-filterable column
        ColumnNotSortableError: If the sort column is not sortable
    """

    def __init__(
        self,
        definition: ReportDefinition,
        *,
        filters: Optional[Mapping[str, list[str]]] = None,
        sort_column: Optional[str] = None,
        sort_direction: Optional[str] = None
    ):
        self.definition = definition
        self.filters = {key: list(values) for key, values in (filters or {}).items() if values}
        self.sort_column = sort_column or None
        self.sort_direction = sort_direction or 'asc'

        for column_id in self.filters:
            column = self._get_column(column_id)
            if not column.filterable:
                raise ColumnNotFilterableError(f"Column is not filterable: {column_id}")

        if self.sort_column is not None:
            column = self._get_column(self.sort_column)
            if not column.sortable:
                raise ColumnNotSortableError(f"Column is not sortable: {self.sort_column}")

    def _get_column(self, column_id):
        column = get_column(self.definition.report_type, column_id)
        if column is None:
            raise InvalidColumnError(f"Invalid column: {column_id}")
        return column

    def validate_columns(self, columns: Iterable[str]) -> list[str]:
        """Check requested output columns exist for the report type."""
        columns = list(columns)
        for column_id in columns:
            self._get_column(column_id)
        return columns

    def _ordering(self):
        if self.sort_column is None:
            return [*self.definition.default_ordering, 'id']

        field_name = self.definition.sort_fields[self.sort_column]
        inverted = field_name.startswith('-')
        field_name = field_name.lstrip('-')
        descending = (self.sort_direction == 'desc') != inverted

        expression = F(field_name)
        ordered = expression.desc(nulls_last=True) if descending else expression.asc(nulls_last=True)
        return [ordered, 'id']

    def queryset(self) -> QuerySet:
        """Filtered, ordered queryset of all matching records."""
        queryset = self.definition.get_queryset()
        for column_id, values in self.filters.items():
            queryset = self.definition.filters[column_id](queryset, values)
        return queryset.order_by(*self._ordering())

    def count(self) -> int:
        return self.queryset().count()

    def page(self, *, limit: int, offset: int = 0) -> list:
        return list(self.queryset()[offset:offset + limit])

    def project(self, record, columns: Iterable[str]) -> dict:
        """Display values of the requested columns for one record."""
        accessors = self.definition.accessors
        return {column_id: display_value(accessors[column_id](record)) for column_id in columns}

    def rows(self, records: Iterable, columns: Iterable[str]) -> list[dict]:
        """Rows of ``{id, <column>: value, ...}``."""
        columns = list(columns)
        return [
            {'id': str(record.id), **self.project(record, columns)}
            for record in records
        ]
