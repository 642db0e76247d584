"""
Running report queries.

Executes, summarizes and exports ad-hoc reports built from the column
registry. All functions return plain dicts and lists in the camelCase wire
shape of the report endpoints.
"""

from django.conf import settings
from typing import Optional

from apps.accounts.models import Language
from ..columns import get_column, get_column_label
from ..definitions import get_report_definition
from ..exceptions import ColumnNotFilterableError, InvalidColumnError
from ..query import FilterableEntityQuery, display_value, EMPTY


def build_report_query(
    *,
    report_type: str,
    filters: Optional[dict] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None
) -> FilterableEntityQuery:
    """
    Validated query for a report request.

    Raises:
        InvalidReportTypeError: If the report type is unknown
        InvalidColumnError: If a filter or the sort column is unknown, not
            filterable or not sortable
    """
    return FilterableEntityQuery(
        get_report_definition(report_type),
        filters=filters,
        sort_column=sort_column,
        sort_direction=sort_direction,
    )


def execute_report(
    *,
    report_type: str,
    columns: list[str],
    filters: Optional[dict] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
    limit: Optional[int] = None,
    offset: int = 0
) -> dict:
    """
    Run a report and return one page of rows.

    Args:
        report_type: birds, eggs or health
        columns: Column ids to project
        filters: ``{column_id: [values]}``
        sort_column: Sortable column id (most recent first when omitted)
        sort_direction: 'asc' or 'desc'
        limit: Page size (REPORT_DEFAULT_LIMIT, capped at REPORT_MAX_LIMIT)
        offset: Rows to skip

    Returns:
        {'results': [...], 'totalCount': int, 'limit': int, 'offset': int}
        where totalCount counts every matching record.

    Raises:
        ReportsServiceError: For an invalid type, column, filter or sort
    """
    if limit is None:
        limit = settings.REPORT_DEFAULT_LIMIT
    limit = min(limit, settings.REPORT_MAX_LIMIT)

    query = build_report_query(
        report_type=report_type,
        filters=filters,
        sort_column=sort_column,
        sort_direction=sort_direction,
    )
    columns = query.validate_columns(columns)

    return {
        'results': query.rows(query.page(limit=limit, offset=offset), columns),
        'totalCount': query.count(),
        'limit': limit,
        'offset': offset,
    }


def summarize_report(
    *,
    report_type: str,
    columns: list[str],
    filters: Optional[dict] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None
) -> dict:
    """
    Group every matching record by the selected columns and count them.

    Records with identical display values in all selected columns share a
    group. Groups are ordered by count, largest first; equal counts keep
    the order in which the groups were first met.

    Returns:
        {'results': [{<column>: value, ..., 'count': int}],
         'totalCount': number of groups,
         'totalRecordCount': number of records}
    """
    query = build_report_query(
        report_type=report_type,
        filters=filters,
        sort_column=sort_column,
        sort_direction=sort_direction,
    )
    columns = query.validate_columns(columns)

    groups = {}
    record_count = 0
    for record in query.queryset():
        row = query.project(record, columns)
        key = tuple(str(row[column_id]) for column_id in columns)
        if key not in groups:
            groups[key] = {**row, 'count': 0}
        groups[key]['count'] += 1
        record_count += 1

    results = sorted(groups.values(), key=lambda group: group['count'], reverse=True)

    return {
        'results': results,
        'totalCount': len(results),
        'totalRecordCount': record_count,
    }


def distinct_column_values(*, report_type: str, column_id: str) -> list:
    """
    Candidate values for a filter picker.

    Select columns offer their option values in registry order. Other
    filterable columns offer the sorted distinct non-empty values found in
    the data.

    Raises:
        InvalidReportTypeError: If the report type is unknown
        InvalidColumnError: If the column is unknown
        ColumnNotFilterableError: If the column cannot be filtered
    """
    definition = get_report_definition(report_type)
    column = get_column(report_type, column_id)
    if column is None:
        raise InvalidColumnError(f"Invalid column: {column_id}")
    if not column.filterable:
        raise ColumnNotFilterableError(f"Column is not filterable: {column_id}")

    if column.options:
        return [option.value for option in column.options]

    source = definition.value_sources[column_id]()
    values = {display_value(value) for value in source.order_by().distinct()}
    values.discard(EMPTY)
    return sorted(values, key=str)


def build_report_export(
    *,
    report_type: str,
    columns: list[str],
    filters: Optional[dict] = None,
    sort_column: Optional[str] = None,
    sort_direction: Optional[str] = None,
    language: str = Language.ENGLISH
) -> tuple[list[str], list[list]]:
    """
    Header labels and rows of every matching record, for CSV download.

    Header labels are in ``language``. Missing values are left blank.

    Returns:
        (header, rows)
    """
    query = build_report_query(
        report_type=report_type,
        filters=filters,
        sort_column=sort_column,
        sort_direction=sort_direction,
    )
    columns = query.validate_columns(columns)

    header = [get_column_label(get_column(report_type, column_id), language) for column_id in columns]
    rows = []
    for record in query.queryset():
        row = query.project(record, columns)
        rows.append(['' if row[column_id] == EMPTY else row[column_id] for column_id in columns])

    return header, rows
