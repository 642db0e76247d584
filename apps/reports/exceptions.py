"""
Domain exceptions for reports app.

This module defines domain-specific exceptions that are raised by the
report query builder and the reports services layer. They describe
invalid report requests and missing records, separate from HTTP concerns.

Exception Hierarchy:
    ReportsServiceError (base)
    ├── InvalidReportTypeError
    ├── InvalidColumnError
    │   ├── ColumnNotFilterableError
    │   └── ColumnNotSortableError
    ├── InvalidFilterValueError
    ├── InvalidExportTypeError
    └── PresetNotFoundError

Usage:
    from apps.reports.exceptions import InvalidColumnError

    if column is None:
        raise InvalidColumnError(f"Invalid column: {column_id}")
"""


class ReportsServiceError(Exception):
    """
    Base exception for all reports service errors.

    Views catch this to turn any invalid report request into a 400:

        try:
            data = execute_report(report_type='birds', columns=['name'])
        except ReportsServiceError as e:
            return Response({'error': str(e)}, status=400)
    """

    pass


class InvalidReportTypeError(ReportsServiceError):
    """
    Raised when the report type is not one of birds, eggs, health.

    Example:
        raise InvalidReportTypeError("Invalid report type: fights")
    """

    pass


class InvalidColumnError(ReportsServiceError):
    """
    Raised when a column id is not registered for the report type.

    Example:
        raise InvalidColumnError("Invalid column: weight")
    """

    pass


class ColumnNotFilterableError(InvalidColumnError):
    """
    Raised when a filter targets a column that cannot be filtered.

    Example:
        raise ColumnNotFilterableError("Column is not filterable: age")
    """

    pass


class ColumnNotSortableError(InvalidColumnError):
    """
    Raised when the sort column cannot be sorted.

    Example:
        raise ColumnNotSortableError("Column is not sortable: breed")
    """

    pass


class InvalidFilterValueError(ReportsServiceError):
    """
    Raised when a filter value cannot be interpreted for its column.

    Typically a date filter that is not an ISO date.

    Example:
        raise InvalidFilterValueError("Invalid date: 2024-13-01")
    """

    pass


class InvalidExportTypeError(ReportsServiceError):
    """
    Raised when a flat export is requested for an unknown data set.

    Valid types are: birds, weights, eggs, vaccinations, health-incidents.

    Example:
        raise InvalidExportTypeError("Invalid export type: fights")
    """

    pass


class PresetNotFoundError(ReportsServiceError):
    """
    Raised when a preset does not exist or belongs to another user.

    Example:
        raise PresetNotFoundError("Preset not found")
    """

    pass
