"""Services for reports business logic."""

from .report_execution import (
    build_report_query,
    execute_report,
    summarize_report,
    distinct_column_values,
    build_report_export,
)
from .flat_exports import (
    EXPORTERS,
    bird_display_name,
    build_flat_export,
)
from .dashboard import (
    get_dashboard,
)
from .presets import (
    get_user_preset,
    create_preset,
    update_preset,
)

__all__ = [
    # Report Execution
    'build_report_query',
    'execute_report',
    'summarize_report',
    'distinct_column_values',
    'build_report_export',
    # Flat Exports
    'EXPORTERS',
    'bird_display_name',
    'build_flat_export',
    # Dashboard
    'get_dashboard',
    # Presets
    'get_user_preset',
    'create_preset',
    'update_preset',
]
