"""
CSV helpers for report and data exports.

Rows are written with the standard ``csv`` module: fields holding a comma,
quote, CR or LF are quoted with internal quotes doubled, and lines end with
CRLF. Missing values are written as empty fields.
"""

import csv
from datetime import date
from typing import Iterable, Optional

from django.http import HttpResponse
from django.utils import timezone

CSV_CONTENT_TYPE = 'text/csv; charset=utf-8'


def _field(value):
    if value is None:
        return ''
    if isinstance(value, date):
        return value.isoformat()
    return value


def write_csv(stream, header: Iterable, rows: Iterable[Iterable]) -> None:
    """Write a header row and data rows to a file-like object."""
    writer = csv.writer(stream, lineterminator='\r\n')
    writer.writerow(header)
    for row in rows:
        writer.writerow([_field(value) for value in row])


def export_filename(name: str, today: Optional[date] = None) -> str:
    """``<name>_export_<YYYY-MM-DD>.csv``"""
    today = today or timezone.localdate()
    return f"{name}_export_{today.isoformat()}.csv"


def csv_response(name: str, header: Iterable, rows: Iterable[Iterable]) -> HttpResponse:
    """Attachment response carrying the CSV document."""
    response = HttpResponse(content_type=CSV_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{export_filename(name)}"'
    write_csv(response, header, rows)
    return response
