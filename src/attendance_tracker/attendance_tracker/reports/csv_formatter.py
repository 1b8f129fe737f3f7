from __future__ import annotations

import csv
import io
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Dict, Iterable, Optional, Sequence

from ..attendance.model import AttendanceWithProfile
from ..core.constants import MISSING_VALUE
from ..core.exceptions import ValidationError


def _timestamp(value: Optional[datetime]) -> str:
    return value.isoformat() if value else MISSING_VALUE


def _hours(value: Optional[Decimal]) -> str:
    return f"{(value or Decimal('0')):.2f}"


COLUMN_EXTRACTORS: Dict[str, Callable[[AttendanceWithProfile], str]] = {
    "Employee Name": lambda row: row.profile.name,
    "Employee ID": lambda row: row.profile.employee_code,
    "Department": lambda row: row.profile.department,
    "Email": lambda row: row.profile.email,
    "Date": lambda row: row.record.work_date.isoformat(),
    "Check In Time": lambda row: _timestamp(row.record.check_in_time),
    "Check Out Time": lambda row: _timestamp(row.record.check_out_time),
    "Total Hours": lambda row: _hours(row.record.total_hours),
    "Status": lambda row: row.record.status.value,
}

DEFAULT_COLUMNS: Sequence[str] = (
    "Employee Name",
    "Employee ID",
    "Department",
    "Date",
    "Check In Time",
    "Check Out Time",
    "Total Hours",
    "Status",
)


def report_filename(start: date, end: date) -> str:
    return f"attendance_report_{start.isoformat()}_to_{end.isoformat()}.csv"


def to_csv(rows: Iterable[AttendanceWithProfile], columns: Sequence[str] = DEFAULT_COLUMNS) -> str:
    """Render report rows as CSV text with every field quoted.

    Values are raw (ISO timestamps, 2-decimal hours, wire status); locale
    formatting is left to whoever displays the file.
    """
    unknown = [c for c in columns if c not in COLUMN_EXTRACTORS]
    if unknown:
        raise ValidationError(f"Unknown report columns: {', '.join(unknown)}")

    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(columns)
    extractors = [COLUMN_EXTRACTORS[c] for c in columns]
    for row in rows:
        writer.writerow([extract(row) for extract in extractors])
    return out.getvalue()
