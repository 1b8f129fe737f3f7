from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from ..attendance.model import AttendanceRecord, AttendanceWithProfile


@dataclass(frozen=True)
class SummaryCounts:
    present: int = 0
    absent: int = 0
    late: int = 0
    half_day: int = 0
    total_hours: Decimal = Decimal("0.00")


@dataclass(frozen=True)
class TrendPoint:
    day: date
    label: str
    present: int
    absent: int


@dataclass(frozen=True)
class DepartmentStat:
    department: str
    present: int
    total: int
    percentage: int


@dataclass(frozen=True)
class Absentee:
    name: str
    employee_code: str
    department: str


@dataclass(frozen=True)
class DayStats:
    day: date
    present: int
    absent: int
    total: int
    percentage: int


@dataclass(frozen=True)
class TodayCounts:
    present: int
    late: int
    absent: int
    attendance_percentage: int


@dataclass(frozen=True)
class EmployeeDashboard:
    today: Optional[AttendanceRecord]
    month_summary: SummaryCounts
    recent: List[AttendanceRecord]


@dataclass(frozen=True)
class ManagerDashboard:
    total_employees: int
    today: TodayCounts
    weekly_trend: List[TrendPoint]
    departments: List[DepartmentStat]
    absent_today: List[Absentee]


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    month: int
    grid: List[Optional[int]]
    days: Dict[int, DayStats] = field(default_factory=dict)


@dataclass(frozen=True)
class HistoryMonth:
    year: int
    month: int
    grid: List[Optional[int]]
    records: Dict[int, AttendanceRecord]
    summary: SummaryCounts


@dataclass(frozen=True)
class ReportData:
    start: date
    end: date
    rows: List[AttendanceWithProfile]
    summary: SummaryCounts
