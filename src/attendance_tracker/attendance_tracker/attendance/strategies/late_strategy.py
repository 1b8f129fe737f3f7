from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from .base import CheckInStrategy, StatusDecision


class LateStrategy(CheckInStrategy):
    """Check-in at or after the late cutoff."""

    def __init__(self, cutoff_hour: int):
        self._cutoff_hour = cutoff_hour

    def decide_checkin(self, *, now: datetime) -> StatusDecision:
        return StatusDecision(
            status=AttendanceStatus.LATE,
            reason=f"checked in at {now:%H:%M:%S}, cutoff {self._cutoff_hour:02d}:00",
        )
