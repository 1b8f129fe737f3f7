from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.constants import DEFAULT_LATE_CUTOFF_HOUR
from ..core.exceptions import ValidationError
from .strategies.base import CheckInStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.on_time_strategy import OnTimeStrategy


@dataclass
class CheckInStrategyFactory:
    """Factory Pattern: choose the check-in strategy from the local hour of day.

    The cutoff is inclusive: 09:00:00 and later is late.
    """

    cutoff_hour: int = DEFAULT_LATE_CUTOFF_HOUR

    def __post_init__(self) -> None:
        if not 0 <= int(self.cutoff_hour) <= 23:
            raise ValidationError(f"Late cutoff hour must be within 0-23, got {self.cutoff_hour}")
        self.cutoff_hour = int(self.cutoff_hour)

    def for_checkin(self, *, now: datetime) -> CheckInStrategy:
        if now.hour >= self.cutoff_hour:
            return LateStrategy(self.cutoff_hour)
        return OnTimeStrategy()
