from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from ..core.exceptions import InvalidDurationError

_TWO_PLACES = Decimal("0.01")
_MICROSECONDS_PER_HOUR = Decimal(3600 * 1_000_000)


def compute_total_hours(check_in_time: datetime, check_out_time: datetime) -> Decimal:
    """Worked hours between check-in and check-out, rounded half-up to 2 places."""
    delta = check_out_time - check_in_time
    if delta.total_seconds() < 0:
        raise InvalidDurationError(
            f"Check-out {check_out_time.isoformat()} is before check-in {check_in_time.isoformat()}"
        )
    micros = (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds
    return (Decimal(micros) / _MICROSECONDS_PER_HOUR).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
