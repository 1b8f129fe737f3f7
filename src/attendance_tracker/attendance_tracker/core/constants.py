"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_CUTOFF_HOUR = 9
DEFAULT_RECENT_HISTORY_LIMIT = 7
DEFAULT_TREND_DAYS = 7
UNASSIGNED_DEPARTMENT = "Unassigned"
MISSING_VALUE = "-"

# Set by the upstream gateway after it authenticated the caller.
ACTOR_HEADER = "X-User-Id"
