"""Pay policy constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STANDARD_SHIFT_HOURS = 8.0

# Unpaid break tiers: (minimum elapsed hours, break hours), longest first.
BREAK_TIERS = ((8.0, 1.0), (4.0, 0.5))

OVERTIME_MULTIPLIER = 1.5
NIGHT_PREMIUM_MULTIPLIER = 0.5

NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 6
NIGHT_HOURS_CAP = 2.0

# 2024 statutory minimum wage (KRW per hour).
DEFAULT_HOURLY_RATE = 9860

DEFAULT_TIMEZONE = "Asia/Seoul"

# Auto checkout closes a forgotten record this many hours after check-in
# when no scheduled check-out is known.
AUTO_CHECKOUT_FALLBACK_HOURS = 8

# Today's records close at their scheduled check-out once this many hours
# have passed after it.
AUTO_CHECKOUT_GRACE_HOURS = 2
