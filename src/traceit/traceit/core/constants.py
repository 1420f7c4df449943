"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TARGET_PERCENTAGE = 75.0

# Monday=0 ... Friday=4; anything at or above this index is weekend.
FIRST_WEEKEND_DAY = 5

ISO_DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
