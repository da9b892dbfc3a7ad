"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

HANDOVER_WARNING_MINUTES = 30

MIN_SHIFT_MINUTES = 60
MAX_SHIFT_MINUTES = 12 * MINUTES_PER_HOUR
MAX_BREAK_MINUTES_SINGLE_SHIFT = 120
MAX_BREAK_MINUTES_DUAL_SHIFT = 240
MIN_INTER_SHIFT_GAP_MINUTES = 1
MAX_INTER_SHIFT_GAP_MINUTES = MINUTES_PER_DAY
