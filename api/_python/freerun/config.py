"""
Fixed zones and default form values for the sleep-shift planner.

The two zones are hard-coded: the local zone is where sleep/wake times are
entered, the remote zone is the second column every schedule is rendered in.
"""

# IANA timezones
LOCAL_TZ = "America/Vancouver"
REMOTE_TZ = "Asia/Shanghai"

# Display
NEXT_DAY_SUFFIX = " (next day)"
DATE_KEY_FORMAT = "%Y-%m-%d"

# Default values for form inputs
DEFAULT_SLEEP_START = "21:54"
DEFAULT_SLEEP_END = "06:22"
DEFAULT_CURRENT_DATE = "2025-07-07"
DEFAULT_START_DATE = "2025-10-20"
DEFAULT_END_DATE = "2025-11-14"
DEFAULT_DAILY_SHIFT_MINUTES = 51.43

# Persistence slot names (one key per form field, plus the note map)
SLOT_SLEEP_START = "currentSleepStart"
SLOT_SLEEP_END = "currentSleepEnd"
SLOT_CURRENT_DATE = "currentDate"
SLOT_START_DATE = "startDate"
SLOT_END_DATE = "endDate"
SLOT_DAILY_SHIFT = "dailyShiftMinutes"
SLOT_NOTES = "notes"
