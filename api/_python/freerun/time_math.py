"""
Time conversion layer.

Combines calendar dates with "HH:MM" wall-clock times, moves instants between
IANA zones, and renders sleep/wake ranges as 12-hour clock labels with a
next-day marker evaluated in the zone being displayed.
"""

from datetime import UTC, date, datetime, time, timedelta
from zoneinfo import ZoneInfo

import pytz

from .config import DATE_KEY_FORMAT, LOCAL_TZ, NEXT_DAY_SUFFIX


def parse_time(time_str: str) -> time:
    """Parse "HH:MM" string to time object."""
    parts = time_str.split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {time_str!r}")
    return time(int(parts[0]), int(parts[1]))


def parse_date(date_str: str) -> date:
    """Parse "YYYY-MM-DD" string to date object."""
    return datetime.strptime(date_str, DATE_KEY_FORMAT).date()


def format_date_key(d: date) -> str:
    """Format date as "YYYY-MM-DD"."""
    return d.strftime(DATE_KEY_FORMAT)


def format_time_12h(t: time | datetime) -> str:
    """Format time as "H:MM AM/PM" (12-hour format for user-facing text)."""
    hour = t.hour
    period = "AM" if hour < 12 else "PM"
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}:{t.minute:02d} {period}"


def combine_date_and_time(base_date: date, time_str: str, tz_name: str = LOCAL_TZ) -> datetime:
    """
    Build an aware datetime for base_date at the given wall-clock time.

    Wall-clock times that do not exist in the zone (skipped by a spring-forward
    transition) are normalized to the real instant, e.g. 02:30 on the US
    spring-forward date becomes 03:30 daylight time.

    Args:
        base_date: Calendar date (zone-naive)
        time_str: "HH:MM" 24-hour time
        tz_name: IANA timezone the wall-clock time belongs to

    Returns:
        Datetime aware of tz_name

    Raises:
        ValueError: If time_str is malformed or out of range
    """
    tz = ZoneInfo(tz_name)
    local_dt = datetime.combine(base_date, parse_time(time_str), tzinfo=tz)
    return local_dt.astimezone(UTC).astimezone(tz)


def add_minutes(instant: datetime, minutes: float) -> datetime:
    """
    Add elapsed minutes to an instant, keeping its timezone.

    Aware datetimes are shifted in UTC, so a shift across a DST transition
    moves the wall clock by the transition as well. Fractional minutes are
    preserved down to the microsecond.
    """
    delta = timedelta(minutes=minutes)
    if instant.tzinfo is None:
        return instant + delta
    return (instant.astimezone(UTC) + delta).astimezone(instant.tzinfo)


def convert_zone(instant: datetime, from_tz: str, to_tz: str) -> datetime:
    """
    Re-express an instant as wall-clock time in another zone.

    Naive datetimes are interpreted as wall-clock time in from_tz. The offset
    applied is whichever one each zone has in effect at that instant, so dates
    straddling a DST transition convert correctly.

    Args:
        instant: Datetime to convert
        from_tz: IANA timezone of a naive instant
        to_tz: Target IANA timezone

    Returns:
        Datetime aware of to_tz
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=ZoneInfo(from_tz))
    return instant.astimezone(ZoneInfo(to_tz))


def _in_zone(instant: datetime, tz_name: str) -> datetime:
    if instant.tzinfo is None:
        return instant
    return instant.astimezone(ZoneInfo(tz_name))


def is_next_day(start: datetime, end: datetime, tz_name: str = LOCAL_TZ) -> bool:
    """
    Check whether end falls on the next day relative to start.

    Only the clock faces are compared, as seen in tz_name: the end rolls over
    when its time of day is earlier than or equal to the start's. Equal times
    count as next day since a sleep interval is never zero length.
    """
    start_local = _in_zone(start, tz_name)
    end_local = _in_zone(end, tz_name)
    if end_local.hour != start_local.hour:
        return end_local.hour < start_local.hour
    return end_local.minute <= start_local.minute


def format_range(start: datetime, end: datetime, tz_name: str = LOCAL_TZ) -> tuple[str, str]:
    """
    Format a time range as seen in tz_name.

    Returns:
        Tuple of (start_label, end_label), e.g. ("10:00 PM", "6:00 AM (next day)")
    """
    start_local = _in_zone(start, tz_name)
    end_local = _in_zone(end, tz_name)

    start_str = format_time_12h(start_local)
    end_str = format_time_12h(end_local)
    if is_next_day(start_local, end_local, tz_name):
        end_str += NEXT_DAY_SUFFIX

    return (start_str, end_str)


def get_current_date_in_tz(tz_name: str) -> date:
    """
    Get today's date in the specified timezone.

    The host clock may run in UTC, while "today" for the schedule anchor is
    the local calendar date of the user.

    Args:
        tz_name: IANA timezone name (e.g., "America/Vancouver")

    Returns:
        Current calendar date in that timezone
    """
    tz = pytz.timezone(tz_name)
    now_utc = datetime.now(pytz.UTC)
    return now_utc.astimezone(tz).date()


def get_timezone_offset_hours(tz_name: str, reference_date: datetime | None = None) -> float:
    """
    Get UTC offset in hours for a timezone at a given date.

    Args:
        tz_name: IANA timezone name (e.g., "America/Vancouver")
        reference_date: Wall-clock datetime to check offset (for DST), defaults to now

    Returns:
        Offset in hours (e.g., -8.0 for PST, -7.0 for PDT)
    """
    if reference_date is None:
        reference_date = datetime.now()

    tz = pytz.timezone(tz_name)
    localized = tz.localize(reference_date.replace(tzinfo=None))
    offset_seconds = localized.utcoffset().total_seconds()
    return offset_seconds / 3600
