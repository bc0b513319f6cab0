"""
Free-running sleep schedule generation.

Shifts a habitual sleep window by a fixed number of minutes per day and
renders every day's sleep and wake ranges in both the local and remote zone.

The shift is anchored to the reference ("current") date rather than the start
of the requested range: a range starting three days after the reference date
already carries three days of accumulated shift on its first row.
"""

import logging
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from .config import LOCAL_TZ, REMOTE_TZ
from .time_math import (
    add_minutes,
    combine_date_and_time,
    convert_zone,
    format_date_key,
    format_range,
    parse_date,
)
from .types import ScheduleConfig, ScheduleRow

logger = logging.getLogger(__name__)


class ScheduleGenerator:
    """
    Daily shift schedule generator for a fixed pair of zones.

    Rows are recomputed from scratch on every call; nothing is cached between
    generations.
    """

    def __init__(self, local_tz: str = LOCAL_TZ, remote_tz: str = REMOTE_TZ):
        # Validate IANA timezones (fail fast)
        ZoneInfo(local_tz)
        ZoneInfo(remote_tz)
        self.local_tz = local_tz
        self.remote_tz = remote_tz

    def generate_schedule(
        self,
        sleep_start: str,
        sleep_end: str,
        current_date: str,
        start_date: str,
        end_date: str,
        daily_shift_minutes: float,
    ) -> list[ScheduleRow]:
        """
        Generate one row per calendar day from start_date to end_date inclusive.

        Args:
            sleep_start: Habitual sleep start "HH:MM" on current_date
            sleep_end: Habitual sleep end "HH:MM" on current_date
            current_date: "YYYY-MM-DD" reference date (zero accumulated shift)
            start_date: "YYYY-MM-DD" first day of the range
            end_date: "YYYY-MM-DD" last day of the range
            daily_shift_minutes: Minutes to move later each day (negative = earlier)

        Returns:
            List of ScheduleRow, empty if end_date is before start_date
        """
        start = parse_date(start_date)
        end = parse_date(end_date)
        current = parse_date(current_date)

        total_days = (end - start).days + 1
        offset_days = (start - current).days

        if total_days <= 0:
            logger.warning("Schedule range %s..%s is inverted, no rows generated", start_date, end_date)
            return []

        logger.debug(
            "Generating %d days from %s (offset %d days, %.2f min/day)",
            total_days,
            start_date,
            offset_days,
            daily_shift_minutes,
        )

        return [
            self._build_row(
                day=i + 1,
                shift_minutes=(offset_days + i) * daily_shift_minutes,
                this_date=start + timedelta(days=i),
                sleep_start=sleep_start,
                sleep_end=sleep_end,
            )
            for i in range(total_days)
        ]

    def _build_row(
        self,
        day: int,
        shift_minutes: float,
        this_date: date,
        sleep_start: str,
        sleep_end: str,
    ) -> ScheduleRow:
        """Shift one day's sleep window and format it in both zones."""
        base_sleep_start = combine_date_and_time(this_date, sleep_start, self.local_tz)
        base_sleep_end = combine_date_and_time(this_date, sleep_end, self.local_tz)

        shifted_start = add_minutes(base_sleep_start, shift_minutes)
        shifted_end = add_minutes(base_sleep_end, shift_minutes)

        # Wake is the inverse interval
        wake_start = shifted_end
        wake_end = shifted_start

        sleep_start_str, sleep_end_str = format_range(shifted_start, shifted_end, self.local_tz)
        wake_start_str, wake_end_str = format_range(wake_start, wake_end, self.local_tz)

        sleep_start_remote, sleep_end_remote = self._format_remote_range(shifted_start, shifted_end)
        wake_start_remote, wake_end_remote = self._format_remote_range(wake_start, wake_end)

        return ScheduleRow(
            day=day,
            date=this_date,
            sleep_start=sleep_start_str,
            sleep_end=sleep_end_str,
            wake_start=wake_start_str,
            wake_end=wake_end_str,
            sleep_start_remote=sleep_start_remote,
            sleep_end_remote=sleep_end_remote,
            wake_start_remote=wake_start_remote,
            wake_end_remote=wake_end_remote,
            sleep_start_at=shifted_start,
            sleep_end_at=shifted_end,
        )

    def _format_remote_range(self, local_start: datetime, local_end: datetime) -> tuple[str, str]:
        remote_start = convert_zone(local_start, self.local_tz, self.remote_tz)
        remote_end = convert_zone(local_end, self.local_tz, self.remote_tz)
        return format_range(remote_start, remote_end, self.remote_tz)


def generate_schedule(
    sleep_start: str,
    sleep_end: str,
    current_date: str,
    start_date: str,
    end_date: str,
    daily_shift_minutes: float,
) -> list[ScheduleRow]:
    """
    Convenience function to generate a schedule for the default zones.

    Returns:
        List of ScheduleRow, one per day in the range
    """
    generator = ScheduleGenerator()
    return generator.generate_schedule(
        sleep_start, sleep_end, current_date, start_date, end_date, daily_shift_minutes
    )


def generate_schedule_from_config(
    config: ScheduleConfig, generator: ScheduleGenerator | None = None
) -> list[ScheduleRow]:
    """Generate a schedule from a ScheduleConfig (notes are ignored)."""
    if generator is None:
        generator = ScheduleGenerator()
    return generator.generate_schedule(
        config.sleep_start,
        config.sleep_end,
        config.current_date,
        config.start_date,
        config.end_date,
        config.daily_shift_minutes,
    )


def rows_to_dict(rows: list[ScheduleRow]) -> list[dict]:
    """Convert rows to JSON-serializable dicts."""
    return [
        {
            "day": r.day,
            "date": format_date_key(r.date),
            "sleepStart": r.sleep_start,
            "sleepEnd": r.sleep_end,
            "wakeStart": r.wake_start,
            "wakeEnd": r.wake_end,
            "sleepStartRemote": r.sleep_start_remote,
            "sleepEndRemote": r.sleep_end_remote,
            "wakeStartRemote": r.wake_start_remote,
            "wakeEndRemote": r.wake_end_remote,
            "sleepStartAt": r.sleep_start_at.isoformat(),
            "sleepEndAt": r.sleep_end_at.isoformat(),
        }
        for r in rows
    ]
