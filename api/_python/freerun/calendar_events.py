"""
Calendar view adapter.

Builds calendar events straight from the shifted instants on each row, so
nothing is reconstructed from the formatted "h:mm AM" labels.
"""

from datetime import datetime, timedelta

from .types import CalendarEvent, ScheduleRow


def _sleep_bounds(row: ScheduleRow) -> tuple[datetime, datetime]:
    """Sleep interval with the end moved forward until it follows the start."""
    start = row.sleep_start_at
    end = row.sleep_end_at
    while end <= start:
        end += timedelta(days=1)
    return start, end


def rows_to_calendar_events(rows: list[ScheduleRow], include_wake: bool = False) -> list[CalendarEvent]:
    """
    Convert schedule rows to calendar events.

    One "Sleep (Day N)" event is emitted per row. With include_wake, an
    "Awake (Day N)" event also spans each sleep end to the next row's sleep
    start (the last row has no following sleep, so no wake event).

    Args:
        rows: Schedule rows in day order
        include_wake: Also emit wake events between consecutive sleeps

    Returns:
        Events with ids numbered from 1 in emission order
    """
    sleeps = [_sleep_bounds(row) for row in rows]

    events: list[CalendarEvent] = []
    for i, row in enumerate(rows):
        start, end = sleeps[i]
        events.append(
            CalendarEvent(
                id=len(events) + 1,
                subject=f"Sleep (Day {row.day})",
                start_time=start,
                end_time=end,
            )
        )

        if include_wake and i + 1 < len(rows):
            next_start = sleeps[i + 1][0]
            if next_start > end:
                events.append(
                    CalendarEvent(
                        id=len(events) + 1,
                        subject=f"Awake (Day {row.day})",
                        start_time=end,
                        end_time=next_start,
                    )
                )

    return events
