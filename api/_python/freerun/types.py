"""
Data structures for sleep-shift schedule generation.

Rows and configs are immutable: regenerating a schedule replaces the whole
list, and changing an input produces a new ScheduleConfig.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime

from .config import (
    DEFAULT_CURRENT_DATE,
    DEFAULT_DAILY_SHIFT_MINUTES,
    DEFAULT_END_DATE,
    DEFAULT_SLEEP_END,
    DEFAULT_SLEEP_START,
    DEFAULT_START_DATE,
)

# "YYYY-MM-DD" -> free-text annotation
NoteMap = dict[str, str]


@dataclass(frozen=True)
class ScheduleRow:
    """
    One calendar day of the generated schedule.

    Display strings are 12-hour clock labels ("10:30 PM"), with the end label
    suffixed " (next day)" when it rolls over in the zone it is shown in.
    Wake is the complement of sleep: it starts when sleep ends and ends when
    sleep starts.
    """

    day: int  # 1-based index within the requested range
    date: date  # Local calendar date this row represents

    # Local zone labels
    sleep_start: str
    sleep_end: str
    wake_start: str
    wake_end: str

    # Remote zone labels
    sleep_start_remote: str
    sleep_end_remote: str
    wake_start_remote: str
    wake_end_remote: str

    # Shifted instants (aware, local zone) for consumers that need real times
    sleep_start_at: datetime
    sleep_end_at: datetime


@dataclass(frozen=True, eq=True, unsafe_hash=False)
class ScheduleConfig:
    """
    The six form inputs plus the note map, passed explicitly into the core.

    Configs compare by value but are not hashable, since the note map is a
    dict. Use with_notes to change notes rather than mutating them in place.
    """

    sleep_start: str = DEFAULT_SLEEP_START  # "HH:MM"
    sleep_end: str = DEFAULT_SLEEP_END  # "HH:MM"
    current_date: str = DEFAULT_CURRENT_DATE  # "YYYY-MM-DD", shift anchor
    start_date: str = DEFAULT_START_DATE  # "YYYY-MM-DD"
    end_date: str = DEFAULT_END_DATE  # "YYYY-MM-DD"
    daily_shift_minutes: float = DEFAULT_DAILY_SHIFT_MINUTES
    notes: NoteMap = field(default_factory=dict)

    def with_notes(self, notes: NoteMap) -> "ScheduleConfig":
        """Return a copy carrying a new note map."""
        return replace(self, notes=dict(notes))


@dataclass(frozen=True)
class CalendarEvent:
    """Single event for a calendar view."""

    id: int
    subject: str
    start_time: datetime
    end_time: datetime
    is_all_day: bool = False
