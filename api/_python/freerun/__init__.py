"""
Freerun Sleep Schedule Planner

Gradually shifts a sleep window by a fixed number of minutes per day and
renders each day in a local and a remote timezone.

Main entry point: ScheduleGenerator
"""

from .calendar_events import rows_to_calendar_events
from .notes import note_key_for, shift_notes_by_one_day, shift_notes_down, shift_notes_up
from .persistence import JsonFileStore, KeyValueStore, MemoryStore, load_config, save_config
from .scheduler import (
    ScheduleGenerator,
    generate_schedule,
    generate_schedule_from_config,
    rows_to_dict,
)
from .time_math import combine_date_and_time, convert_zone, format_range, is_next_day
from .types import CalendarEvent, NoteMap, ScheduleConfig, ScheduleRow

__all__ = [
    # Types
    "ScheduleRow",
    "ScheduleConfig",
    "CalendarEvent",
    "NoteMap",
    # Time conversion
    "combine_date_and_time",
    "convert_zone",
    "is_next_day",
    "format_range",
    # Scheduler
    "ScheduleGenerator",
    "generate_schedule",
    "generate_schedule_from_config",
    "rows_to_dict",
    # Notes
    "note_key_for",
    "shift_notes_by_one_day",
    "shift_notes_up",
    "shift_notes_down",
    # Calendar
    "rows_to_calendar_events",
    # Persistence
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "load_config",
    "save_config",
]
