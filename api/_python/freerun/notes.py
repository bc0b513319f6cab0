"""
Per-day note bookkeeping.

Notes are keyed by local calendar date ("YYYY-MM-DD") rather than by row, so
they survive schedule regeneration. Keys outside the current range are kept.
"""

from datetime import date, timedelta

from .time_math import format_date_key, parse_date
from .types import NoteMap


def note_key_for(d: date) -> str:
    """Key under which the note for a calendar date is stored."""
    return format_date_key(d)


def shift_notes_by_one_day(notes: NoteMap, direction: int) -> NoteMap:
    """
    Move every note one calendar day earlier (-1) or later (+1).

    The result is built into a fresh mapping from the original one, so no
    entry is dropped and the input is left untouched.

    Args:
        notes: Mapping of "YYYY-MM-DD" to note text
        direction: +1 to move notes to the next day, -1 to the previous day

    Returns:
        New mapping with every key shifted by one day

    Raises:
        ValueError: If direction is not +1/-1 or a key is not a valid date
    """
    if direction not in (1, -1):
        raise ValueError(f"direction must be 1 or -1, got {direction}")

    delta = timedelta(days=direction)
    return {note_key_for(parse_date(key) + delta): text for key, text in notes.items()}


def shift_notes_up(notes: NoteMap) -> NoteMap:
    """Move each note to the previous day."""
    return shift_notes_by_one_day(notes, -1)


def shift_notes_down(notes: NoteMap) -> NoteMap:
    """Move each note to the next day."""
    return shift_notes_by_one_day(notes, 1)
