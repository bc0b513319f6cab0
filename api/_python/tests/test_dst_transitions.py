"""
Tests for DST (Daylight Saving Time) transition handling.

Vancouver observes DST and Shanghai does not, so the remote labels of an
unshifted schedule move by an hour across each Vancouver transition while the
local labels stay put.
"""

from datetime import date, datetime, timedelta

import time_machine

from freerun.scheduler import ScheduleGenerator, generate_schedule
from freerun.time_math import get_current_date_in_tz, get_timezone_offset_hours


class TestDSTTransitions:
    """Test schedule generation across DST transitions."""

    def test_spring_forward_changes_remote_offset(self):
        """
        Vancouver springs forward at 2 AM on March 10, 2024.

        22:00 PST on Mar 9 is 14:00 in Shanghai; 22:00 PDT on Mar 10 is 13:00.
        """
        rows = generate_schedule("22:00", "06:00", "2024-03-09", "2024-03-09", "2024-03-11", 0)

        assert [r.sleep_start for r in rows] == ["10:00 PM"] * 3
        assert [r.sleep_start_remote for r in rows] == ["2:00 PM", "1:00 PM", "1:00 PM"]
        # Mar 10 06:00 is already PDT, after the 2 AM transition
        assert [r.sleep_end_remote for r in rows] == ["10:00 PM", "9:00 PM", "9:00 PM"]

    def test_fall_back_changes_remote_offset(self):
        """Vancouver falls back at 2 AM on November 3, 2024."""
        rows = generate_schedule("22:00", "06:00", "2024-11-02", "2024-11-02", "2024-11-03", 0)

        assert [r.sleep_start for r in rows] == ["10:00 PM", "10:00 PM"]
        assert [r.sleep_start_remote for r in rows] == ["1:00 PM", "2:00 PM"]
        assert [r.sleep_end_remote for r in rows] == ["9:00 PM", "10:00 PM"]

    def test_shift_across_transition_uses_elapsed_minutes(self):
        """
        Midnight PST on Mar 10 plus three elapsed hours is 04:00 PDT.

        The reference date is three days earlier at 60 min/day.
        """
        rows = generate_schedule("00:00", "08:00", "2024-03-07", "2024-03-10", "2024-03-10", 60)
        row = rows[0]

        assert row.sleep_start == "4:00 AM"
        assert row.sleep_end == "11:00 AM"
        assert row.sleep_start_at.utcoffset() == timedelta(hours=-7)

    def test_row_offsets_match_their_date(self):
        rows = generate_schedule("22:00", "06:00", "2024-03-09", "2024-03-09", "2024-03-10", 0)

        for row in rows:
            expected = get_timezone_offset_hours(
                "America/Vancouver", datetime(row.date.year, row.date.month, row.date.day, 22)
            )
            actual = row.sleep_start_at.utcoffset().total_seconds() / 3600
            assert actual == expected, f"{row.date}: expected offset {expected}, got {actual}"

    def test_remote_zone_with_dst(self):
        """London springs forward on March 31, 2024; Shanghai as local zone never moves."""
        generator = ScheduleGenerator(local_tz="Asia/Shanghai", remote_tz="Europe/London")
        rows = generator.generate_schedule("22:00", "06:00", "2024-03-30", "2024-03-30", "2024-03-31", 0)

        assert [r.sleep_start for r in rows] == ["10:00 PM", "10:00 PM"]
        assert [r.sleep_start_remote for r in rows] == ["2:00 PM", "3:00 PM"]


class TestCurrentDateInZone:
    """Test "today" resolution against a frozen clock."""

    @time_machine.travel("2026-03-01T06:00:00Z", tick=False)
    def test_local_date_lags_utc(self):
        """06:00 UTC on Mar 1 is still the evening of Feb 28 in Vancouver."""
        assert get_current_date_in_tz("America/Vancouver") == date(2026, 2, 28)
        assert get_current_date_in_tz("Asia/Shanghai") == date(2026, 3, 1)

    @time_machine.travel("2026-11-01T09:30:00Z", tick=False)
    def test_on_fall_back_date(self):
        """09:30 UTC on Nov 1, 2026 is 01:30 PST, after the fall-back transition."""
        assert get_current_date_in_tz("America/Vancouver") == date(2026, 11, 1)
        assert get_current_date_in_tz("Asia/Shanghai") == date(2026, 11, 1)
