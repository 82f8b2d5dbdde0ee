"""
Tests for splitting shifts at midnight and at the 09:00/21:00 boundaries.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal

from payments.shift_splitter import (
    DAY_END,
    DAY_START,
    iter_calendar_days,
    normalize_shift_end,
    split_day_window,
    split_shift,
    timedelta_to_hours,
)


class TestNormalizeShiftEnd:
    def test_valid_range_is_untouched(self):
        start = datetime(2025, 1, 22, 8, 0)
        end = datetime(2025, 1, 22, 10, 0)
        assert normalize_shift_end(start, end) == (end, 0)

    def test_overnight_shift_stored_on_same_day(self):
        start = datetime(2099, 1, 1, 21, 0)
        end = datetime(2099, 1, 1, 9, 0)
        assert normalize_shift_end(start, end) == (datetime(2099, 1, 2, 9, 0), 1)

    def test_end_equal_to_start_becomes_full_day(self):
        start = datetime(2025, 1, 22, 9, 0)
        assert normalize_shift_end(start, start) == (datetime(2025, 1, 23, 9, 0), 1)

    def test_end_several_days_before_start(self):
        start = datetime(2025, 1, 3, 21, 0)
        end = datetime(2025, 1, 1, 9, 0)
        normalized, days = normalize_shift_end(start, end)
        assert normalized == datetime(2025, 1, 4, 9, 0)
        assert days == 3
        assert normalized > start
        assert normalized - timedelta(days=1) <= start


class TestCalendarDays:
    def test_multi_day_windows(self):
        start = datetime(2025, 1, 1, 21, 0)
        end = datetime(2025, 1, 3, 9, 0)

        windows = list(iter_calendar_days(start, end))

        assert windows == [
            (date(2025, 1, 1), start, datetime(2025, 1, 2)),
            (date(2025, 1, 2), datetime(2025, 1, 2), datetime(2025, 1, 3)),
            (date(2025, 1, 3), datetime(2025, 1, 3), end),
        ]

    def test_shift_ending_at_midnight_has_no_empty_window(self):
        windows = list(iter_calendar_days(datetime(2025, 1, 26), datetime(2025, 1, 27)))
        assert len(windows) == 1
        assert windows[0][0] == date(2025, 1, 26)


class TestSplitDayWindow:
    def test_boundaries_are_nine_and_twenty_one(self):
        assert (DAY_START.hour, DAY_END.hour) == (9, 21)

    def test_window_across_morning_boundary(self):
        day = date(2025, 1, 22)
        segments = split_day_window(day, datetime(2025, 1, 22, 8), datetime(2025, 1, 22, 10))

        assert [(s.is_day, s.hours) for s in segments] == [
            (False, Decimal("1")),
            (True, Decimal("1")),
        ]

    def test_window_starting_exactly_at_nine_skips_empty_segment(self):
        day = date(2025, 1, 22)
        segments = split_day_window(day, datetime(2025, 1, 22, 9), datetime(2025, 1, 22, 21))

        assert len(segments) == 1
        assert segments[0].is_day
        assert segments[0].hours == Decimal("12")

    def test_full_day_has_three_bands(self):
        day = date(2025, 1, 22)
        segments = split_day_window(day, datetime(2025, 1, 22), datetime(2025, 1, 23))

        assert [(s.is_day, s.hours) for s in segments] == [
            (False, Decimal("9")),
            (True, Decimal("12")),
            (False, Decimal("3")),
        ]


class TestSplitShift:
    def test_segments_never_span_two_dates(self):
        start = datetime(2025, 1, 22, 20, 0)
        end = datetime(2025, 1, 23, 10, 0)

        segments = split_shift(start, end)

        assert len(segments) == 4
        for segment in segments:
            assert segment.start.date() == segment.day
            assert segment.end <= datetime.combine(segment.day + timedelta(days=1), datetime.min.time())

    def test_durations_add_up_to_shift_length(self):
        start = datetime(2025, 1, 24, 15, 30)
        end = datetime(2025, 1, 27, 10, 15)

        segments = split_shift(start, end)

        assert sum((s.duration for s in segments), timedelta(0)) == end - start
        assert segments[0].start == start
        assert segments[-1].end == end

    def test_chronological_and_contiguous(self):
        segments = split_shift(datetime(2025, 1, 22, 6), datetime(2025, 1, 24, 23))
        for previous, current in zip(segments, segments[1:]):
            assert previous.end == current.start


class TestTimedeltaToHours:
    def test_minutes(self):
        assert timedelta_to_hours(timedelta(minutes=90)) == Decimal("1.5")

    def test_days(self):
        assert timedelta_to_hours(timedelta(days=2, hours=18, minutes=45)) == Decimal("66.75")

    def test_microseconds(self):
        assert timedelta_to_hours(timedelta(seconds=1, microseconds=800000)) == Decimal("0.0005")
