"""
Shift splitting at midnight and at the 09:00/21:00 day-night boundaries.

A shift is first cut at every midnight it crosses, so no piece ever spans two
calendar dates. Each day's piece is then cut at 09:00 and 21:00, producing up
to three segments: night before 09:00, day until 21:00, night after 21:00.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

DAY_START = time(9, 0)
DAY_END = time(21, 0)

ONE_DAY = timedelta(days=1)
SECONDS_PER_HOUR = Decimal(3600)


def timedelta_to_hours(delta: timedelta) -> Decimal:
    """Exact Decimal hours for a timedelta (microseconds included)."""
    seconds = Decimal(delta.days * 86400 + delta.seconds)
    if delta.microseconds:
        seconds += Decimal(delta.microseconds) / Decimal(1_000_000)
    return seconds / SECONDS_PER_HOUR


@dataclass(frozen=True)
class ShiftSegment:
    """A piece of a shift inside one calendar day and one day/night band"""

    start: datetime
    end: datetime
    day: date
    is_day: bool

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def hours(self) -> Decimal:
        return timedelta_to_hours(self.duration)


def normalize_shift_end(start: datetime, end: datetime) -> Tuple[datetime, int]:
    """
    Repair an end time recorded without its day rollover.

    Legacy overnight shifts were sometimes stored with the end on the start's
    date (e.g. 21:00 -> 09:00 the same day). The end is pushed forward by the
    smallest number of whole days that puts it after the start.

    Args:
        start: Shift start
        end: Shift end as stored

    Returns:
        tuple: (normalized end, number of days added)
    """
    if end > start:
        return end, 0

    # floor of the gap in days, plus one, is the smallest shift past start
    days = (start - end).days + 1
    return end + timedelta(days=days), days


def iter_calendar_days(start: datetime, end: datetime) -> Iterator[Tuple[date, datetime, datetime]]:
    """
    Yield (day, window_start, window_end) for each calendar day the shift touches.

    The first window starts at the shift start, the last one ends at the shift
    end, and every window in between covers a full day.
    """
    current = start
    while current < end:
        next_midnight = datetime.combine(current.date() + ONE_DAY, time.min)
        window_end = min(end, next_midnight)
        yield current.date(), current, window_end
        current = window_end


def split_day_window(day: date, window_start: datetime, window_end: datetime) -> List[ShiftSegment]:
    """Split a same-day window at 09:00 and 21:00, skipping empty pieces."""
    day_start = datetime.combine(day, DAY_START)
    day_end = datetime.combine(day, DAY_END)

    bands = (
        (datetime.combine(day, time.min), day_start, False),
        (day_start, day_end, True),
        (day_end, datetime.combine(day + ONE_DAY, time.min), False),
    )

    segments = []
    for band_start, band_end, is_day in bands:
        seg_start = max(window_start, band_start)
        seg_end = min(window_end, band_end)
        if seg_end > seg_start:
            segments.append(ShiftSegment(seg_start, seg_end, day, is_day))
    return segments


def split_shift(start: datetime, end: datetime) -> List[ShiftSegment]:
    """
    Split a normalized (start < end) naive local interval into segments.

    Returns:
        list: ShiftSegment items in chronological order; their durations sum
        to end - start

    Raises:
        OverflowError: If a window reaches datetime.max (9999-12-31)
    """
    segments = []
    for day, window_start, window_end in iter_calendar_days(start, end):
        segments.extend(split_day_window(day, window_start, window_end))

    logger.debug(f"Split shift {start} -> {end} into {len(segments)} segments")
    return segments
