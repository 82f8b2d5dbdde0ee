"""
Holiday calendar lookups.

The clinic calendar holds two kinds of holidays: exact ones tied to a single
date (YYYY-MM-DD) and recurring ones defined only by month and day (MM-DD),
which apply every year.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import FrozenSet, Iterable, Tuple

from django.utils.dateparse import parse_date, parse_datetime

from .enums import DayCategory
from .exceptions import InvalidHolidayError

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6


def is_weekend(day: date) -> bool:
    return day.weekday() in (SATURDAY, SUNDAY)


def parse_exact_date(value) -> date:
    """Accept a date, a datetime, or a YYYY-MM-DD / ISO-8601 datetime string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            parsed = parse_date(text) or parse_datetime(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, datetime):
            return parsed.date()
        if parsed is not None:
            return parsed
    raise InvalidHolidayError(f"Invalid holiday date: {value!r}")


def parse_month_day(value) -> Tuple[int, int]:
    """
    Accept a date/datetime, an (month, day) pair, or an MM-DD / YYYY-MM-DD string.

    Returns:
        tuple: (month, day)
    """
    if isinstance(value, (date, datetime)):
        return value.month, value.day
    if isinstance(value, tuple) and len(value) == 2:
        month, day = value
    elif isinstance(value, str):
        text = value.strip()
        if len(text) >= 10:
            parsed = parse_exact_date(text)
            return parsed.month, parsed.day
        try:
            month, day = (int(part) for part in text.split("-"))
        except ValueError:
            raise InvalidHolidayError(f"Invalid recurring holiday: {value!r}") from None
    else:
        raise InvalidHolidayError(f"Invalid recurring holiday: {value!r}")

    try:
        # 2000 is a leap year so 02-29 is accepted
        date(2000, month, day)
    except (TypeError, ValueError):
        raise InvalidHolidayError(f"Invalid recurring holiday: {value!r}") from None
    return month, day


def _field(row, *names, default=None):
    for name in names:
        if isinstance(row, Mapping):
            if name in row:
                return row[name]
        elif hasattr(row, name):
            return getattr(row, name)
    return default


@dataclass(frozen=True)
class HolidayIndex:
    """
    Exact-date and recurring month-day holiday sets.

    A date is a holiday when its full date is an exact holiday OR its
    month-day is a recurring holiday. Matching both has no extra effect.
    """

    exact_dates: FrozenSet[date] = field(default_factory=frozenset)
    recurring_dates: FrozenSet[Tuple[int, int]] = field(default_factory=frozenset)

    def __post_init__(self):
        # members are looked up by date and (month, day), so store only those
        object.__setattr__(
            self, "exact_dates", frozenset(parse_exact_date(v) for v in self.exact_dates)
        )
        object.__setattr__(
            self, "recurring_dates", frozenset(parse_month_day(v) for v in self.recurring_dates)
        )

    @classmethod
    def empty(cls) -> "HolidayIndex":
        return cls()

    @classmethod
    def build(cls, exact: Iterable = (), recurring: Iterable = ()) -> "HolidayIndex":
        return cls(exact_dates=exact, recurring_dates=recurring)

    @classmethod
    def from_holidays(cls, rows: Iterable) -> "HolidayIndex":
        """
        Build the index from persisted holiday rows.

        Each row is a mapping or object carrying a ``date`` and an
        ``is_recurrent`` flag (``isRecurrent`` is accepted too). Recurring
        rows only contribute their month and day.
        """
        exact, recurring = set(), set()
        for row in rows:
            value = _field(row, "date")
            if value is None:
                raise InvalidHolidayError(f"Holiday row {row!r} has no date")
            if _field(row, "is_recurrent", "isRecurrent", default=False):
                recurring.add(parse_month_day(value))
            else:
                exact.add(parse_exact_date(value))

        logger.debug(
            f"Holiday index built: {len(exact)} exact, {len(recurring)} recurring"
        )
        return cls(exact_dates=frozenset(exact), recurring_dates=frozenset(recurring))

    def is_exact_holiday(self, day: date) -> bool:
        return _as_date(day) in self.exact_dates

    def is_recurring_holiday(self, day: date) -> bool:
        day = _as_date(day)
        return (day.month, day.day) in self.recurring_dates

    def is_holiday(self, day: date) -> bool:
        return self.is_exact_holiday(day) or self.is_recurring_holiday(day)

    def is_weekend_or_holiday(self, day: date) -> bool:
        return is_weekend(_as_date(day)) or self.is_holiday(day)

    def day_category(self, day: date) -> DayCategory:
        """Holiday takes precedence over weekend."""
        if self.is_holiday(day):
            return DayCategory.HOLIDAY
        if is_weekend(_as_date(day)):
            return DayCategory.WEEKEND
        return DayCategory.WEEKDAY

    def with_exact(self, *days) -> "HolidayIndex":
        """Copy of the index with extra exact holidays."""
        return HolidayIndex(
            exact_dates=self.exact_dates | {parse_exact_date(d) for d in days},
            recurring_dates=self.recurring_dates,
        )


def _as_date(value) -> date:
    return value.date() if isinstance(value, datetime) else value
