"""
Enumerations for the shift payment engine.

This module defines the billing period types used as rate keys and the
day categories a shift can be declared with, preventing magic string errors.
"""

from enum import Enum


class PeriodType(Enum):
    """Billing periods a shift hour can fall into (the unit of rate lookup)"""

    WEEKDAY_DAY = "WEEKDAY_DAY"
    """Weekday hours between 09:00 and 21:00"""

    WEEKDAY_NIGHT = "WEEKDAY_NIGHT"
    """Weekday hours between 21:00 and 09:00"""

    WEEKEND_HOLIDAY_DAY = "WEEKEND_HOLIDAY_DAY"
    """Weekend or holiday hours between 09:00 and 21:00"""

    WEEKEND_HOLIDAY_NIGHT = "WEEKEND_HOLIDAY_NIGHT"
    """Weekend or holiday hours between 21:00 and 09:00"""

    def __str__(self):
        return self.value

    @property
    def is_day(self) -> bool:
        return self in (PeriodType.WEEKDAY_DAY, PeriodType.WEEKEND_HOLIDAY_DAY)

    @property
    def is_weekend_or_holiday(self) -> bool:
        return self in (
            PeriodType.WEEKEND_HOLIDAY_DAY,
            PeriodType.WEEKEND_HOLIDAY_NIGHT,
        )

    @classmethod
    def for_slot(cls, is_day: bool, is_weekend_or_holiday: bool) -> "PeriodType":
        """
        Combine the day/night and weekday/weekend-holiday axes.

        Args:
            is_day: True for hours in [09:00, 21:00)
            is_weekend_or_holiday: True when the calendar day is Sat/Sun or a holiday

        Returns:
            PeriodType: The billing period for that slot
        """
        if is_weekend_or_holiday:
            return cls.WEEKEND_HOLIDAY_DAY if is_day else cls.WEEKEND_HOLIDAY_NIGHT
        return cls.WEEKDAY_DAY if is_day else cls.WEEKDAY_NIGHT

    @classmethod
    def from_string(cls, value) -> "PeriodType":
        """
        Parse a period type from its name (case-insensitive).

        Raises:
            InvalidRateError: If the value is not a known period type
        """
        from .exceptions import InvalidRateError

        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise InvalidRateError(f"Unknown rate period type: {value!r}") from None


class DayCategory(Enum):
    """Declared category of a shift's day, used for display"""

    WEEKDAY = "WEEKDAY"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"

    def __str__(self):
        return self.value

    @property
    def is_weekend_or_holiday(self) -> bool:
        return self is not DayCategory.WEEKDAY
