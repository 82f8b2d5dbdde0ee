"""
Tests for period type and day category enums.
"""

import pytest

from payments.enums import DayCategory, PeriodType
from payments.exceptions import InvalidRateError


class TestPeriodType:
    @pytest.mark.parametrize(
        "is_day, is_weekend_or_holiday, expected",
        [
            (True, False, PeriodType.WEEKDAY_DAY),
            (False, False, PeriodType.WEEKDAY_NIGHT),
            (True, True, PeriodType.WEEKEND_HOLIDAY_DAY),
            (False, True, PeriodType.WEEKEND_HOLIDAY_NIGHT),
        ],
    )
    def test_for_slot(self, is_day, is_weekend_or_holiday, expected):
        period = PeriodType.for_slot(is_day, is_weekend_or_holiday)

        assert period is expected
        assert period.is_day is is_day
        assert period.is_weekend_or_holiday is is_weekend_or_holiday

    def test_from_string(self):
        assert PeriodType.from_string(" weekday_night ") is PeriodType.WEEKDAY_NIGHT
        assert PeriodType.from_string(PeriodType.WEEKDAY_DAY) is PeriodType.WEEKDAY_DAY

    def test_unknown_period(self):
        with pytest.raises(InvalidRateError):
            PeriodType.from_string("HOLIDAY")

    def test_str(self):
        assert str(PeriodType.WEEKEND_HOLIDAY_NIGHT) == "WEEKEND_HOLIDAY_NIGHT"
        assert str(DayCategory.HOLIDAY) == "HOLIDAY"
