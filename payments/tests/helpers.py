"""
Shared constants and factories for shift payment tests.
"""

from datetime import datetime
from decimal import Decimal

from payments.enums import PeriodType
from payments.rates import RateTable

WEEKDAY_DAY_RATE = Decimal("8")
WEEKDAY_NIGHT_RATE = Decimal("5")
HOLIDAY_DAY_RATE = Decimal("20")
HOLIDAY_NIGHT_RATE = Decimal("10")

# Calendar anchors used across tests (verified weekdays)
WEDNESDAY = datetime(2025, 1, 22)  # 2025-01-22
SATURDAY = datetime(2025, 1, 25)  # 2025-01-25
SUNDAY = datetime(2025, 1, 26)  # 2025-01-26


def make_rates(**overrides) -> RateTable:
    """Full rate table; pass PERIOD=None to leave a period unconfigured."""
    rates = {
        PeriodType.WEEKDAY_DAY: WEEKDAY_DAY_RATE,
        PeriodType.WEEKDAY_NIGHT: WEEKDAY_NIGHT_RATE,
        PeriodType.WEEKEND_HOLIDAY_DAY: HOLIDAY_DAY_RATE,
        PeriodType.WEEKEND_HOLIDAY_NIGHT: HOLIDAY_NIGHT_RATE,
    }
    for key, value in overrides.items():
        period = PeriodType.from_string(key)
        if value is None:
            rates.pop(period, None)
        else:
            rates[period] = value
    return RateTable(rates)


def hours_by_type(result) -> dict:
    return {entry.type: entry.hours for entry in result.breakdown}
