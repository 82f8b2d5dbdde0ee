"""
Global pytest configuration and fixtures
"""

from decimal import Decimal

import pytest


@pytest.fixture
def full_rates():
    """Rate table with all four periods configured"""
    from payments.rates import RateTable

    return RateTable(
        {
            "WEEKDAY_DAY": Decimal("8"),
            "WEEKDAY_NIGHT": Decimal("5"),
            "WEEKEND_HOLIDAY_DAY": Decimal("20"),
            "WEEKEND_HOLIDAY_NIGHT": Decimal("10"),
        }
    )


@pytest.fixture
def clinic_timezone(settings):
    """Pin the clinic wall clock for timezone conversion tests"""
    settings.CLINIC_TIME_ZONE = "America/Argentina/Buenos_Aires"
    return settings.CLINIC_TIME_ZONE
