"""
Hourly rate table for the four billing periods.

A RateTable is built once from the persisted rate rows and then shared,
read-only, by every shift calculation of a session.
"""

import logging
from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from types import MappingProxyType

from .enums import PeriodType
from .exceptions import InvalidRateError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def to_rate(value) -> Decimal:
    """
    Convert a persisted rate value into a Decimal hourly rate.

    Args:
        value: int, float, Decimal or numeric string

    Returns:
        Decimal: The rate

    Raises:
        InvalidRateError: If the value is not a finite, non-negative number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidRateError(f"Rate must be a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        rate = value if isinstance(value, Decimal) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidRateError(f"Rate must be a number, got {value!r}") from None

    if not rate.is_finite():
        raise InvalidRateError(f"Rate must be finite, got {value!r}")
    if rate < 0:
        raise InvalidRateError(f"Rate cannot be negative, got {value!r}")
    return rate


def _row_value(row, *names):
    for name in names:
        if isinstance(row, Mapping):
            if name in row:
                return row[name]
        elif hasattr(row, name):
            return getattr(row, name)
    raise InvalidRateError(f"Rate row {row!r} has no {names[0]!r}")


class RateTable(Mapping):
    """Immutable mapping of PeriodType -> hourly rate"""

    def __init__(self, rates=None):
        parsed = {}
        for key, value in dict(rates or {}).items():
            parsed[PeriodType.from_string(key)] = to_rate(value)
        self._rates = MappingProxyType(parsed)

    @classmethod
    def from_rows(cls, rows) -> "RateTable":
        """
        Build a table from persisted rate rows.

        Rows may be mappings ({"period_type": ..., "rate": ...}, camelCase
        "periodType" is accepted too) or objects with period_type and rate
        attributes. When a period appears twice the later row wins.
        """
        rates = {}
        for row in rows:
            period = PeriodType.from_string(_row_value(row, "period_type", "periodType"))
            if period in rates:
                logger.warning(f"Duplicate rate row for {period}, using the later one")
            rates[period] = _row_value(row, "rate")
        return cls(rates)

    def __getitem__(self, key):
        try:
            return self._rates[PeriodType.from_string(key)]
        except InvalidRateError:
            raise KeyError(key) from None

    def __iter__(self):
        return iter(self._rates)

    def __len__(self):
        return len(self._rates)

    def __repr__(self):
        items = ", ".join(f"{k}={v}" for k, v in self._rates.items())
        return f"RateTable({items})"

    def rate_for(self, period_type) -> Decimal:
        """Rate for a period; an unconfigured period bills at zero."""
        return self._rates.get(PeriodType.from_string(period_type), ZERO)

    def missing_periods(self) -> tuple:
        return tuple(p for p in PeriodType if p not in self._rates)

    @property
    def is_complete(self) -> bool:
        return not self.missing_periods()
