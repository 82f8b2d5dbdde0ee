"""
Data contracts for shift payment results.

This module defines the result structures every calculation returns, so
callers (dashboards, payroll summaries, the CLI) consume a single shape.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from .enums import PeriodType

ZERO = Decimal("0")


@dataclass(frozen=True)
class PaymentBreakdownEntry:
    """Hours and pay accumulated in one billing period"""

    type: PeriodType
    hours: Decimal
    rate: Decimal

    @property
    def amount(self) -> Decimal:
        return self.hours * self.rate

    def __repr__(self):
        return f"PaymentBreakdownEntry({self.type}, hours={self.hours}, rate={self.rate})"


@dataclass(frozen=True)
class PaymentResult:
    """
    Standardized shift payment result.

    total_hours always equals the normalized shift duration. Entries are
    listed in PeriodType order and only periods with hours appear.
    """

    breakdown: Tuple[PaymentBreakdownEntry, ...]
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    normalized: bool = False
    missing_rates: Tuple[PeriodType, ...] = field(default_factory=tuple)

    @property
    def total_hours(self) -> Decimal:
        return sum((entry.hours for entry in self.breakdown), ZERO)

    @property
    def total_amount(self) -> Decimal:
        return sum((entry.amount for entry in self.breakdown), ZERO)

    def entry_for(self, period_type) -> Optional[PaymentBreakdownEntry]:
        period_type = PeriodType.from_string(period_type)
        for entry in self.breakdown:
            if entry.type is period_type:
                return entry
        return None

    def hours_for(self, period_type) -> Decimal:
        entry = self.entry_for(period_type)
        return entry.hours if entry else ZERO

    def amount_for(self, period_type) -> Decimal:
        entry = self.entry_for(period_type)
        return entry.amount if entry else ZERO

    def as_dict(self) -> dict:
        """
        Wire shape consumed by the UI and payroll summaries:
        {"totalHours", "totalAmount", "breakdown": [{"type", "hours", "rate", "amount"}]}
        """
        from .serializers import PaymentResultSerializer

        return PaymentResultSerializer(self).data
