"""
Shift payment calculation.

Given a shift's start and end, the clinic's rate table and holiday calendar,
computes how many hours fall into each billing period and what they pay.
The calculator is a pure function of its inputs: it performs no I/O, never
mutates the rate table or holiday index, and keeps no state between calls,
so one instance can be shared freely across threads.
"""

import logging
from collections import OrderedDict
from datetime import date, datetime, timedelta
from typing import Optional

from django.utils.dateparse import parse_datetime

from .conf import get_clinic_timezone
from .contracts import PaymentBreakdownEntry, PaymentResult
from .enums import PeriodType
from .exceptions import InvalidShiftError
from .holidays import HolidayIndex
from .rates import RateTable
from .shift_splitter import normalize_shift_end, split_shift, timedelta_to_hours

logger = logging.getLogger(__name__)


def coerce_datetime(value, field_name: str = "timestamp") -> datetime:
    """
    Turn a shift timestamp into a naive datetime on the clinic's wall clock.

    Naive datetimes are taken as already local. Aware ones are converted to
    settings.CLINIC_TIME_ZONE first. ISO-8601 strings are parsed.

    Raises:
        InvalidShiftError: If the value is missing or cannot be parsed
    """
    if isinstance(value, str):
        try:
            parsed = parse_datetime(value.strip())
        except ValueError:
            parsed = None
        if parsed is None:
            raise InvalidShiftError(f"Shift {field_name} is not a valid datetime: {value!r}")
        value = parsed
    elif isinstance(value, date) and not isinstance(value, datetime):
        raise InvalidShiftError(f"Shift {field_name} needs a time of day, got date {value}")
    elif not isinstance(value, datetime):
        raise InvalidShiftError(f"Shift {field_name} must be a datetime, got {value!r}")

    if value.tzinfo is not None and value.utcoffset() is not None:
        clinic_tz = get_clinic_timezone()
        try:
            value = clinic_tz.normalize(value.astimezone(clinic_tz)).replace(tzinfo=None)
        except OverflowError:
            raise InvalidShiftError(f"Shift {field_name} is out of range: {value}") from None
    return value


def normalize_interval(start, end):
    """
    Coerce both timestamps and repair an end stored before its start.

    Returns:
        tuple: (start, end, days_added) as naive local datetimes
    """
    start = coerce_datetime(start, "start")
    end = coerce_datetime(end, "end")

    try:
        normalized_end, days_added = normalize_shift_end(start, end)
    except OverflowError:
        raise InvalidShiftError(f"Shift end {end} cannot be moved past start {start}") from None
    if days_added:
        logger.warning(
            f"Shift end {end} is not after start {start}; "
            f"treating it as {normalized_end} (+{days_added} day(s))"
        )
    return start, normalized_end, days_added


def shift_duration_hours(start, end):
    """Normalized duration of a shift in hours (Decimal)."""
    start, end, _ = normalize_interval(start, end)
    return timedelta_to_hours(end - start)


class ShiftPaymentCalculator:
    """
    Classifies shift hours into billing periods and prices them.

    Every calendar day the shift touches is classified on its own, so a shift
    starting on a holiday evening and ending the next ordinary morning bills
    the hours before midnight at holiday rates and the rest at weekday rates.
    """

    def __init__(self, rates, holidays: Optional[HolidayIndex] = None):
        """
        Args:
            rates: RateTable, or a mapping of period type -> rate
            holidays: Clinic holiday calendar; None when the caller has none
        """
        self.rates = rates if isinstance(rates, RateTable) else RateTable(rates)
        self.holidays = holidays

    def calculate(self, start, end, *, is_holiday_or_weekend: Optional[bool] = None) -> PaymentResult:
        """
        Calculate the payment for one shift.

        Args:
            start: Shift start (datetime or ISO string)
            end: Shift end; an end at or before start is rolled forward by days
            is_holiday_or_weekend: Legacy hint about the start day. Ignored when
                a holiday index is available; otherwise a true value marks the
                start date as a holiday for this call.

        Returns:
            PaymentResult: Breakdown per period plus totals

        Raises:
            InvalidShiftError: If either timestamp cannot be interpreted
                or the shift reaches the end of the supported calendar
        """
        start, end, days_added = normalize_interval(start, end)
        holidays = self._holidays_for(start, is_holiday_or_weekend)

        try:
            segments = split_shift(start, end)
        except OverflowError:
            raise InvalidShiftError(
                f"Shift {start} -> {end} runs past the last representable date"
            ) from None

        durations = OrderedDict((period, timedelta(0)) for period in PeriodType)
        for segment in segments:
            period = PeriodType.for_slot(
                segment.is_day, holidays.is_weekend_or_holiday(segment.day)
            )
            durations[period] += segment.duration

        if sum(durations.values(), timedelta(0)) != end - start:
            raise AssertionError(f"Hours lost while splitting shift {start} -> {end}")

        breakdown = []
        missing = []
        for period, duration in durations.items():
            if not duration:
                continue
            if period not in self.rates:
                missing.append(period)
            breakdown.append(
                PaymentBreakdownEntry(
                    type=period,
                    hours=timedelta_to_hours(duration),
                    rate=self.rates.rate_for(period),
                )
            )

        if missing:
            logger.warning(
                f"No rate configured for {', '.join(map(str, missing))}; "
                f"those hours are billed at 0"
            )

        result = PaymentResult(
            breakdown=tuple(breakdown),
            start=start,
            end=end,
            normalized=bool(days_added),
            missing_rates=tuple(missing),
        )
        logger.debug(
            f"Shift {start} -> {end}: {result.total_hours}h, amount {result.total_amount}"
        )
        return result

    def _holidays_for(self, start: datetime, hint: Optional[bool]) -> HolidayIndex:
        if self.holidays is not None:
            if hint is not None and bool(hint) != self.holidays.is_weekend_or_holiday(start):
                logger.debug(
                    f"Ignoring legacy holiday hint {hint} for {start.date()}; "
                    f"the holiday calendar says otherwise"
                )
            return self.holidays

        if hint:
            return HolidayIndex.empty().with_exact(start.date())
        return HolidayIndex.empty()


def calculate_shift_payment(
    start,
    end,
    rates,
    holidays: Optional[HolidayIndex] = None,
    *,
    is_holiday_or_weekend: Optional[bool] = None,
) -> PaymentResult:
    """Convenience wrapper around ShiftPaymentCalculator for a single shift."""
    calculator = ShiftPaymentCalculator(rates, holidays)
    return calculator.calculate(start, end, is_holiday_or_weekend=is_holiday_or_weekend)
