# Shift payment engine

from .calculator import ShiftPaymentCalculator, calculate_shift_payment, shift_duration_hours
from .contracts import PaymentBreakdownEntry, PaymentResult
from .enums import DayCategory, PeriodType
from .exceptions import InvalidHolidayError, InvalidRateError, InvalidShiftError, ShiftPaymentError
from .holidays import HolidayIndex
from .rates import RateTable

__all__ = [
    "DayCategory",
    "HolidayIndex",
    "InvalidHolidayError",
    "InvalidRateError",
    "InvalidShiftError",
    "PaymentBreakdownEntry",
    "PaymentResult",
    "PeriodType",
    "RateTable",
    "ShiftPaymentCalculator",
    "ShiftPaymentError",
    "calculate_shift_payment",
    "shift_duration_hours",
]
