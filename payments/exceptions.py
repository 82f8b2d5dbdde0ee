"""
Exceptions raised by the shift payment engine.

Only unrecoverable input problems are raised. Malformed shift ranges and
missing rates are absorbed by the engine and never surface here.
"""


class ShiftPaymentError(Exception):
    """Base class for shift payment engine errors"""


class InvalidShiftError(ShiftPaymentError, ValueError):
    """Raised when shift timestamps are missing, unparseable or not datetimes"""


class InvalidRateError(ShiftPaymentError, ValueError):
    """Raised when a rate row has an unknown period type or a bad amount"""


class InvalidHolidayError(ShiftPaymentError, ValueError):
    """Raised when a holiday date cannot be interpreted"""
