from rest_framework import serializers

from .calculator import coerce_datetime
from .exceptions import InvalidHolidayError, InvalidRateError, InvalidShiftError
from .holidays import HolidayIndex
from .rates import RateTable


class PaymentBreakdownEntrySerializer(serializers.Serializer):
    """One billing period line item"""

    type = serializers.CharField(source="type.value", read_only=True)
    hours = serializers.DecimalField(max_digits=None, decimal_places=2, coerce_to_string=False, read_only=True)
    rate = serializers.DecimalField(max_digits=None, decimal_places=2, coerce_to_string=False, read_only=True)
    amount = serializers.DecimalField(max_digits=None, decimal_places=2, coerce_to_string=False, read_only=True)


class PaymentResultSerializer(serializers.Serializer):
    """Shift payment in the shape rendered by the calendar and dashboards"""

    totalHours = serializers.DecimalField(
        source="total_hours", max_digits=None, decimal_places=2, coerce_to_string=False, read_only=True
    )
    totalAmount = serializers.DecimalField(
        source="total_amount", max_digits=None, decimal_places=2, coerce_to_string=False, read_only=True
    )
    breakdown = PaymentBreakdownEntrySerializer(many=True, read_only=True)


class ShiftPaymentRequestSerializer(serializers.Serializer):
    """
    Validates a shift payment request and builds the calculator inputs.

    Expected payload:
        {
            "start": "2025-01-25T21:00:00",
            "end": "2025-01-26T09:00:00",
            "rates": {"WEEKDAY_DAY": 8, "WEEKDAY_NIGHT": 5, ...},
            "holidays": ["2025-01-25"],
            "recurringHolidays": ["01-01"],
            "isHolidayOrWeekend": true
        }
    """

    start = serializers.CharField()
    end = serializers.CharField()
    rates = serializers.DictField(child=serializers.CharField(), required=False, default=dict)
    holidays = serializers.ListField(child=serializers.CharField(), required=False, default=list)
    recurringHolidays = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    isHolidayOrWeekend = serializers.BooleanField(required=False, allow_null=True, default=None)

    def validate_start(self, value):
        try:
            return coerce_datetime(value, "start")
        except InvalidShiftError as e:
            raise serializers.ValidationError(str(e))

    def validate_end(self, value):
        try:
            return coerce_datetime(value, "end")
        except InvalidShiftError as e:
            raise serializers.ValidationError(str(e))

    def validate_rates(self, value):
        try:
            return RateTable(value)
        except InvalidRateError as e:
            raise serializers.ValidationError(str(e))

    def validate(self, attrs):
        exact = attrs.get("holidays") or []
        recurring = attrs.get("recurringHolidays") or []
        if exact or recurring:
            try:
                attrs["holiday_index"] = HolidayIndex.build(exact=exact, recurring=recurring)
            except InvalidHolidayError as e:
                raise serializers.ValidationError({"holidays": str(e)})
        else:
            attrs["holiday_index"] = None

        rates = attrs.get("rates")
        if not isinstance(rates, RateTable):
            attrs["rates"] = RateTable(rates)
        return attrs
