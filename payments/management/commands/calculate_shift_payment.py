"""
Django management command to calculate the payment for a single shift

Usage:
    python manage.py calculate_shift_payment --start 2025-01-25T21:00 --end 2025-01-26T09:00 \
        --rate WEEKEND_HOLIDAY_NIGHT=10 --rate WEEKDAY_NIGHT=5 --holiday 2025-01-25
    python manage.py calculate_shift_payment --start 2025-01-01T21:00 --end 2025-01-02T09:00 \
        --recurring-holiday 01-01 --rate WEEKDAY_NIGHT=5
    python manage.py calculate_shift_payment --input shift.json
"""

import json

from django.core.management.base import BaseCommand, CommandError
from django.core.serializers.json import DjangoJSONEncoder

from payments.calculator import ShiftPaymentCalculator
from payments.exceptions import ShiftPaymentError
from payments.serializers import ShiftPaymentRequestSerializer


class Command(BaseCommand):
    help = "Calculate hours and payment per billing period for one shift"

    def add_arguments(self, parser):
        parser.add_argument("--start", type=str, help="Shift start (ISO 8601)")
        parser.add_argument("--end", type=str, help="Shift end (ISO 8601)")
        parser.add_argument(
            "--rate",
            action="append",
            default=[],
            metavar="PERIOD=RATE",
            help="Hourly rate for a period, e.g. WEEKDAY_DAY=8 (repeatable)",
        )
        parser.add_argument(
            "--holiday",
            action="append",
            default=[],
            metavar="YYYY-MM-DD",
            help="One-off holiday date (repeatable)",
        )
        parser.add_argument(
            "--recurring-holiday",
            action="append",
            default=[],
            metavar="MM-DD",
            help="Holiday recurring every year (repeatable)",
        )
        parser.add_argument(
            "--holiday-or-weekend",
            action="store_true",
            help="Legacy flag: treat the start day as a holiday when no calendar is given",
        )
        parser.add_argument(
            "--input",
            type=str,
            help="JSON file with start, end, rates, holidays and recurringHolidays",
        )

    def handle(self, *args, **options):
        payload = self._build_payload(options)

        serializer = ShiftPaymentRequestSerializer(data=payload)
        if not serializer.is_valid():
            raise CommandError(f"Invalid shift payment request: {dict(serializer.errors)}")
        data = serializer.validated_data

        calculator = ShiftPaymentCalculator(data["rates"], data["holiday_index"])
        try:
            result = calculator.calculate(
                data["start"],
                data["end"],
                is_holiday_or_weekend=data.get("isHolidayOrWeekend"),
            )
        except ShiftPaymentError as e:
            raise CommandError(str(e))

        if result.normalized:
            self.stderr.write(
                self.style.WARNING(f"End adjusted to {result.end.isoformat()} (overnight shift)")
            )
        if result.missing_rates:
            self.stderr.write(
                self.style.WARNING(
                    "Rates not configured for: " + ", ".join(map(str, result.missing_rates))
                )
            )

        self.stdout.write(json.dumps(result.as_dict(), cls=DjangoJSONEncoder, indent=2))

    def _build_payload(self, options):
        payload = {}
        if options.get("input"):
            try:
                with open(options["input"], encoding="utf-8") as fh:
                    payload = json.load(fh)
            except (OSError, json.JSONDecodeError) as e:
                raise CommandError(f"Cannot read input file: {e}")
            if not isinstance(payload, dict):
                raise CommandError("Input file must contain a JSON object")

        if options.get("start"):
            payload["start"] = options["start"]
        if options.get("end"):
            payload["end"] = options["end"]

        rates = dict(payload.get("rates") or {})
        for item in options.get("rate") or []:
            period, sep, value = item.partition("=")
            if not sep:
                raise CommandError(f"Rate must look like PERIOD=RATE, got {item!r}")
            rates[period.strip()] = value.strip()
        payload["rates"] = rates

        payload["holidays"] = list(payload.get("holidays") or []) + list(options.get("holiday") or [])
        payload["recurringHolidays"] = list(payload.get("recurringHolidays") or []) + list(
            options.get("recurring_holiday") or []
        )
        if options.get("holiday_or_weekend"):
            payload["isHolidayOrWeekend"] = True

        if "start" not in payload or "end" not in payload:
            raise CommandError("Both --start and --end are required (or provide them in --input)")
        return payload
