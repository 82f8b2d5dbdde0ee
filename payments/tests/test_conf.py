"""
Tests for clinic time zone configuration.
"""

import pytest
import pytz

from django.core.exceptions import ImproperlyConfigured

from payments.conf import DEFAULT_CLINIC_TIME_ZONE, get_clinic_timezone


class TestClinicTimezone:
    def test_configured_zone(self, settings):
        settings.CLINIC_TIME_ZONE = "Europe/Madrid"
        assert get_clinic_timezone() == pytz.timezone("Europe/Madrid")

    def test_blank_zone_falls_back_to_default(self, settings):
        settings.CLINIC_TIME_ZONE = ""
        assert get_clinic_timezone().zone == DEFAULT_CLINIC_TIME_ZONE

    def test_unknown_zone(self, settings):
        settings.CLINIC_TIME_ZONE = "Mars/Olympus_Mons"
        with pytest.raises(ImproperlyConfigured):
            get_clinic_timezone()
