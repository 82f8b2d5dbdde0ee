"""
Access to clinic-level settings used by the payment engine.
"""

import logging

import pytz

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

DEFAULT_CLINIC_TIME_ZONE = "America/Argentina/Buenos_Aires"


def get_clinic_timezone_name() -> str:
    if not settings.configured:
        return DEFAULT_CLINIC_TIME_ZONE
    return getattr(settings, "CLINIC_TIME_ZONE", None) or DEFAULT_CLINIC_TIME_ZONE


def get_clinic_timezone():
    """
    Timezone whose wall clock defines shift dates and the 09:00/21:00 split.

    Returns:
        pytz timezone for settings.CLINIC_TIME_ZONE

    Raises:
        ImproperlyConfigured: If the configured zone name is unknown
    """
    name = get_clinic_timezone_name()
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logger.error("Unknown CLINIC_TIME_ZONE configured: %s", name)
        raise ImproperlyConfigured(f"CLINIC_TIME_ZONE {name!r} is not a valid time zone")
