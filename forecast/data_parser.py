"""
Data Parser Module - Extracts the current forecast from NWS responses

Decodes the forecast body into an explicit schema and derives the
short description, the temperature feeling and the time of day
from the current period.
"""

import json
import logging

from pydantic import ValidationError

from .classifier import classify
from .errors import DecodeError, NoPeriodsAvailable, UnsupportedUnit
from .models import Extraction, ForecastPayload, TimeOfDay

logger = logging.getLogger(__name__)

NIGHT_PERIOD_NAME = "Tonight"


def decode_forecast(body):
    """Decode a raw forecast body (bytes, str or mapping) into a ForecastPayload"""
    if isinstance(body, ForecastPayload):
        return body

    try:
        if isinstance(body, (bytes, bytearray, str)):
            body = json.loads(body)
        return ForecastPayload.model_validate(body)
    except (ValueError, ValidationError) as e:
        raise DecodeError(f"Unexpected forecast response: {e}") from e


class Parser:
    """Provides access to the current period of a forecast payload"""

    def __init__(self, payload):
        self.payload = decode_forecast(payload)

    def get_periods(self):
        return self.payload.properties.periods

    def get_current_period(self):
        # NWS lists the period in progress first
        periods = self.get_periods()
        if not periods:
            raise NoPeriodsAvailable()
        return periods[0]

    def get_time_of_day(self):
        # Name match only, isDaytime and the timestamps are not consulted
        if self.get_current_period().name == NIGHT_PERIOD_NAME:
            return TimeOfDay.NIGHT
        return TimeOfDay.DAY


def extract(payload):
    """
    Derive the classified result from the current forecast period.

    Args:
        payload: ForecastPayload, decoded JSON mapping or raw body

    Returns:
        Extraction(short_description, feeling, time_of_day)

    Raises:
        DecodeError: payload does not match the forecast schema
        NoPeriodsAvailable: payload has no periods
        UnsupportedUnit: current period is not in Fahrenheit
    """
    parser = Parser(payload)
    period = parser.get_current_period()
    time_of_day = parser.get_time_of_day()
    logger.info(f"Current period is {period.name!r}, treating it as {time_of_day.value}")

    try:
        feeling = classify(period.temperature, period.temperature_unit)
    except UnsupportedUnit as e:
        logger.error(f"Error getting temperature feeling: {e}")
        raise

    logger.info(f"Extracted short forecast {period.short_forecast!r} feeling {feeling.value}")
    return Extraction(period.short_forecast, feeling, time_of_day)
