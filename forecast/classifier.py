"""
Classifier Module - Maps a temperature reading to how it feels

Only Fahrenheit readings are supported, the service covers US land coordinates.
"""

from .errors import UnsupportedUnit
from .models import Feeling

FAHRENHEIT = "F"

COLD_MAX = 32
MODERATE_MAX = 70


def classify(temperature, unit):
    """
    Classify a temperature into cold, moderate or hot.

    Args:
        temperature: Integer temperature reading
        unit: Provider unit code, must be "F"

    Returns:
        Feeling member for the reading

    Raises:
        UnsupportedUnit: for any unit other than Fahrenheit
    """
    if unit != FAHRENHEIT:
        raise UnsupportedUnit(unit)

    if temperature <= COLD_MAX:
        return Feeling.COLD
    elif temperature <= MODERATE_MAX:
        return Feeling.MODERATE
    else:
        return Feeling.HOT
