"""
Weather Module - Core business logic for the forecast pipeline

This module sequences the forecast lookup for a pair of coordinates:
- Resolve the forecast endpoint through the NWS points lookup
- Fetch the forecast from the resolved endpoint
- Extract the current period and classify its temperature

Every stage fails fast. The first error aborts the remaining stages and is
reported as the failure of the stage it happened in.
"""

import logging
import time

from .api_data import API, BASE_URL, USER_AGENT
from .data_parser import extract
from .errors import (
    ExtractionFailed,
    FetchFailed,
    ForecastError,
    ResolutionFailed,
)
from .models import ForecastResult

logger = logging.getLogger(__name__)


class Deadline:
    """
    Time budget shared by every stage of one pipeline run.

    The remaining budget is handed to requests as its timeout, which bounds
    the connect and each socket read separately, not the whole transfer.
    An upstream that trickles bytes can therefore outlast the deadline.
    """

    def __init__(self, seconds=None, clock=time.monotonic):
        self.clock = clock
        self.expires_at = None if seconds is None else clock() + seconds

    def remaining(self):
        """Seconds left, or None when the run is unbounded"""
        if self.expires_at is None:
            return None
        return max(self.expires_at - self.clock(), 0.0)

    def expired(self):
        return self.expires_at is not None and self.clock() >= self.expires_at


def fetch_forecast(latitude, longitude, deadline=None, base_url=BASE_URL,
                   user_agent=USER_AGENT, session=None):
    """
    Main entry point for forecast retrieval.

    Args:
        latitude: Latitude as given by the caller
        longitude: Longitude as given by the caller
        deadline: Optional time budget in seconds for the whole run
        base_url: NWS API base URL
        user_agent: User-Agent sent with both requests
        session: Optional requests.Session, a fresh one is used otherwise

    Returns:
        ForecastResult(short_description, feeling)

    Raises:
        ResolutionFailed: the points lookup failed
        FetchFailed: the forecast request failed
        ExtractionFailed: the forecast could not be decoded or classified
    """
    budget = Deadline(deadline)
    logger.info(f"Fetching forecast for latitude={latitude} longitude={longitude}")

    with API(base_url=base_url, user_agent=user_agent, session=session) as api:
        try:
            forecast_url = api.resolve(latitude, longitude, timeout=budget.remaining())
        except ForecastError as e:
            logger.error(f"Error resolving forecast endpoint: {e}")
            raise ResolutionFailed(str(e)) from e

        try:
            body = api.get_forecast(forecast_url, timeout=budget.remaining())
        except ForecastError as e:
            logger.error(f"Error fetching forecast: {e}")
            raise FetchFailed(str(e)) from e

    try:
        if budget.expired():
            raise TimeoutError("Deadline exceeded before extraction")
        extraction = extract(body)
    except (ForecastError, TimeoutError) as e:
        logger.error(f"Error extracting forecast data: {e}")
        raise ExtractionFailed(str(e)) from e

    logger.info(
        f"Forecast for {latitude},{longitude}: {extraction.short_description} "
        f"({extraction.feeling.value}, {extraction.time_of_day.value})"
    )
    return ForecastResult(extraction.short_description, extraction.feeling)
