"""
API Data Module - Handles communication with the National Weather Service API

Two-step process:
1. Resolve coordinates to the forecast endpoint of their grid (points lookup)
2. Fetch the forecast from that endpoint

No API key required, but NWS rejects requests without a User-Agent.
"""

import json
import logging

import requests
from pydantic import ValidationError

from .errors import DecodeError, UpstreamRequestError
from .models import PointsResponse

logger = logging.getLogger(__name__)

BASE_URL = "https://api.weather.gov"
USER_AGENT = "forecast-feeling (contact@example.com)"
DEFAULT_TIMEOUT = 10.0


class API:
    """
    Client for the NWS points and forecast endpoints.

    One instance serves one pipeline run.
    Use it as a context manager so the session is closed on every exit path.
    """

    def __init__(self, base_url=BASE_URL, user_agent=USER_AGENT, session=None):
        self.base_url = base_url.rstrip("/")
        self.owns_session = session is None
        self.session = session or requests.Session()
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "application/geo+json",
        }

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        # Sessions handed in by the caller stay open
        if self.owns_session:
            self.session.close()

    def points_url(self, latitude, longitude):
        # Coordinates go through untouched, the provider rejects bad ones
        return f"{self.base_url}/points/{latitude},{longitude}"

    def _get(self, url, timeout=None):
        """GET a URL and return the raw body, the response is released before returning"""
        if timeout is None:
            timeout = DEFAULT_TIMEOUT
        if timeout <= 0:
            raise UpstreamRequestError(f"Deadline exceeded before requesting {url}")

        try:
            with self.session.get(url, headers=self.headers, timeout=timeout) as res:
                res.raise_for_status()
                return res.content
        except requests.RequestException as e:
            raise UpstreamRequestError(f"Request to {url} failed: {e}") from e

    def resolve(self, latitude, longitude, timeout=None):
        """Look up the forecast endpoint URL for a pair of coordinates"""
        url = self.points_url(latitude, longitude)
        logger.info(f"Resolving forecast endpoint via {url}")
        body = self._get(url, timeout)

        try:
            points = PointsResponse.model_validate(json.loads(body))
        except (ValueError, ValidationError) as e:
            raise DecodeError(f"Unexpected points response from {url}: {e}") from e

        return points.properties.forecast

    def get_forecast(self, forecast_url, timeout=None):
        """Fetch the raw forecast body, decoding is left to the parser"""
        logger.info(f"Fetching forecast from {forecast_url}")
        return self._get(forecast_url, timeout)
