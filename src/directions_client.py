"""
Google Maps Directions API client

Issues exactly one GET per call and hands back the raw body. There is no
retry: a failed fetch aborts the current tick and the next tick tries again.
"""

import logging

import requests

from src.config import DEFAULT_DIRECTIONS_URL
from src.exceptions import DirectionsFetchError

logger = logging.getLogger(__name__)


class DirectionsClient:
    def __init__(self, api_key, base_url=DEFAULT_DIRECTIONS_URL, timeout=None, session=None):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.http = session or requests.Session()

    def build_params(self, origin, destination):
        """Query parameters for a live-traffic query with alternative routes"""
        return {
            "origin": origin,
            "destination": destination,
            "departure_time": "now",
            "alternatives": "true",
            "key": self.api_key,
            "traffic_model": "best_guess",
        }

    def fetch_directions(self, origin, destination) -> str:
        """
        Fetch directions between two locations

        Args:
            origin: Start location (address or "lat,lng")
            destination: End location

        Returns:
            Raw JSON response body

        Raises:
            DirectionsFetchError: missing API key, network error or non-200 status
        """
        if not self.api_key:
            raise DirectionsFetchError("GOOGLE_MAPS_API_KEY is not configured")

        logger.info("Fetching directions from %r to %r", origin, destination)

        try:
            response = self.http.get(
                self.base_url,
                params=self.build_params(origin, destination),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise DirectionsFetchError(f"Timeout: request took longer than {self.timeout} seconds") from e
        except requests.exceptions.RequestException as e:
            raise DirectionsFetchError(f"Network error: {e}") from e

        if response.status_code != 200:
            raise DirectionsFetchError(
                f"Error fetching directions: {response.status_code}",
                status_code=response.status_code,
            )

        return response.text

    def close(self):
        self.http.close()
