"""
Route parsing

Turns a raw Directions API body into flat, immutable RouteRecords. The parse
is all-or-nothing: one bad route fails the whole response.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import List

from pydantic import ValidationError

from src.exceptions import DirectionsApiError, DirectionsParseError
from src.schemas import SUCCESS_STATUSES, DirectionsResponse, DirectionsRoute

logger = logging.getLogger(__name__)


def _new_row_key() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class RouteRecord:
    """One alternative route for a single query, flattened from its first leg"""

    summary: str
    distance_text: str
    distance_value: int
    duration_text: str
    duration_value: int
    duration_in_traffic_text: str
    duration_in_traffic_value: int
    start_address: str
    start_lat: float
    start_lng: float
    end_address: str
    end_lat: float
    end_lng: float
    row_key: str = field(default_factory=_new_row_key)

    @classmethod
    def from_route(cls, route: DirectionsRoute) -> "RouteRecord":
        leg = route.legs[0]
        return cls(
            summary=route.summary,
            distance_text=leg.distance.text,
            distance_value=leg.distance.value,
            duration_text=leg.duration.text,
            duration_value=leg.duration.value,
            duration_in_traffic_text=leg.duration_in_traffic.text,
            duration_in_traffic_value=leg.duration_in_traffic.value,
            start_address=leg.start_address,
            start_lat=leg.start_location.lat,
            start_lng=leg.start_location.lng,
            end_address=leg.end_address,
            end_lat=leg.end_location.lat,
            end_lng=leg.end_location.lng,
        )


def parse_response(json_text: str) -> DirectionsResponse:
    """Validate the body against the response schema"""
    try:
        response = DirectionsResponse.model_validate_json(json_text)
    except ValidationError as e:
        raise DirectionsParseError(f"Invalid directions response: {e}") from e

    if response.status not in SUCCESS_STATUSES:
        raise DirectionsApiError(response.status, response.error_message)

    return response


def parse_routes(json_text: str) -> List[RouteRecord]:
    """
    Parse a Directions API body into route records

    Args:
        json_text: Raw response body

    Returns:
        One RouteRecord per alternative route, each with a fresh row key

    Raises:
        DirectionsParseError: malformed JSON or a missing/invalid field
        DirectionsApiError: the API reported an error status
    """
    response = parse_response(json_text)
    records = [RouteRecord.from_route(route) for route in response.routes]
    logger.debug("Parsed %d routes (status=%s)", len(records), response.status)
    return records
