"""Typed shape of a Directions API response (only the fields we store)."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# Statuses that still carry a (possibly empty) routes array
SUCCESS_STATUSES = frozenset({"OK", "ZERO_RESULTS"})


class _DirectionsModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class TextValue(_DirectionsModel):
    """Display text plus numeric value, e.g. ("25 mins", 1500)"""

    text: str
    value: int


class LatLng(_DirectionsModel):
    lat: float
    lng: float


class Leg(_DirectionsModel):
    distance: TextValue
    duration: TextValue
    duration_in_traffic: TextValue
    start_address: str
    start_location: LatLng
    end_address: str
    end_location: LatLng


class DirectionsRoute(_DirectionsModel):
    summary: str
    legs: List[Leg] = Field(min_length=1)


class DirectionsResponse(_DirectionsModel):
    status: str = "OK"
    error_message: Optional[str] = None
    routes: List[DirectionsRoute]
