"""
Collector configuration

All settings come from environment variables (optionally via a .env file).
The pipeline never reads the environment itself; it receives a TrafficConfig.
"""

import os
from dataclasses import dataclass
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

DEFAULT_DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"

# "Pacific Standard Time" in IANA terms
DEFAULT_TIME_ZONE = "America/Los_Angeles"


@dataclass(frozen=True)
class TrafficConfig:
    """Settings for one collector process"""

    home_location: Optional[str] = None
    work_location: Optional[str] = None
    api_key: Optional[str] = None
    database_url: Optional[str] = None
    time_zone: str = DEFAULT_TIME_ZONE
    directions_url: str = DEFAULT_DIRECTIONS_URL
    request_timeout: Optional[float] = None

    def __post_init__(self):
        try:
            ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(
                f"Unknown time zone {self.time_zone!r}; use an IANA name such as {DEFAULT_TIME_ZONE!r}"
            ) from e


def _get_env(name: str) -> Optional[str]:
    """Return an environment variable, treating blank values as unset"""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_config() -> TrafficConfig:
    """
    Build a TrafficConfig from the process environment

    Missing locations or API key are not errors here: they surface later as
    an inactive commute window or a failed fetch.
    """
    load_dotenv()

    timeout = _get_env("DIRECTIONS_TIMEOUT")

    return TrafficConfig(
        home_location=_get_env("HOME_LOCATION"),
        work_location=_get_env("WORK_LOCATION"),
        api_key=_get_env("GOOGLE_MAPS_API_KEY"),
        database_url=_get_env("DATABASE_URL"),
        time_zone=_get_env("COMMUTE_TIMEZONE") or DEFAULT_TIME_ZONE,
        directions_url=_get_env("DIRECTIONS_URL") or DEFAULT_DIRECTIONS_URL,
        request_timeout=float(timeout) if timeout else None,
    )
