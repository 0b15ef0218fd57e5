"""
Commute window selection

Decides from the time of day whether a commute is in progress and in which
direction. Hours are evaluated in the reference time zone, not the host's.
"""

from datetime import datetime, timezone
from typing import Optional, Tuple
from zoneinfo import ZoneInfo

from src.config import DEFAULT_TIME_ZONE

# Assume you go to work between 6:00 and 12:59
MORNING_START_HOUR = 6
MORNING_END_HOUR = 12

# Assume you return home between 16:00 and 19:59
EVENING_AFTER_HOUR = 15
EVENING_END_HOUR = 19


def to_local_time(now: Optional[datetime] = None, time_zone: str = DEFAULT_TIME_ZONE) -> datetime:
    """Convert a timestamp to the reference zone; naive values are taken as UTC"""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(time_zone))


def get_origin_and_destination(
    home: Optional[str],
    work: Optional[str],
    now: Optional[datetime] = None,
    time_zone: str = DEFAULT_TIME_ZONE,
) -> Tuple[Optional[str], Optional[str]]:
    """
    Pick origin and destination for the current commute window

    Args:
        home: Home location (address or place identifier)
        work: Work location
        now: Current time (default: now, UTC)
        time_zone: IANA zone the commute hours are expressed in

    Returns:
        (home, work) in the morning, (work, home) in the evening,
        (None, None) outside both windows
    """
    hour = to_local_time(now, time_zone).hour

    if MORNING_START_HOUR <= hour <= MORNING_END_HOUR:
        return home, work
    if EVENING_AFTER_HOUR < hour <= EVENING_END_HOUR:
        return work, home
    return None, None


def is_window_active(origin: Optional[str], destination: Optional[str]) -> bool:
    """A window is only usable when both endpoints are known"""
    return bool(origin) and bool(destination)
