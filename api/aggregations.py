"""
Query functions for the traffic API

These functions read stored route rows and shape them for JSON responses.
"""

from datetime import timedelta
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.models import TrafficRoute, utc_now


def serialize_route(route: TrafficRoute) -> dict:
    """Convert a stored route row to a JSON-friendly dict"""
    return {
        "row_key": route.row_key,
        "partition_key": route.partition_key,
        "summary": route.summary,
        "distance": {"text": route.distance_text, "value": route.distance_value},
        "duration": {"text": route.duration_text, "value": route.duration_value},
        "duration_in_traffic": {
            "text": route.duration_in_traffic_text,
            "value": route.duration_in_traffic_value,
        },
        "start": {
            "address": route.start_address,
            "lat": route.start_lat,
            "lng": route.start_lng,
        },
        "end": {"address": route.end_address, "lat": route.end_lat, "lng": route.end_lng},
        "created_at": route.created_at.isoformat() if route.created_at else None,
    }


def get_recent_routes(db: Session, limit: int = 50, summary: Optional[str] = None) -> list[dict]:
    """
    Get the most recently stored routes

    Args:
        db: Database session
        limit: Maximum number of rows to return
        summary: Only return routes with this summary label (e.g. 'I-5 N')

    Returns:
        List of routes, newest first
    """
    query = db.query(TrafficRoute)
    if summary:
        query = query.filter(TrafficRoute.summary == summary)

    routes = query.order_by(TrafficRoute.created_at.desc(), TrafficRoute.id.desc()).limit(limit).all()
    return [serialize_route(r) for r in routes]


def get_route_by_key(db: Session, row_key: str) -> dict:
    """Get a single stored route, or an error dict if it does not exist"""
    route = db.query(TrafficRoute).filter_by(row_key=row_key).first()
    if not route:
        return {"error": f"Route {row_key} not found"}
    return serialize_route(route)


def get_commute_summary(db: Session, days: int = 7) -> list[dict]:
    """
    Aggregate travel times per route summary over a recent period

    Args:
        db: Database session
        days: Number of days to look back (default: 7)

    Returns:
        One entry per route summary with observation count and
        average/min/max duration in traffic (seconds), most observed first
    """
    since = utc_now() - timedelta(days=days)

    rows = (
        db.query(
            TrafficRoute.summary,
            func.count(TrafficRoute.id).label("observations"),
            func.avg(TrafficRoute.duration_in_traffic_value).label("avg_seconds"),
            func.min(TrafficRoute.duration_in_traffic_value).label("min_seconds"),
            func.max(TrafficRoute.duration_in_traffic_value).label("max_seconds"),
            func.max(TrafficRoute.created_at).label("last_seen"),
        )
        .filter(TrafficRoute.created_at >= since)
        .group_by(TrafficRoute.summary)
        .order_by(func.count(TrafficRoute.id).desc(), TrafficRoute.summary)
        .all()
    )

    return [
        {
            "summary": row.summary,
            "observations": row.observations,
            "avg_duration_in_traffic_seconds": round(float(row.avg_seconds), 1),
            "min_duration_in_traffic_seconds": row.min_seconds,
            "max_duration_in_traffic_seconds": row.max_seconds,
            "avg_duration_in_traffic_minutes": round(float(row.avg_seconds) / 60, 1),
            "last_seen": row.last_seen.isoformat() if row.last_seen else None,
        }
        for row in rows
    ]
