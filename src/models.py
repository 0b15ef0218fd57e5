from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Index, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Every row shares this partition key
ROUTES_PARTITION_KEY = "Routes"


def utc_now():
    """Current UTC time as a naive datetime (the storage convention for all timestamps)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TrafficRoute(Base):
    """One candidate route returned by the directions API for a single query"""

    __tablename__ = "traffic_info"

    id = Column(Integer, primary_key=True, autoincrement=True)
    partition_key = Column(String, nullable=False, default=ROUTES_PARTITION_KEY, index=True)
    row_key = Column(String, unique=True, nullable=False, index=True)  # UUID4

    summary = Column(String)

    distance_text = Column(String)
    distance_value = Column(Integer, nullable=False)  # meters

    duration_text = Column(String)
    duration_value = Column(Integer, nullable=False)  # seconds

    duration_in_traffic_text = Column(String)
    duration_in_traffic_value = Column(Integer, nullable=False)  # seconds

    start_address = Column(String)
    start_lat = Column(Float)
    start_lng = Column(Float)

    end_address = Column(String)
    end_lat = Column(Float)
    end_lng = Column(Float)

    created_at = Column(DateTime, default=utc_now, index=True)

    # Composite index for per-route history queries
    __table_args__ = (Index("idx_traffic_summary_created", "summary", "created_at"),)

    def __repr__(self):
        return f"<TrafficRoute {self.row_key} {self.summary!r} {self.duration_in_traffic_text!r}>"
