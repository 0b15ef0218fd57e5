"""
Route sinks

A sink appends route records to durable storage. Each append is its own
unit of work: a failure part-way through a batch leaves earlier rows in place.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import asdict

from sqlalchemy.orm import Session

from src.models import ROUTES_PARTITION_KEY, TrafficRoute
from src.route_parser import RouteRecord

logger = logging.getLogger(__name__)


class RouteSink(ABC):
    @abstractmethod
    def append(self, record: RouteRecord):
        """Persist a single record"""

    def append_all(self, records, on_append=None) -> int:
        """
        Append records in order, stopping at the first failure

        Args:
            records: Route records to persist
            on_append: Called with each record once it has been written

        Returns:
            Number of records written
        """
        count = 0
        for record in records:
            self.append(record)
            count += 1
            if on_append is not None:
                on_append(record)
        return count


class TableRouteSink(RouteSink):
    """Writes each record as one row of the traffic_info table"""

    def __init__(self, db: Session, partition_key: str = ROUTES_PARTITION_KEY):
        self.db = db
        self.partition_key = partition_key

    def append(self, record: RouteRecord) -> TrafficRoute:
        row = TrafficRoute(partition_key=self.partition_key, **asdict(record))
        self.db.add(row)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        logger.debug("Saved route %s (%s)", record.row_key, record.summary)
        return row
