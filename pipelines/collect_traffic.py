"""
Commute Traffic Collection Pipeline

Runs one collection tick: pick the commute direction for the current time,
fetch live-traffic directions, parse the alternative routes and store one row
per route. Outside commute hours the tick does nothing.

This script is meant to run every 30 minutes (see continuous_collector.py, or
cron: */30 * * * *).

Usage:
    python -m pipelines.collect_traffic [--init-db]

Options:
    --init-db    Create the traffic_info table before collecting
"""

import argparse
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from src.commute_window import get_origin_and_destination, is_window_active
from src.config import TrafficConfig, load_config
from src.database import get_session, init_db
from src.directions_client import DirectionsClient
from src.exceptions import TrafficError
from src.route_parser import parse_routes
from src.sink import RouteSink, TableRouteSink

logger = logging.getLogger(__name__)


def collect_traffic(config: TrafficConfig, sink: RouteSink, client=None, now=None) -> int:
    """
    Run one collection tick

    Args:
        config: Collector configuration
        sink: Destination for parsed routes
        client: DirectionsClient to use (default: built from config)
        now: Current time (default: now, UTC)

    Returns:
        Number of routes written (0 when inactive or on failure)
    """
    if now is None:
        now = datetime.now(timezone.utc)

    origin, destination = get_origin_and_destination(
        config.home_location, config.work_location, now=now, time_zone=config.time_zone
    )

    if not is_window_active(origin, destination):
        logger.info("Skipping computation as it is not in travel hours: %s", now.isoformat())
        return 0

    owns_client = client is None
    if owns_client:
        client = DirectionsClient(
            config.api_key, base_url=config.directions_url, timeout=config.request_timeout
        )

    written = 0

    def log_route(route):
        nonlocal written
        written += 1
        logger.info("Route takes %s to reach.", route.duration_in_traffic_text)

    try:
        body = client.fetch_directions(origin, destination)
        routes = parse_routes(body)

        sink.append_all(routes, on_append=log_route)

        logger.info("Number of routes processed: %d", written)

    except TrafficError as e:
        logger.error("Traffic collection failed: %s", e)
    except SQLAlchemyError as e:
        logger.error("Failed to save route %d: %s", written + 1, e)
    finally:
        if owns_client:
            client.close()

    return written


def run_once(config: TrafficConfig, now=None) -> int:
    """Collect one tick using a fresh database session"""
    db = get_session(config.database_url)
    try:
        return collect_traffic(config, TableRouteSink(db), now=now)
    finally:
        db.close()


def configure_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main():
    parser = argparse.ArgumentParser(
        description="Collect commute traffic for the current time window",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Collect once (no-op outside commute hours)
  python -m pipelines.collect_traffic

  # Create the table first, then collect
  python -m pipelines.collect_traffic --init-db
        """,
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create database tables before collecting",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    config = load_config()

    if args.init_db:
        init_db(database_url=config.database_url)

    run_once(config)


if __name__ == "__main__":
    main()
