"""
Continuous collector that runs the traffic pipeline every 30 minutes,
on the hour and half hour
"""
import logging
import time
from datetime import datetime, timedelta, timezone

from pipelines.collect_traffic import configure_logging, run_once
from src.config import load_config
from src.database import init_db

TICK_MINUTES = 30

logger = logging.getLogger(__name__)


def seconds_until_next_tick(now=None, interval_minutes=TICK_MINUTES):
    """Seconds from now until the next :00/:30 boundary (a full interval when exactly on one)"""
    if now is None:
        now = datetime.now(timezone.utc)

    start_of_hour = now.replace(minute=0, second=0, microsecond=0)
    elapsed = now - start_of_hour
    interval = timedelta(minutes=interval_minutes)
    next_tick = start_of_hour + interval * (elapsed // interval + 1)
    return (next_tick - now).total_seconds()


def main():
    configure_logging()

    print("Commute Traffic Continuous Collector")
    print("=" * 50)
    print(f"This script will collect commute routes every {TICK_MINUTES} minutes")
    print("Press Ctrl+C to stop")
    print("=" * 50)

    config = load_config()

    # Initialize database on first run
    init_db(database_url=config.database_url)

    try:
        while True:
            wait = seconds_until_next_tick()
            logger.info("Next collection in %.0f seconds", wait)
            time.sleep(wait)

            # A failed tick is logged; the next tick is the retry
            try:
                run_once(config)
            except Exception:
                logger.exception("Collection tick failed")

    except KeyboardInterrupt:
        print("\n\nStopping continuous collection...")
        print("Data collection stopped successfully!")


if __name__ == "__main__":
    main()
