"""Main entry point for the BoM data collector."""

import argparse
import asyncio
import logging
import signal
import sys
from typing import NoReturn

from .clients import BoMClient
from .collector import BoMCollector
from .config import Settings, get_settings
from .scheduler import Scheduler
from .sinks import InfluxDBSink

logger = logging.getLogger(__name__)

_shutdown_event: asyncio.Event | None = None


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Reduce noise from httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def handle_shutdown(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully."""
    sig_name = signal.Signals(signum).name
    logger.info("Received %s, initiating shutdown...", sig_name)
    if _shutdown_event:
        _shutdown_event.set()


def build_collector(settings: Settings) -> BoMCollector:
    """Create the collector with its long-lived HTTP and InfluxDB clients."""
    return BoMCollector(
        client=BoMClient(settings.bom),
        sink=InfluxDBSink(settings.influxdb),
    )


async def run_collector(
    collector: BoMCollector,
    settings: Settings,
    shutdown_event: asyncio.Event,
    run_once: bool = False,
) -> None:
    """Run the collector until shutdown.

    Args:
        collector: Collector to run.
        settings: Application settings.
        shutdown_event: Event to signal shutdown.
        run_once: If True, run a single collection and exit instead of scheduling.
    """
    try:
        if run_once:
            logger.info("Running collection once")
            await collector.run_once()
            return

        scheduler = Scheduler(
            collector.run_once,
            interval_seconds=settings.bom.repeat_interval_seconds,
            allow_overlap=settings.bom.allow_overlap,
            shutdown_grace_seconds=settings.bom.shutdown_grace_seconds,
        )
        scheduler.start()
        try:
            await shutdown_event.wait()
        finally:
            await scheduler.stop()

    finally:
        logger.info("Shutting down collector")
        await collector.client.close()
        collector.sink.close()


async def run(settings: Settings, run_once: bool = False) -> None:
    """Set up signal handling and run the collector.

    Args:
        settings: Application settings.
        run_once: If True, run a single collection and exit.
    """
    global _shutdown_event
    _shutdown_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGTERM, signal.SIGINT):
        loop.add_signal_handler(sig, lambda s=sig: handle_shutdown(s, None))

    await run_collector(build_collector(settings), settings, _shutdown_event, run_once)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Bureau of Meteorology observation collector for InfluxDB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Collect every BOM_REPEAT_INTERVAL_SECONDS until stopped
  bom-collector

  # Collect once and exit (useful for testing or cron)
  bom-collector --once

  # Run with debug logging
  bom-collector --log-level DEBUG

Environment Variables:
  BOM_DATA_SOURCE_URL            Observation JSON document to poll
  BOM_REPEAT_INTERVAL_SECONDS    Seconds between collections (default: 1800)
  BOM_ALLOW_OVERLAP              Start a run even if the previous is unfinished (default: false)
  INFLUXDB_URL                   InfluxDB server URL
  INFLUXDB_TOKEN                 InfluxDB authentication token
  INFLUXDB_ORG                   InfluxDB organization
  INFLUXDB_BUCKET                InfluxDB bucket name
        """,
    )

    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single collection and exit",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    return parser.parse_args()


def main() -> NoReturn:
    """Main entry point."""
    args = parse_args()

    # Load settings
    settings = get_settings()

    # Set up logging
    setup_logging(args.log_level or settings.log_level)

    if not settings.influxdb.token:
        logger.error("InfluxDB token not configured. Set INFLUXDB_TOKEN")
        sys.exit(1)

    logger.info("BoM data collector starting")
    logger.info("Data source: %s", settings.bom.data_source_url)
    logger.info("InfluxDB bucket: %s/%s", settings.influxdb.org, settings.influxdb.bucket)

    try:
        asyncio.run(run(settings, run_once=args.once))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")

    logger.info("Shutdown complete")
    sys.exit(0)


if __name__ == "__main__":
    main()
