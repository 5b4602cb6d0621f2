"""Collection cycle: fetch the BoM document and write its observations."""

import asyncio
import logging
from dataclasses import dataclass

from .clients import BoMClient
from .exceptions import DecodeError, FetchError, TimestampParseError
from .schemas import SourceDocument, WeatherPoint
from .sinks import MetricsSink
from .translator import translate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSummary:
    """Outcome of a single collection run."""

    observations: int = 0
    points_written: int = 0
    skipped: int = 0
    succeeded: bool = True


class BoMCollector:
    """Runs one end-to-end collection cycle per call to run_once.

    Either the whole observation list is submitted as one batch or, when the
    fetch or decode fails, nothing is written.
    """

    def __init__(self, client: BoMClient, sink: MetricsSink) -> None:
        """Initialize collector.

        Args:
            client: Client for the BoM feed, shared across runs.
            sink: Destination for translated points, shared across runs.
        """
        self.client = client
        self.sink = sink

    def _log_document_info(self, document: SourceDocument) -> None:
        """Log attribution and station details from the document."""
        notice = document.notice
        if notice is not None:
            logger.info("%s %s", notice.copyright, notice.feedback_url)

        header = document.header
        if header is not None:
            logger.info(
                "%s for %s, %s, %s",
                header.product_name,
                header.name,
                header.state,
                header.refresh_message,
            )

    def translate_document(self, document: SourceDocument) -> tuple[list[WeatherPoint], int]:
        """Translate every observation in the document.

        Observations with a malformed timestamp are skipped.

        Returns:
            Tuple of (points, skipped_count).
        """
        header = document.header
        points: list[WeatherPoint] = []
        skipped = 0

        for observation in document.observations:
            try:
                points.append(translate(observation, header))
            except TimestampParseError as e:
                logger.warning("Skipping observation from %r: %s", observation.name, e)
                skipped += 1

        return points, skipped

    async def run_once(self) -> RunSummary:
        """Fetch, translate and write one batch of observations.

        Fetch and decode failures are logged and end the run without writing.
        Sink failures propagate to the caller.
        """
        try:
            document = await self.client.fetch_document()
        except FetchError as e:
            logger.error("No response from source %s: %s", e.url, e)
            return RunSummary(succeeded=False)
        except DecodeError as e:
            logger.error("Could not decode response from source: %s", e)
            return RunSummary(succeeded=False)

        self._log_document_info(document)

        points, skipped = self.translate_document(document)

        if points:
            logger.info("Writing %d points to InfluxDB", len(points))
            await asyncio.to_thread(self.sink.write, points)
        else:
            logger.warning("No observations to write")

        logger.info(
            "Collection complete: %d points written, %d skipped", len(points), skipped
        )
        return RunSummary(
            observations=len(document.observations),
            points_written=len(points),
            skipped=skipped,
        )
