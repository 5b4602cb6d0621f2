"""HTTP client for the Bureau of Meteorology observation feed."""

import logging

import httpx

from ..config import BoMConfig
from ..exceptions import FetchError
from ..schemas import SourceDocument, decode_document

logger = logging.getLogger(__name__)


def format_interval(seconds: int) -> str:
    """Render an interval compactly, e.g. 1800 -> "30m", 3600 -> "1h"."""
    if seconds > 0 and seconds % 3600 == 0:
        return f"{seconds // 3600}h"
    if seconds > 0 and seconds % 60 == 0:
        return f"{seconds // 60}m"
    return f"{seconds}s"


class BoMClient:
    """HTTP client for fetching the BoM observation document.

    Sends identifying headers so the upstream can tell who is polling and how
    often. No retries are made; a failed fetch waits for the next run.
    """

    def __init__(
        self,
        config: BoMConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize BoM client.

        Args:
            config: BoM configuration settings.
            http_client: Optional custom HTTP client for testing.
        """
        self.config = config or BoMConfig()
        self._http_client = http_client

    @property
    def request_headers(self) -> dict[str, str]:
        """Identifying headers sent with every request."""
        return {
            "X-Scraper": self.config.scraper_name,
            "X-Source": self.config.source_repository,
            "X-Target-Interval": format_interval(self.config.repeat_interval_seconds),
        }

    @property
    def http_client(self) -> httpx.AsyncClient:
        """Lazy-initialize HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                timeout=self.config.request_timeout_seconds,
                follow_redirects=True,
                headers=self.request_headers,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def fetch_document(self) -> SourceDocument:
        """Fetch and decode the configured observation document.

        Returns:
            Decoded SourceDocument.

        Raises:
            FetchError: On transport failure or a non-success status.
            DecodeError: If the body is not a valid observation document.
        """
        url = self.config.data_source_url
        logger.info("Collecting from data source: %s", url)

        try:
            response = await self.http_client.get(url, headers=self.request_headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                url,
                f"HTTP {e.response.status_code} from {url}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(url, f"Request to {url} failed: {e}") from e

        return decode_document(response.content)
