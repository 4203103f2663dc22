"""Page fetching utilities."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

import httpx

from sitemaptitles.config import Settings
from sitemaptitles.errors import PageFetchError
from sitemaptitles.logging import get_logger
from sitemaptitles.models.outcome import Outcome

logger = get_logger(__name__)


@dataclass(frozen=True)
class FetchedPage:
    """Fetched page payload."""

    url: str
    content: bytes
    text: str
    content_type: str | None
    status_code: int


class PageFetcher:
    """Fetch pages over HTTP.

    Failures never raise: they come back as a failed :class:`Outcome` holding a
    :class:`PageFetchError`, and are logged with the URL and the underlying message.
    """

    def __init__(self, settings: Settings, *, client: httpx.Client | None = None) -> None:
        self._settings = settings
        self._owns_client = client is None
        if client is None:
            headers = {}
            if settings.http_user_agent:
                headers["User-Agent"] = settings.http_user_agent
            client = httpx.Client(
                timeout=httpx.Timeout(settings.http_timeout_s),
                headers=headers,
                follow_redirects=True,
            )
        self._client = client

    def fetch(self, url: str) -> Outcome[FetchedPage]:
        """GET a URL and return its body."""

        try:
            resp = self._client.get(url)
            resp.raise_for_status()
            text = resp.text
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error("Error fetching %s: HTTP %s", url, status)
            err = PageFetchError(f"HTTP {status} for {url}", url=url, status_code=status)
            err.__cause__ = e
            return Outcome.failure(err)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            logger.error("Error fetching %s: %s", url, message)
            err = PageFetchError(message, url=url)
            err.__cause__ = e
            return Outcome.failure(err)

        return Outcome.success(
            FetchedPage(
                url=str(resp.url),
                content=resp.content,
                text=text,
                content_type=resp.headers.get("content-type"),
                status_code=resp.status_code,
            )
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> PageFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
