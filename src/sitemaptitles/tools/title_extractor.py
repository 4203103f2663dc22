"""Page title extraction."""

from __future__ import annotations

from bs4 import BeautifulSoup

from sitemaptitles.errors import TitleExtractionError
from sitemaptitles.logging import get_logger
from sitemaptitles.models.outcome import Outcome
from sitemaptitles.tools.page_fetcher import PageFetcher

logger = get_logger(__name__)


class TitleExtractor:
    """Fetch pages and pull the text of their first ``<title>`` element."""

    def __init__(self, fetcher: PageFetcher) -> None:
        self._fetcher = fetcher

    def extract(self, url: str) -> Outcome[str]:
        """Fetch ``url`` and return its trimmed title.

        An empty ``<title>`` is a success with an empty string. A failed fetch or a page
        without a ``<title>`` is a failure.
        """

        fetched = self._fetcher.fetch(url)
        if not fetched.ok:
            return Outcome.failure(fetched.error)  # type: ignore[arg-type]
        return self.extract_html(url, fetched.value.content)  # type: ignore[union-attr]

    def extract_html(self, url: str, html: str | bytes) -> Outcome[str]:
        """Extract the title from already-fetched markup."""

        soup = BeautifulSoup(html, "lxml")
        title = soup.find("title")
        if title is None:
            logger.warning("No <title> element found at %s", url)
            return Outcome.failure(TitleExtractionError(f"no <title> element in {url}", url=url))
        return Outcome.success(title.get_text().strip())
