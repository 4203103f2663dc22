"""Error hierarchy.

Sitemap-level and output errors abort a run. Page-level errors are carried inside
:class:`~sitemaptitles.models.outcome.Outcome` values and only cause the URL to be skipped.
"""

from __future__ import annotations

from pathlib import Path


class TitleScraperError(RuntimeError):
    pass


class FetchError(TitleScraperError):
    """An HTTP GET did not produce a usable response."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class SitemapFetchError(FetchError):
    pass


class PageFetchError(FetchError):
    pass


class SitemapParseError(TitleScraperError):
    pass


class TitleExtractionError(TitleScraperError):
    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class OutputWriteError(TitleScraperError):
    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path
