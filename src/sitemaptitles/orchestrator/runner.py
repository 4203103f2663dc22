"""End-to-end pipeline runner."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Iterable, Iterator

from sitemaptitles.config import Settings
from sitemaptitles.errors import SitemapFetchError
from sitemaptitles.logging import get_logger, run_context, url_context
from sitemaptitles.models.outcome import Outcome
from sitemaptitles.models.record import RunSummary, TitleRecord
from sitemaptitles.tools.csv_exporter import CsvExporter
from sitemaptitles.tools.page_fetcher import PageFetcher
from sitemaptitles.tools.sitemap_parser import SitemapParser
from sitemaptitles.tools.title_extractor import TitleExtractor

logger = get_logger(__name__)


def fetch_sitemap_urls(sitemap_url: str, fetcher: PageFetcher) -> list[str]:
    """Fetch and parse the sitemap.

    Raises:
        SitemapFetchError: The sitemap could not be retrieved.
        SitemapParseError: The sitemap is not a valid ``<urlset>`` document.
    """

    fetched = fetcher.fetch(sitemap_url)
    if not fetched.ok:
        cause = fetched.error
        status = getattr(cause, "status_code", None)
        raise SitemapFetchError(
            f"could not fetch sitemap from {sitemap_url}: {cause}",
            url=sitemap_url,
            status_code=status,
        ) from cause

    page = fetched.unwrap()
    return SitemapParser().parse(page.content).unwrap()


def iter_title_outcomes(urls: Iterable[str], extractor: TitleExtractor) -> Iterator[tuple[str, Outcome[str]]]:
    """Extract titles one URL at a time, in input order."""

    for url in urls:
        with url_context(url):
            yield url, extractor.extract(url)


def collect_records(urls: Iterable[str], extractor: TitleExtractor) -> list[TitleRecord]:
    """Build records for URLs whose title was extracted; skip the rest."""

    records: list[TitleRecord] = []
    for url, outcome in iter_title_outcomes(urls, extractor):
        if not outcome.ok:
            logger.info("Skipping %s: %s", url, outcome.error)
            continue
        title = outcome.unwrap()
        if not title:
            logger.info("Skipping %s: empty <title>", url)
            continue
        records.append(TitleRecord(url=url, page_title=title))
    return records


def export_titles(
    sitemap_url: str,
    *,
    settings: Settings,
    fetcher: PageFetcher | None = None,
    now: datetime | None = None,
) -> RunSummary:
    """Run the full sitemap → titles → CSV pipeline.

    Args:
        sitemap_url: URL of a ``<urlset>`` sitemap.
        settings: Loaded settings.
        fetcher: Fetcher to use. One is built from ``settings`` (and closed afterwards)
            when omitted.
        now: Timestamp used for the output filename. Defaults to the current local time.

    Returns:
        Summary of the run, including the written CSV path.

    Raises:
        SitemapFetchError, SitemapParseError: Nothing was extracted and no file written.
        OutputWriteError: Extraction finished but the CSV could not be written.
    """

    run_id = uuid.uuid4().hex[:8]
    owned = fetcher is None
    if fetcher is None:
        fetcher = PageFetcher(settings)

    try:
        with run_context(run_id=run_id):
            logger.info("Fetching sitemap %s", sitemap_url)
            urls = fetch_sitemap_urls(sitemap_url, fetcher)
            logger.info("Sitemap lists %d URLs", len(urls))

            records = collect_records(urls, TitleExtractor(fetcher))

            exporter = CsvExporter(settings.output_dir, prefix=settings.output_prefix)
            path = exporter.export(records, now=now)
    finally:
        if owned:
            fetcher.close()

    summary = RunSummary(
        sitemap_url=sitemap_url,
        output_path=path,
        urls_found=len(urls),
        records_written=len(records),
    )
    logger.info(
        "Run %s done: %d/%d pages exported, %d skipped",
        run_id,
        summary.records_written,
        summary.urls_found,
        summary.urls_skipped,
    )
    return summary
