"""Pipeline stages: fetch, parse, extract, export."""

from __future__ import annotations

from sitemaptitles.tools.csv_exporter import CsvExporter, output_path_for
from sitemaptitles.tools.page_fetcher import FetchedPage, PageFetcher
from sitemaptitles.tools.sitemap_parser import SitemapParser
from sitemaptitles.tools.title_extractor import TitleExtractor

__all__ = [
    "CsvExporter",
    "FetchedPage",
    "PageFetcher",
    "SitemapParser",
    "TitleExtractor",
    "output_path_for",
]
