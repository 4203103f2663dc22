"""Export the page titles listed in an XML sitemap to a CSV file."""

from __future__ import annotations

from sitemaptitles.config import Settings, load_settings
from sitemaptitles.models.record import RunSummary, TitleRecord
from sitemaptitles.orchestrator.runner import export_titles

__all__ = [
    "RunSummary",
    "Settings",
    "TitleRecord",
    "export_titles",
    "load_settings",
]

__version__ = "0.1.0"
