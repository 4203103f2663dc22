"""Models used across the project."""

from __future__ import annotations

from sitemaptitles.models.outcome import Outcome
from sitemaptitles.models.record import RunSummary, TitleRecord

__all__ = [
    "Outcome",
    "RunSummary",
    "TitleRecord",
]
