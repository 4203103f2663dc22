"""Output record models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class TitleRecord(BaseModel):
    """A page URL paired with its extracted title."""

    model_config = ConfigDict(frozen=True)

    url: str
    page_title: str


class RunSummary(BaseModel):
    """What a finished run produced."""

    sitemap_url: str
    output_path: Path
    urls_found: int
    records_written: int

    @property
    def urls_skipped(self) -> int:
        return self.urls_found - self.records_written
