"""CSV export of extracted titles."""

from __future__ import annotations

import csv
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Iterable

from sitemaptitles.errors import OutputWriteError
from sitemaptitles.logging import get_logger
from sitemaptitles.models.record import TitleRecord

logger = get_logger(__name__)

CSV_HEADER = ("Page Title", "URL")
TIMESTAMP_FORMAT = "%Y%m%d-%H%M"


def output_path_for(output_dir: Path, *, prefix: str = "page-titles", now: datetime | None = None) -> Path:
    """Build ``<output_dir>/<prefix>-<YYYYMMDD-HHmm>.csv`` for local time ``now``."""

    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return output_dir / f"{prefix}-{stamp}.csv"


class CsvExporter:
    """Write title records to a timestamped CSV file.

    Two runs in the same minute target the same file; the later one replaces it.
    """

    def __init__(self, output_dir: Path, *, prefix: str = "page-titles") -> None:
        self.output_dir = output_dir
        self.prefix = prefix

    def export(self, records: Iterable[TitleRecord], *, now: datetime | None = None) -> Path:
        """Write ``records`` and return the output path.

        Raises:
            OutputWriteError: The directory or file could not be written. No output file
                is left behind in that case.
        """

        path = output_path_for(self.output_dir, prefix=self.prefix, now=now)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"cannot create output directory {self.output_dir}: {e}", path=path) from e

        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=self.output_dir,
                prefix=f".{path.stem}-",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                rows = self._write(f, records)
            # NamedTemporaryFile creates 0600 files.
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise OutputWriteError(f"cannot write {path}: {e}", path=path) from e

        logger.info("Wrote %d rows to %s", rows, path)
        return path

    @staticmethod
    def _write(f, records: Iterable[TitleRecord]) -> int:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        n = 0
        for r in records:
            writer.writerow((r.page_title, r.url))
            n += 1
        return n
