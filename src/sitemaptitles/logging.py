"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_run_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("sitemaptitles_run_id", default="-")
_url_var: contextvars.ContextVar[str] = contextvars.ContextVar("sitemaptitles_url", default="-")


class _ContextFilter(logging.Filter):
    """Inject run context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.run_id = _run_id_var.get()  # type: ignore[attr-defined]
        record.url = _url_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def run_context(*, run_id: str) -> Any:
    """Bind a run id for the duration of a pipeline run."""

    token = _run_id_var.set(run_id)
    try:
        yield
    finally:
        _run_id_var.reset(token)


@contextlib.contextmanager
def url_context(url: str) -> Any:
    """Bind the URL currently being processed."""

    token = _url_var.set(url)
    try:
        yield
    finally:
        _url_var.reset(token)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Log lines go to stderr so stdout carries only the final result line.

    Args:
        level: Logging level name.
    """

    formatter = logging.Formatter(
        fmt="run=%(run_id)s url=%(url)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(level.upper())
    rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
    if not rich_handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
        )
        handler.addFilter(_ContextFilter())
        handler.setFormatter(formatter)
        root.addHandler(handler)
        return

    for h in rich_handlers:
        if not any(isinstance(f, _ContextFilter) for f in h.filters):
            h.addFilter(_ContextFilter())
        h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)
