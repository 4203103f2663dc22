"""CLI entrypoint for sitemap-titles."""

from __future__ import annotations

from pathlib import Path

import typer

from sitemaptitles.config import load_settings
from sitemaptitles.errors import TitleScraperError
from sitemaptitles.logging import configure_logging, get_logger
from sitemaptitles.orchestrator.runner import export_titles

app = typer.Typer(add_completion=False, help="Export page titles listed in an XML sitemap to CSV")
logger = get_logger(__name__)


@app.command()
def run(
    sitemap_url: str = typer.Argument(
        "",
        help="URL of the sitemap.xml to read, e.g. https://www.example.com/sitemap.xml",
        show_default=False,
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the CSV file (overrides SITEMAP_TITLES_OUTPUT_DIR)",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Logging level (overrides SITEMAP_TITLES_LOG_LEVEL)",
    ),
) -> None:
    """Read a sitemap, fetch every page it lists, and save their titles to CSV."""

    if not sitemap_url:
        typer.echo("Please provide a sitemap.xml URL as a command-line argument.", err=True)
        raise typer.Exit(code=2)

    settings = load_settings()
    if output_dir is not None:
        settings.output_dir = output_dir
    if log_level is not None:
        settings.log_level = log_level

    configure_logging(settings.log_level)

    try:
        summary = export_titles(sitemap_url, settings=settings)
    except TitleScraperError as e:
        logger.error("Run aborted: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"Page titles extracted and saved to {summary.output_path}")


if __name__ == "__main__":
    app()
