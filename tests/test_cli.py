"""Tests for the command-line entrypoint."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from sitemaptitles import cli
from sitemaptitles.errors import SitemapFetchError
from sitemaptitles.models.record import RunSummary

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SITEMAP_TITLES_ENV_FILE", raising=False)


def test_missing_argument_exits_before_any_network_call(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("pipeline must not run")

    monkeypatch.setattr(cli, "export_titles", fail)

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 2
    assert "sitemap.xml URL" in result.output


def test_success_prints_output_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_export(sitemap_url, *, settings):
        seen["url"] = sitemap_url
        seen["output_dir"] = settings.output_dir
        return RunSummary(
            sitemap_url=sitemap_url,
            output_path=settings.output_dir / "page-titles-20240307-0905.csv",
            urls_found=2,
            records_written=2,
        )

    monkeypatch.setattr(cli, "export_titles", fake_export)

    result = runner.invoke(cli.app, ["https://a.test/sitemap.xml", "--output-dir", str(tmp_path / "out")])

    assert result.exit_code == 0
    assert seen == {"url": "https://a.test/sitemap.xml", "output_dir": tmp_path / "out"}
    assert "Page titles extracted and saved to" in result.output
    assert "page-titles-20240307-0905.csv" in result.output


def test_fatal_error_exits_nonzero(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_export(sitemap_url, *, settings):
        raise SitemapFetchError("could not fetch sitemap: HTTP 404", url=sitemap_url, status_code=404)

    monkeypatch.setattr(cli, "export_titles", fake_export)

    result = runner.invoke(cli.app, ["https://a.test/sitemap.xml"])

    assert result.exit_code == 1
    assert "HTTP 404" in result.output
