"""Shared fixtures: settings rooted in tmp_path and fetchers backed by httpx.MockTransport."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator, Union

import httpx
import pytest

from sitemaptitles.config import Settings
from sitemaptitles.tools.page_fetcher import PageFetcher

# url -> (status, body) or an exception to raise for that url
Route = Union[tuple[int, str], Exception]


def html_page(title: str) -> str:
    return f"<!doctype html><html><head><title>{title}</title></head><body><p>x</p></body></html>"


def urlset(*locs: str, namespaced: bool = True) -> str:
    ns = ' xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"' if namespaced else ""
    entries = "".join(f"<url><loc>{loc}</loc></url>" for loc in locs)
    return f'<?xml version="1.0" encoding="UTF-8"?><urlset{ns}>{entries}</urlset>'


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(output_dir=tmp_path / "output", http_timeout_s=5.0)


@pytest.fixture
def make_fetcher(settings: Settings) -> Iterator[Callable[[dict[str, Route]], PageFetcher]]:
    clients: list[httpx.Client] = []
    requested: list[str] = []

    def factory(routes: dict[str, Route]) -> PageFetcher:
        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            requested.append(url)
            route = routes.get(url)
            if route is None:
                return httpx.Response(404, text="not found")
            if isinstance(route, Exception):
                raise route
            status, body = route
            content_type = "application/xml" if body.lstrip().startswith("<?xml") else "text/html"
            return httpx.Response(status, text=body, headers={"content-type": content_type})

        client = httpx.Client(transport=httpx.MockTransport(handler), follow_redirects=True)
        clients.append(client)
        return PageFetcher(settings, client=client)

    factory.requested = requested  # type: ignore[attr-defined]
    yield factory
    for c in clients:
        c.close()
