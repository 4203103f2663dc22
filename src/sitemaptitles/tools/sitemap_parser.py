"""Sitemap XML parsing."""

from __future__ import annotations

from lxml import etree

from sitemaptitles.errors import SitemapParseError
from sitemaptitles.logging import get_logger
from sitemaptitles.models.outcome import Outcome

logger = get_logger(__name__)


def _localname(tag: object) -> str:
    # Comments and processing instructions have non-string tags.
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname


class SitemapParser:
    """Extract page URLs from a ``<urlset>`` sitemap document.

    Elements are matched by local name, so both the standard sitemap namespace and
    un-namespaced documents are accepted. A structurally invalid document yields a
    failure, never a partial list.
    """

    def __init__(self) -> None:
        self._parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)

    def parse(self, xml: str | bytes) -> Outcome[list[str]]:
        """Parse sitemap XML into page URLs in document order."""

        try:
            return Outcome.success(self._parse_urls(xml))
        except SitemapParseError as e:
            logger.error("Error parsing sitemap content: %s", e)
            return Outcome.failure(e)

    def _parse_urls(self, xml: str | bytes) -> list[str]:
        data = xml.encode("utf-8") if isinstance(xml, str) else xml
        try:
            root = etree.fromstring(data, parser=self._parser)
        except (etree.XMLSyntaxError, ValueError) as e:
            raise SitemapParseError(f"malformed XML: {e}") from e

        if root is None:
            raise SitemapParseError("empty document")
        if _localname(root.tag) != "urlset":
            raise SitemapParseError(f"expected <urlset> root element, got <{_localname(root.tag)}>")

        urls: list[str] = []
        for i, entry in enumerate((c for c in root if _localname(c.tag) == "url"), start=1):
            loc = next((c for c in entry if _localname(c.tag) == "loc"), None)
            if loc is None:
                raise SitemapParseError(f"<url> entry #{i} has no <loc>")
            urls.append((loc.text or "").strip())
        return urls
