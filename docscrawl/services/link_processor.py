import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from docscrawl.domain.crawl_context import CrawlContext
from docscrawl.exceptions import InvalidUrlError
from docscrawl.utils.url_utils import origin_of, resolve_link, same_origin

logger = logging.getLogger(__name__)


class LinkProcessor:
    """Discovers the child URLs a page should fan out to."""

    def __init__(self, soup_factory: Optional[Callable[[str], BeautifulSoup]] = None):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract_hrefs(self, html: str) -> list[str]:
        """Return every non-empty anchor href in document order."""
        soup = self._soup_factory(html)
        hrefs = []
        for a in soup.find_all("a", href=True):
            href = a.get("href")
            if href:
                hrefs.append(href)
        return hrefs

    def discover(self, page_url: str, html: str, context: CrawlContext) -> list[str]:
        """Resolve hrefs against `page_url` and keep same-origin, unvisited targets.

        Returned URLs are fragment-stripped. Malformed hrefs are logged and
        skipped; they never become results.
        """
        links = []
        for href in self.extract_hrefs(html):
            try:
                next_url = resolve_link(page_url, href)
                next_origin = origin_of(next_url)
            except InvalidUrlError:
                logger.warning("Ignoring invalid link href: %s on page %s", href, page_url)
                continue
            if not same_origin(next_origin, context.base_origin):
                logger.debug("Skipping (external) %s -> not same origin as %s", next_url, context.seed_url)
                continue
            if context.is_visited(next_url):
                continue
            links.append(next_url)
        return links
