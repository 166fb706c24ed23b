import logging
import re
from typing import Callable, Iterable, Optional, Protocol

from bs4 import BeautifulSoup, ParserRejectedMarkup

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

# Main-content regions in priority order. The first tier that matches at least
# one element wins and its first match is used.
CONTENT_SELECTOR_TIERS: tuple[tuple[str, str], ...] = (
    ("main-landmark-article", 'main div[role="main"] article'),
    ("rnwi-root-article", "div[data-rnwi-root] article"),
    ("any-article", "article"),
)

# Stripped from a matched content region
TOC_SELECTORS = 'nav[aria-label="On this page"], nav[aria-labelledby*="table-of-contents"]'
PAGINATION_SELECTORS = 'nav[aria-label*="pagination"], .gitbook-pagination'
EDIT_LINK_SELECTOR = 'a[href*="edit/master"]'
LAST_UPDATED_SELECTOR = 'div:-soup-contains("Last updated")'
HEADING_ANCHOR_SELECTORS = ", ".join(
    [f'h{level} a[href^="#"]' for level in range(1, 7)] + [".header-anchor"]
)

# Stripped from <body> when no content region matched
BODY_CHROME_SELECTORS = (
    "header, footer, nav, aside, form, "
    "[role='navigation'], [role='banner'], [role='contentinfo'], "
    ".sidebar, #sidebar"
)


def collapse_whitespace(text: Optional[str]) -> str:
    """Collapse every whitespace run to a single space and trim."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _remove_all(elements: Iterable) -> None:
    for element in elements:
        # nested matches may already be gone with their ancestor
        if not element.decomposed:
            element.decompose()


class TextExtractor(Protocol):
    def extract(self, html: Optional[str], page_url: Optional[str] = None) -> tuple[Optional[str], Optional[str]]: ...


class HtmlTextExtractor:
    """Turns a documentation page into `(title, text)`.

    Prefers a tightly scoped article region and strips documentation-site
    boilerplate from it; otherwise falls back to the page body minus
    structural chrome. No network access.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
        selector_tiers: tuple[tuple[str, str], ...] = CONTENT_SELECTOR_TIERS,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))
        self._selector_tiers = selector_tiers

    def extract(self, html: Optional[str], page_url: Optional[str] = None) -> tuple[Optional[str], Optional[str]]:
        if not html:
            return None, None

        try:
            soup = self._soup_factory(html)
        except ParserRejectedMarkup:
            logger.warning("HTML parser rejected markup for %s", page_url)
            return None, None

        _remove_all(soup.select("script, style"))

        title_tag = soup.find("title")
        title = title_tag.get_text().strip() if title_tag is not None else ""

        tier, region = self.find_content_region(soup)
        if region is not None:
            logger.debug("Using content selector %s for %s", tier, page_url)
            raw_text = self._content_region_text(region)
        else:
            logger.warning("No content region found for %s, falling back to body extraction", page_url)
            raw_text = self._body_text(soup)

        return title or None, collapse_whitespace(raw_text) or None

    def find_content_region(self, soup: BeautifulSoup):
        """Return `(tier_name, element)` for the first matching tier, or `(None, None)`."""
        for name, selector in self._selector_tiers:
            match = soup.select_one(selector)
            if match is not None:
                return name, match
        return None, None

    def _content_region_text(self, region) -> str:
        # Clone so removals never touch the parsed page
        clone = self._soup_factory(str(region))

        _remove_all(clone.select(TOC_SELECTORS))
        _remove_all(clone.select(PAGINATION_SELECTORS))
        for link in clone.select(EDIT_LINK_SELECTOR):
            if link.decomposed:
                continue
            block = link.find_parent(["div", "p"])
            if block is not None:
                block.decompose()
        _remove_all(clone.select("footer"))
        last_updated = clone.select(LAST_UPDATED_SELECTOR)
        if last_updated:
            last_updated[-1].decompose()
        _remove_all(clone.select(HEADING_ANCHOR_SELECTORS))

        return clone.get_text()

    def _body_text(self, soup: BeautifulSoup) -> str:
        body = soup.body
        clone = self._soup_factory(str(body if body is not None else soup))
        if body is None:
            # no <body>: keep document-level text but never the head
            _remove_all(clone.select("head, title"))
        _remove_all(clone.select(BODY_CHROME_SELECTORS))
        return clone.get_text()
