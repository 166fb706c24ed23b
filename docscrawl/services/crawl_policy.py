import logging
from typing import Optional

from docscrawl.domain.crawl_context import CrawlContext
from docscrawl.utils.url_utils import Origin, same_origin

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl scope rules: depth limit, dedup and origin.

    Every rule here is a silent skip; skipped URLs produce no result entry.
    """

    def should_skip_due_to_depth(self, depth: int, context: CrawlContext) -> bool:
        """Check if URL should be skipped due to max depth reached."""
        if depth > context.max_depth:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_skip_due_to_visited(self, url: str, context: CrawlContext) -> bool:
        if context.is_visited(url):
            logger.debug("Skipping (visited) %s", url)
            return True
        return False

    def should_skip_due_to_origin(self, url: str, url_origin: Optional[Origin], context: CrawlContext) -> bool:
        if not same_origin(url_origin, context.base_origin):
            logger.debug("Skipping (external) %s", url)
            return True
        return False
