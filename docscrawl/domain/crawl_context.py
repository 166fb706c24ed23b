from typing import Optional

from docscrawl.domain.visited_tracker import VisitedTracker
from docscrawl.utils.url_utils import Origin


class CrawlContext:
    """Traversal state for one crawl invocation, passed through every recursive visit."""

    def __init__(self, seed_url: str, base_origin: Optional[Origin], max_depth: int, visited_tracker: Optional[VisitedTracker] = None):
        self.seed_url = seed_url
        self.base_origin = base_origin
        self.max_depth = max_depth
        # an empty tracker is falsy, compare with None
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()

    def is_visited(self, url: str) -> bool:
        return self.visited_tracker.is_visited(url)

    def claim(self, url: str) -> bool:
        return self.visited_tracker.claim(url)
