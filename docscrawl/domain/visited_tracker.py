class VisitedTracker:
    """
    Tracks which URLs have been visited during a single crawl invocation.

    Kept separate from CrawlContext so the dedup rule can be tested on its own.
    URLs are expected to be fragment-stripped by the caller. The tracker is
    insert-only and is discarded together with its context.
    """

    def __init__(self):
        self._visited: set[str] = set()

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def claim(self, url: str) -> bool:
        """Insert `url` if absent.

        Returns True only for the caller that performed the insert. Must be
        called without yielding to the event loop between the check and the
        insert; it contains no await so concurrent branches of one crawl
        cannot both claim the same URL.
        """
        if url in self._visited:
            return False
        self._visited.add(url)
        return True

    def __len__(self) -> int:
        return len(self._visited)
