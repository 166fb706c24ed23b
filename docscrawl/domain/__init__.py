"""Domain objects for DocsCrawl - explicit re-exports to satisfy linters."""
from .crawl_result import CrawlResult as CrawlResult
from .http_response import HttpResponse as HttpResponse
from .visited_tracker import VisitedTracker as VisitedTracker
from .crawl_context import CrawlContext as CrawlContext

__all__ = ["CrawlResult", "HttpResponse", "VisitedTracker", "CrawlContext"]
