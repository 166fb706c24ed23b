import asyncio
import logging
import threading

from docscrawl.domain.crawl_context import CrawlContext
from docscrawl.domain.crawl_result import CrawlResult
from docscrawl.domain.http_response import HttpResponse
from docscrawl.domain.visited_tracker import VisitedTracker
from docscrawl.exceptions import HttpFetchError, InvalidUrlError
from docscrawl.services.crawl_policy import CrawlPolicy
from docscrawl.services.fetcher import Fetcher
from docscrawl.services.html_text_extractor import TextExtractor
from docscrawl.services.link_processor import LinkProcessor
from docscrawl.utils.url_utils import normalize_url, origin_of, strip_fragment

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Executes a depth-bounded, same-origin crawl from a seed URL.

    This class owns the crawl control-flow (guards, fetch, extraction and
    concurrent fan-out over discovered links). It does NOT construct its
    collaborators (that stays in the DI layer).

    Per-page failures are returned as data on that page's CrawlResult; only
    unexpected faults propagate to the caller.
    """

    def __init__(
        self,
        *,
        fetcher: Fetcher,
        text_extractor: TextExtractor,
        link_processor: LinkProcessor,
        crawl_policy: CrawlPolicy,
        max_depth: int = 2,
    ):
        self.fetcher = fetcher
        self.text_extractor = text_extractor
        self.link_processor = link_processor
        self.crawl_policy = crawl_policy
        self.max_depth = int(max_depth)

    async def crawl(self, seed_url: str) -> list[CrawlResult]:
        """Crawl from `seed_url` and return one flat list of results.

        The seed page's result comes first, followed by its descendants in
        link-discovery order.
        """
        seed = strip_fragment(seed_url)
        try:
            seed = normalize_url(seed)
            base_origin = origin_of(seed)
        except InvalidUrlError:
            # reported by visit() as an "Invalid URL" entry
            base_origin = None
        context = CrawlContext(seed, base_origin, self.max_depth, visited_tracker=VisitedTracker())

        logger.info("Starting crawl of %s (max depth %s)", seed, self.max_depth)
        results = await self.visit(seed, context, 0)
        logger.info("Crawl of %s finished with %s results", seed, len(results))
        return results

    async def visit(self, url: str, context: CrawlContext, depth: int) -> list[CrawlResult]:
        if self.crawl_policy.should_skip_due_to_depth(depth, context):
            return []
        if self.crawl_policy.should_skip_due_to_visited(url, context):
            return []

        try:
            url_origin = origin_of(url)
        except InvalidUrlError:
            logger.error("Invalid URL encountered: %s", url)
            return [CrawlResult(url=url, error="Invalid URL")]
        if self.crawl_policy.should_skip_due_to_origin(url, url_origin, context):
            return []

        # No await between the visited check and the claim.
        if not context.claim(url):
            return []
        logger.info("Crawling %s at depth %s", url, depth)

        try:
            response = await self.fetch(url)
        except HttpFetchError as e:
            logger.warning("Failed to fetch %s: %s", url, e.reason)
            return [CrawlResult(url=url, error=f"Failed to fetch: {e.reason}")]
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return [CrawlResult(url=url, error=f"Failed to fetch: {e}")]
        logger.info(
            "Fetched %s -> status %s (%s)", url, response.status_code, response.content_type or "unknown content type"
        )

        page = self.extract_page(url, response.text)
        results = [page]

        if depth < context.max_depth:
            try:
                links = self.link_processor.discover(url, response.text, context)
            except Exception as e:
                logger.error("Failed to parse %s: %s", url, e, exc_info=True)
                page.error = f"Failed to parse: {e}"
                links = []

            if links:
                children = await asyncio.gather(
                    *(self.visit(link, context, depth + 1) for link in links)
                )
                for child_results in children:
                    results.extend(child_results)

        return results

    async def fetch(self, url: str) -> HttpResponse:
        """Run the blocking fetcher on its own daemon thread and await the outcome.

        Each fetch gets a dedicated thread, so every sibling of a page is in
        flight at once regardless of any executor's worker count.
        """
        loop = asyncio.get_running_loop()
        future = loop.create_future()

        def settle(response, error):
            if future.cancelled():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(response)

        def worker():
            try:
                response = self.fetcher.fetch(url)
            except BaseException as e:
                loop.call_soon_threadsafe(settle, None, e)
            else:
                loop.call_soon_threadsafe(settle, response, None)

        threading.Thread(target=worker, name=f"fetch {url}", daemon=True).start()
        return await future

    def extract_page(self, url: str, html: str) -> CrawlResult:
        try:
            title, text = self.text_extractor.extract(html, page_url=url)
        except Exception as e:
            logger.error("Failed to parse %s: %s", url, e, exc_info=True)
            return CrawlResult(url=url, error=f"Failed to parse: {e}")
        return CrawlResult(url=url, title=title, text=text)
