import logging
from typing import Callable, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from docscrawl.utils.url_utils import is_absolute_url

logger = logging.getLogger(__name__)


def create_crawl_router(crawl_executor_factory: Callable):
    """Create the crawl entry point.

    `crawl_executor_factory()` must return an object with an async
    `crawl(seed_url)` method; a fresh executor is requested per call.
    """
    router = APIRouter(prefix="/api", tags=["Crawl"])

    @router.get("")
    async def crawl(url: Optional[str] = None):
        if not url:
            return JSONResponse(status_code=400, content={"error": "URL is required"})
        if not is_absolute_url(url):
            return JSONResponse(status_code=400, content={"error": "Invalid URL provided"})

        try:
            results = await crawl_executor_factory().crawl(url)
        except Exception as e:
            logger.exception("Crawling failed for %s", url)
            return JSONResponse(status_code=500, content={"error": "Crawling failed", "details": str(e)})
        return [r.to_dict() for r in results]

    return router
