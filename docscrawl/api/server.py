"""FastAPI application factory."""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docscrawl.api.routers import create_crawl_router, create_systems_router
from docscrawl.container import Container


def create_app(container: Optional[Container] = None) -> FastAPI:
    """Return a FastAPI app wired from `container` (a fresh one by default)."""
    container = container or Container()
    app = FastAPI(
        title="DocsCrawl API",
        description="Extracts readable text from a documentation site by crawling same-origin links.",
        version="0.1.0",
    )
    app.state.container = container

    # Browser front-ends call the crawl endpoint directly.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_crawl_router(container.crawl_executor))
    app.include_router(create_systems_router(container.config()))
    return app
