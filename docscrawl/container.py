"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from docscrawl.services.crawl_executor import CrawlExecutor
from docscrawl.services.crawl_policy import CrawlPolicy
from docscrawl.services.fetcher import HttpServiceFetcher
from docscrawl.services.html_text_extractor import HtmlTextExtractor
from docscrawl.services.http_service import HttpService
from docscrawl.services.link_processor import LinkProcessor
from docscrawl.services.result_presenter import ResultPresenter
from docscrawl import config as env


# Environment variables used by the container (read via `docscrawl.config` helpers).
#
# USER_AGENT (str, default: "DocsCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (float seconds, default: 5)
#   Per-request timeout. There is no overall budget for a whole crawl.
#
# DOCSCRAWL_MAX_DEPTH (int, default: 2)
#   Link-following hops allowed from the seed page (seed is depth 0).
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "DocsCrawl/0.1"),
    "HTTP_TIMEOUT": env.get_float_env("HTTP_TIMEOUT", 5.0),
    "DOCSCRAWL_MAX_DEPTH": env.get_int_env("DOCSCRAWL_MAX_DEPTH", 2),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for DocsCrawl."""

    config = providers.Configuration(default=ENV)

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(float),
    )

    page_fetcher = providers.Singleton(
        HttpServiceFetcher,
        http_service=http_service,
    )

    text_extractor = providers.Singleton(HtmlTextExtractor)

    link_processor = providers.Singleton(LinkProcessor)

    crawl_policy = providers.Singleton(CrawlPolicy)

    result_presenter = providers.Singleton(ResultPresenter)

    # Stateless between runs; each crawl() builds its own context.
    crawl_executor = providers.Factory(
        CrawlExecutor,
        fetcher=page_fetcher,
        text_extractor=text_extractor,
        link_processor=link_processor,
        crawl_policy=crawl_policy,
        max_depth=config.DOCSCRAWL_MAX_DEPTH.as_(int),
    )
