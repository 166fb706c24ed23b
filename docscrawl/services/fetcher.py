from __future__ import annotations

from typing import Protocol

from docscrawl.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return a normalized HTTP-like response.

    Implementations are blocking; the crawl executor runs them in a worker
    thread so sibling fetches overlap.
    """

    def fetch(self, url: str) -> HttpResponse: ...


class HttpServiceFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def fetch(self, url: str) -> HttpResponse:
        return self._http_service.fetch(url)
