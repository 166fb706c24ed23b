from unittest.mock import Mock

from docscrawl.domain.http_response import HttpResponse
from docscrawl.services.fetcher import HttpServiceFetcher


def test_http_service_fetcher_delegates():
    http_service = Mock()
    http_service.fetch.return_value = HttpResponse(200, "<html></html>")
    fetcher = HttpServiceFetcher(http_service)
    assert fetcher.fetch("https://docs.example.com/") == HttpResponse(200, "<html></html>")
    http_service.fetch.assert_called_once_with("https://docs.example.com/")
