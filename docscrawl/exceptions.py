"""Custom exceptions for DocsCrawl services."""


class InvalidUrlError(ValueError):
    """Raised when a string cannot be parsed as an absolute URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors or a non-success status."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")

    @property
    def reason(self) -> str:
        return str(self.original)
