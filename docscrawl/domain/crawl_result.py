"""Crawl result data model."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class CrawlResult:
    """Outcome of one fetch attempt during a crawl.

    A page either carries extracted `text` or an `error`; a parse failure may
    leave both set.
    """
    url: str
    title: Optional[str] = None
    text: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        """Serialise for the JSON API, omitting absent fields."""
        d = {"url": self.url}
        for key in ("title", "text", "error"):
            value = getattr(self, key)
            if value is not None:
                d[key] = value
        return d
