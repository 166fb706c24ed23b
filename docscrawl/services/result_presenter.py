from typing import Iterable, Optional

from docscrawl.domain.crawl_result import CrawlResult

PREVIEW_LENGTH = 250


class ResultPresenter:
    """Renders crawl results for display: a summary card per item and an on-demand detail view."""

    def __init__(self, preview_length: int = PREVIEW_LENGTH):
        self.preview_length = preview_length

    def preview(self, text: Optional[str]) -> Optional[str]:
        if not text:
            return None
        if len(text) > self.preview_length:
            return text[: self.preview_length] + "..."
        return text

    def summary(self, result: CrawlResult) -> dict:
        card = {"title": result.title or result.url, "url": result.url}
        if result.error:
            card["error"] = result.error
        else:
            card["preview"] = self.preview(result.text)
        return card

    def detail(self, result: CrawlResult) -> str:
        if result.error:
            return f"Error: {result.error}"
        return result.text or "No text content found."

    def render_summaries(self, results: Iterable[CrawlResult]) -> str:
        blocks = []
        for index, result in enumerate(results, start=1):
            card = self.summary(result)
            lines = [f"[{index}] {card['title']}", f"    {card['url']}"]
            if "error" in card:
                lines.append(f"    ! {card['error']}")
            elif card["preview"]:
                lines.append(f"    {card['preview']}")
            blocks.append("\n".join(lines))
        return "\n\n".join(blocks)

    def render_details(self, results: Iterable[CrawlResult]) -> str:
        return "\n\n".join(
            f"== {r.title or r.url}\n{r.url}\n\n{self.detail(r)}" for r in results
        )
