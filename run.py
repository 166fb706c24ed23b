import argparse
import asyncio
import logging
import sys

import uvicorn

from docscrawl import config as env
from docscrawl.api.server import create_app
from docscrawl.container import Container
from docscrawl.utils.url_utils import is_absolute_url

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docscrawl", description="Extract readable text from a documentation site.")
    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="run the HTTP API (default)")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    crawl = sub.add_parser("crawl", help="crawl one site and print the results")
    crawl.add_argument("url")
    crawl.add_argument("--full", action="store_true", help="print full text instead of previews")
    return parser


def _crawl_once(container: Container, url: str, full: bool) -> int:
    if not is_absolute_url(url):
        print(f"Invalid URL provided: {url}", file=sys.stderr)
        return 2
    results = asyncio.run(container.crawl_executor().crawl(url))
    presenter = container.result_presenter()
    print(presenter.render_details(results) if full else presenter.render_summaries(results))
    return 0


def main(argv=None, container=None) -> int:
    logging.basicConfig(level=env.log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    args = _build_parser().parse_args(argv)
    container = container or Container()

    if args.command == "crawl":
        return _crawl_once(container, args.url, args.full)

    host = getattr(args, "host", "0.0.0.0")
    port = getattr(args, "port", 8000)
    logger.info("DocsCrawl API listening on %s:%s", host, port)
    uvicorn.run(create_app(container), host=host, port=port)
    return 0


if __name__ == '__main__':
    sys.exit(main())
