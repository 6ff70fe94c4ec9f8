"""Command-line entry point for linkscout."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Iterable, Sequence

from .config import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_USER_AGENT, ScraperConfig
from .errors import LinkScoutError
from .pipeline import render_json, scrape_page

logger = logging.getLogger("linkscout.cli")


def _ensure_command_prefix(argv: Sequence[str], commands: Iterable[str]) -> Sequence[str]:
    if not argv:
        return argv
    first = argv[0]
    if first in commands or first.startswith("-"):
        return argv
    return ("extract", *argv)


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="Seconds to wait for the page before giving up",
    )
    parser.add_argument(
        "--user-agent",
        default=DEFAULT_USER_AGENT,
        help="User-Agent header sent with each request",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )


def _add_extract_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("urls", nargs="+", help="One or more page URLs to scrape")
    _add_common_arguments(parser)


def _add_serve_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help="Interface the HTTP server binds to",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help="Port the HTTP server listens on",
    )
    _add_common_arguments(parser)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract links, link text, nested images and email addresses from web pages.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract_parser = subparsers.add_parser(
        "extract", help="Scrape pages and print their links as JSON"
    )
    _add_extract_arguments(extract_parser)

    serve_parser = subparsers.add_parser(
        "serve", help="Run the HTTP service (POST a URL to /parse)"
    )
    _add_serve_arguments(serve_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    argv = list(_ensure_command_prefix(argv, subparsers.choices.keys()))
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def _run_extract(args: argparse.Namespace) -> int:
    _configure_logging(args.verbose)
    config = ScraperConfig(timeout=args.timeout, user_agent=args.user_agent)

    overall_start = time.perf_counter()
    failures = 0
    for url in args.urls:
        try:
            items = scrape_page(url, config)
            sys.stdout.write(render_json(items) + "\n")
        except LinkScoutError as exc:
            failures += 1
            logger.error("Failed to scrape %s: %s", url, exc)
    sys.stdout.flush()
    total_elapsed = time.perf_counter() - overall_start

    total_urls = len(args.urls)
    logger.info(
        "Finished in %.2fs (%d/%d succeeded, %d failed)",
        total_elapsed,
        total_urls - failures,
        total_urls,
        failures,
    )
    return 1 if failures else 0


def _run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from .server import create_app

    _configure_logging(args.verbose)
    config = ScraperConfig(
        timeout=args.timeout,
        user_agent=args.user_agent,
        host=args.host,
        port=args.port,
    )
    logger.info("Server starting on %s:%d", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    if args.command == "serve":
        return _run_serve(args)
    return _run_extract(args)


if __name__ == "__main__":
    sys.exit(main())
