"""MCP server exposing the linkscout extraction tool."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .config import ScraperConfig
from .pipeline import render_json, scrape_page

logger = logging.getLogger("linkscout.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="linkscout")


@mcp.tool()
def extract_links(
    url: str,
) -> str:
    """Fetch a web page and return its links, link text, images and emails as JSON."""

    config = ScraperConfig()
    return render_json(scrape_page(url, config))


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
