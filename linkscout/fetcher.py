"""HTTP retrieval of the page to scrape."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import ScraperConfig
from .errors import UpstreamError

logger = logging.getLogger("linkscout")


def fetch_page(
    url: str,
    config: ScraperConfig,
    session: Optional[requests.Session] = None,
) -> bytes:
    """GET ``url`` and return the raw body of a 200 response."""
    client = session or requests
    try:
        resp = client.get(
            url,
            timeout=config.timeout,
            headers={"User-Agent": config.user_agent},
        )
    except requests.RequestException as exc:
        logger.warning("Failed to fetch %s: %s", url, exc)
        raise UpstreamError(f"Error fetching URL: {exc}") from exc

    if resp.status_code != requests.codes.ok:
        logger.warning("Fetching %s returned status %s", url, resp.status_code)
        raise UpstreamError(f"Received non-200 status code: {resp.status_code}")

    logger.debug(
        "Fetched %s (%d bytes, Content-Type=%s)",
        url,
        len(resp.content),
        resp.headers.get("Content-Type", ""),
    )
    return resp.content
