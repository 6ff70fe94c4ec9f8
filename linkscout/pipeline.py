"""High-level orchestration: fetch a page, extract its links, shape the output."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import SplitResult, urlsplit

import requests

from .config import ScraperConfig
from .errors import InputError, SerializationError
from .extractor import extract
from .fetcher import fetch_page
from .models import LinkRecord
from .tree import parse_html
from .urls import BaseURL, resolve

logger = logging.getLogger("linkscout")


def parse_input_url(raw: str) -> SplitResult:
    """Validate the submitted address and return it split into parts."""
    link = raw.strip()
    if not link:
        raise InputError("Empty link provided")
    try:
        parsed = urlsplit(link)
    except ValueError as exc:
        raise InputError(f"Invalid URL provided: {exc}") from exc
    if not parsed.scheme or not parsed.netloc:
        raise InputError("Invalid URL provided")
    return parsed


def record_to_output(record: LinkRecord, base: BaseURL) -> Dict[str, Any]:
    """Keep only the non-empty fields of ``record``, with its target resolved."""
    item: Dict[str, Any] = {}
    if record.target:
        item["Href"] = resolve(base, record.target)
    if record.text:
        item["Content"] = record.text
    if record.images:
        item["Images"] = [{"Src": image.src, "Alt": image.alt} for image in record.images]
    if record.emails:
        item["Emails"] = list(record.emails)
    return item


def clean_records(records: Iterable[LinkRecord], base: BaseURL) -> List[Dict[str, Any]]:
    """Shape extracted records for output, dropping the ones with nothing in them."""
    cleaned = []
    for record in records:
        item = record_to_output(record, base)
        if item:
            cleaned.append(item)
    return cleaned


def render_json(items: List[Dict[str, Any]]) -> str:
    try:
        return json.dumps(items, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Error creating JSON response: {exc}") from exc


def scrape_page(
    raw_url: str,
    config: ScraperConfig,
    session: Optional[requests.Session] = None,
) -> List[Dict[str, Any]]:
    """Fetch ``raw_url`` and return the cleaned link objects found on it."""
    base = parse_input_url(raw_url)
    url = raw_url.strip()
    logger.info("Loading %s", url)
    body = fetch_page(url, config, session=session)
    root = parse_html(body)
    records = extract(root)
    cleaned = clean_records(records, base)
    logger.info(
        "Extracted %d links from %s (%d empty anchors dropped)",
        len(cleaned),
        url,
        len(records) - len(cleaned),
    )
    return cleaned
