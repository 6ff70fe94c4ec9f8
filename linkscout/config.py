"""Configuration objects and constants for the link scraper."""

from __future__ import annotations

from dataclasses import dataclass

from . import __version__

DEFAULT_USER_AGENT = f"linkscout/{__version__}"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


@dataclass
class ScraperConfig:
    """Top-level settings that control fetching and serving."""

    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
