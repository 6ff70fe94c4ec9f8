from __future__ import annotations

from typing import Dict, List, Optional

import pytest
import requests


class FakeResponse:
    def __init__(self, body: bytes, status_code: int = 200, content_type: str = "text/html") -> None:
        self.content = body
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}


class FakeSession:
    """Stands in for ``requests`` and serves canned pages by URL."""

    def __init__(self, pages: Optional[Dict[str, FakeResponse]] = None) -> None:
        self.pages = pages or {}
        self.calls: List[dict] = []

    def get(self, url, timeout=None, headers=None):
        self.calls.append({"url": url, "timeout": timeout, "headers": headers})
        if url not in self.pages:
            raise requests.ConnectionError(f"no route to {url}")
        return self.pages[url]


@pytest.fixture
def fake_web(monkeypatch):
    """Route every fetch made through the pipeline to a FakeSession."""
    session = FakeSession()
    monkeypatch.setattr("linkscout.fetcher.requests.get", session.get)
    return session
