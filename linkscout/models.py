"""Data models produced by the link extractor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ImageRef:
    """Image reference nested inside an anchor."""

    src: str
    alt: str


@dataclass(frozen=True)
class LinkRecord:
    """Everything gathered from a single anchor element."""

    target: str
    text: str
    images: Tuple[ImageRef, ...] = ()
    emails: Tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not (self.target or self.text or self.images or self.emails)
