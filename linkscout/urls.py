"""Resolution of link targets against the page address."""

from __future__ import annotations

from typing import Union
from urllib.parse import ParseResult, SplitResult

BaseURL = Union[SplitResult, ParseResult]


def origin(base: BaseURL) -> str:
    # Host and port only; userinfo never leaks into resolved links.
    host = base.netloc.rpartition("@")[2]
    return f"{base.scheme}://{host}"


def resolve(base: BaseURL, ref: str) -> str:
    """Turn ``ref`` into an absolute URL on the same origin as ``base``.

    Anything starting with ``http`` is taken as already absolute. Paths are
    attached to the origin as-is: no dot-segment, query or fragment handling.
    """
    if ref.startswith("http"):
        return ref
    if ref.startswith("/"):
        return origin(base) + ref
    return origin(base) + "/" + ref
