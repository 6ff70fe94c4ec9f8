"""Request-terminal errors raised at the service boundaries."""

from __future__ import annotations


class LinkScoutError(Exception):
    """Base class for errors that end a scrape request."""

    status_code = 500


class InputError(LinkScoutError):
    """Raised when the submitted URL is empty or not an absolute URL."""

    status_code = 400


class MethodError(LinkScoutError):
    """Raised when the request method cannot carry a body."""

    status_code = 405


class UpstreamError(LinkScoutError):
    """Raised when the target page cannot be fetched."""


class ParseError(LinkScoutError):
    """Raised when the fetched markup cannot be turned into a tree."""


class SerializationError(LinkScoutError):
    """Raised when the extracted links cannot be encoded as JSON."""
