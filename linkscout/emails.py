"""Email address discovery in free text."""

from __future__ import annotations

import re
from email.errors import HeaderParseError
from email.headerregistry import Address
from typing import List

EMAIL_PATTERN = re.compile(r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b", re.ASCII)


def is_valid_address(candidate: str) -> bool:
    """Return True when ``candidate`` parses cleanly as an RFC 5322 addr-spec."""
    try:
        Address(addr_spec=candidate)
    except (HeaderParseError, ValueError):
        return False
    return True


def find_emails(text: str) -> List[str]:
    """Scan text for email-shaped substrings and keep the valid ones.

    The pattern is deliberately loose; candidates such as ``first..last@x.com``
    match it but are dropped by the addr-spec check.
    """
    if not text:
        return []
    return [
        match.group(0)
        for match in EMAIL_PATTERN.finditer(text)
        if is_valid_address(match.group(0))
    ]
