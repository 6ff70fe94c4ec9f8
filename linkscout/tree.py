"""Read-only document tree built from fetched HTML."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from .errors import ParseError

logger = logging.getLogger("linkscout")


class NodeKind(enum.Enum):
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


@dataclass(frozen=True)
class Node:
    """A single node of the parsed document.

    Elements carry a lower-cased ``tag``, their attributes in source order and
    their children. Text nodes carry ``data``. Everything else (the document
    root, comments, doctypes) is ``OTHER``.
    """

    kind: NodeKind
    tag: str = ""
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["Node", ...] = ()
    data: str = ""

    @property
    def is_element(self) -> bool:
        return self.kind is NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT

    def attr(self, key: str) -> Optional[str]:
        """Return the first value stored under ``key``."""
        for name, value in self.attrs:
            if name == key:
                return value
        return None


def element(tag: str, *children: Node, **attrs: str) -> Node:
    """Convenience constructor for hand-built trees."""
    return Node(
        NodeKind.ELEMENT,
        tag=tag,
        attrs=tuple(attrs.items()),
        children=tuple(children),
    )


def text(data: str) -> Node:
    return Node(NodeKind.TEXT, data=data)


def _leaf(item: NavigableString) -> Node:
    # Comments, doctypes, CDATA and processing instructions are not page text.
    if isinstance(item, PreformattedString):
        return Node(NodeKind.OTHER)
    return Node(NodeKind.TEXT, data=str(item))


def _tag(item: Tag, children: Tuple[Node, ...]) -> Node:
    if isinstance(item, BeautifulSoup):
        return Node(NodeKind.OTHER, children=children)
    attrs = tuple(item.attrs.items())
    return Node(NodeKind.ELEMENT, tag=item.name, attrs=attrs, children=children)


def from_soup(soup: Tag) -> Node:
    """Convert a BeautifulSoup tree into ``Node`` objects without recursion."""
    built: List[Node] = []
    pending: List[Tuple[Union[Tag, NavigableString], bool]] = [(soup, False)]
    while pending:
        item, finished = pending.pop()
        if not isinstance(item, Tag):
            built.append(_leaf(item))
            continue
        if not finished:
            pending.append((item, True))
            pending.extend((child, False) for child in reversed(item.contents))
            continue
        start = len(built) - len(item.contents)
        children = tuple(built[start:])
        del built[start:]
        built.append(_tag(item, children))
    return built[0]


def parse_html(markup: Union[bytes, str]) -> Node:
    """Parse HTML leniently and return the document root.

    Duplicate attributes keep their first value and multi-valued attributes
    such as ``class`` stay plain strings.
    """
    try:
        soup = BeautifulSoup(
            markup,
            "html.parser",
            on_duplicate_attribute="ignore",
            multi_valued_attributes=None,
        )
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Error parsing HTML: {exc}") from exc
    root = from_soup(soup)
    logger.debug("Parsed document with %d top-level nodes", len(root.children))
    return root
