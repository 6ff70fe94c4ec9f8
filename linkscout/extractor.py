"""Anchor extraction over a parsed document tree.

Every ``<a>`` element yields one :class:`LinkRecord`, in document order. The
walk is a single post-order pass: each element inside an anchor is summarised
once (text, images, emails) from its children's summaries, and an anchor's
record is read off its own summary. Anchors reserve their output slot on the
way down so that records come out in pre-order even though they are completed
bottom-up. Nested anchors get their own record and also count towards every
enclosing anchor.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Tuple, cast

from .emails import find_emails
from .models import ImageRef, LinkRecord
from .tree import Node

ANCHOR_TAG = "a"
IMAGE_TAG = "img"
MAILTO_PREFIX = "mailto:"


class _Subtree(NamedTuple):
    text: str
    images: Tuple[ImageRef, ...]
    emails: Tuple[str, ...]


_EMPTY = _Subtree("", (), ())


def is_anchor(node: Node) -> bool:
    return node.is_element and node.tag == ANCHOR_TAG


def is_image(node: Node) -> bool:
    return node.is_element and node.tag == IMAGE_TAG


def mailto_address(node: Node) -> Optional[str]:
    """Return the address of a ``mailto:`` anchor, or None."""
    href = node.attr("href")
    if href is not None and href.startswith(MAILTO_PREFIX):
        return href[len(MAILTO_PREFIX):]
    return None


def _summarize(node: Node, children: List[_Subtree]) -> _Subtree:
    if node.is_text:
        return _Subtree(node.data, (), ())

    images: List[ImageRef] = []
    if is_image(node):
        images.append(ImageRef(src=node.attr("src") or "", alt=node.attr("alt") or ""))
    for child in children:
        images.extend(child.images)
    if not node.is_element:
        return _Subtree("", tuple(images), ())

    text = "".join(child.text for child in children)
    emails: List[str] = []
    if is_anchor(node):
        address = mailto_address(node)
        if address is not None:
            emails.append(address)
    emails.extend(find_emails(text.strip()))
    # Text nodes contribute through ``text`` above; element children repeat
    # the whole collection for their own subtree.
    for child in children:
        emails.extend(child.emails)
    return _Subtree(text, tuple(images), tuple(emails))


def extract(root: Node) -> List[LinkRecord]:
    """Return one record per anchor under ``root``, in document order."""
    records: List[Optional[LinkRecord]] = []
    summaries: List[_Subtree] = []
    # (node, inside an anchor, leaving, reserved record slot)
    stack: List[Tuple[Node, bool, bool, Optional[int]]] = [(root, False, False, None)]

    while stack:
        node, inside, leaving, slot = stack.pop()
        if not leaving:
            if is_anchor(node):
                slot = len(records)
                records.append(None)
            if node.children:
                stack.append((node, inside, True, slot))
                nested = inside or slot is not None
                stack.extend(
                    (child, nested, False, None) for child in reversed(node.children)
                )
                continue

        start = len(summaries) - len(node.children)
        children = summaries[start:]
        del summaries[start:]
        # Content outside any anchor is never read.
        if inside or slot is not None:
            summary = _summarize(node, children)
        else:
            summary = _EMPTY
        summaries.append(summary)

        if slot is not None:
            records[slot] = LinkRecord(
                target=node.attr("href") or "",
                text=summary.text.strip(),
                images=summary.images,
                emails=summary.emails,
            )

    return cast(List[LinkRecord], records)
