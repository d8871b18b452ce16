"""Small query helpers over BeautifulSoup documents.

The extractors only talk to the page through these functions, so the
selector-level details of BeautifulSoup stay in one place.
"""

from __future__ import annotations

import copy
from typing import Iterable, List, Optional, Sequence

from bs4 import BeautifulSoup, Comment, NavigableString
from bs4.element import Tag

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def text_of(node: Optional[Tag]) -> str:
    """Full text of a node and its descendants, trimmed. Empty for ``None``."""
    if node is None:
        return ""
    return node.get_text().strip()


def has_class(node: Tag, class_name: str) -> bool:
    return class_name in (node.get("class") or [])


def matches(node: Optional[Tag], tag: Optional[str] = None, class_name: Optional[str] = None) -> bool:
    if node is None:
        return False
    if tag is not None and node.name != tag:
        return False
    if class_name is not None and not has_class(node, class_name):
        return False
    return True


def find_first(root: Tag, tag: str, class_name: Optional[str] = None) -> Optional[Tag]:
    return next(iter(find_all(root, tag, class_name)), None)


def find_all(root: Tag, tag: str, class_name: Optional[str] = None) -> List[Tag]:
    if class_name is None:
        return root.find_all(tag)
    return root.find_all(tag, class_=class_name)


def find_within(root: Tag, container: str, tag: str) -> List[Tag]:
    """Every ``tag`` nested in any ``container``, in document order and without duplicates."""
    return root.select(f"{container} {tag}")


def find_containing(root: Tag, tag: str, needle: str, class_name: Optional[str] = None) -> Optional[Tag]:
    """First ``tag`` whose full text contains ``needle``."""
    for node in find_all(root, tag, class_name):
        if needle in node.get_text():
            return node
    return None


def next_element(node: Optional[Tag], tag: Optional[str] = None, class_name: Optional[str] = None) -> Optional[Tag]:
    """The immediately following sibling element, if it matches the given filters.

    Text between elements is skipped. When the next element does not match,
    ``None`` is returned; later siblings are not searched.
    """
    if node is None:
        return None
    for sibling in node.next_siblings:
        if isinstance(sibling, Tag):
            return sibling if matches(sibling, tag, class_name) else None
    return None


def following_elements(node: Optional[Tag]) -> Iterable[Tag]:
    """All sibling elements after ``node``, in order."""
    if node is None:
        return
    for sibling in node.next_siblings:
        if isinstance(sibling, Tag):
            yield sibling


def is_any_of(node: Tag, tags: Sequence[str]) -> bool:
    return node.name in tags


def own_text_fragments(node: Tag) -> List[str]:
    """Text nodes that are direct children of ``node``, trimmed, empty ones dropped."""
    fragments = []
    for child in node.children:
        if isinstance(child, NavigableString) and not isinstance(child, Comment):
            text = str(child).strip()
            if text:
                fragments.append(text)
    return fragments


def text_without_children(node: Tag, tag: str, class_name: Optional[str] = None) -> str:
    """Trimmed text of ``node`` with matching direct children removed. ``node`` is left untouched."""
    clone = copy.copy(node)
    for child in list(clone.children):
        if isinstance(child, Tag) and matches(child, tag, class_name):
            child.decompose()
    return text_of(clone)
