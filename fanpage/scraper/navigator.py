"""Depth-first lookup of a single substructure inside a parsed document."""

from __future__ import annotations

from typing import Callable

from bs4 import PageElement, Tag

from fanpage.scraper.errors import NotFoundError

Predicate = Callable[[PageElement], bool]


def tag_named(name: str) -> Predicate:
    """Return a predicate matching element nodes called *name*."""

    def _match(node: PageElement) -> bool:
        return isinstance(node, Tag) and node.name == name

    return _match


def find_first(root: Tag, predicate: Predicate, element: str) -> Tag:
    """Return the first node under *root* (inclusive) satisfying *predicate*.

    Nodes are visited in pre-order, each exactly once.  *element* names the
    sought node in the error message.

    Raises:
        NotFoundError: If no node matches.
    """
    stack: list[PageElement] = [root]
    while stack:
        node = stack.pop()
        if predicate(node):
            return node  # type: ignore[return-value]
        if isinstance(node, Tag):
            # Reversed so the leftmost child is popped first.
            stack.extend(reversed(list(node.children)))
    raise NotFoundError(element)


def find_first_tag(root: Tag, name: str) -> Tag:
    return find_first(root, tag_named(name), name)


def render_children(node: Tag) -> str:
    """Serialise the children of *node* back to markup, without *node*'s own tags."""
    return node.decode_contents()
