"""Singly linked chain primitives shared by the linkseq collections.

A ``Node`` holds one element and a reference to its successor.  Each node
is referenced by exactly one predecessor (or by the owning collection for
the head node), so a chain never shares nodes and never forms a cycle.

``ChainIterator`` is the read cursor handed out by ``iter()`` on every
collection.  It captures the head node when it is created and walks the
chain from there without touching the collection itself.
"""
from __future__ import annotations

from typing import Generic, TypeVar

E = TypeVar("E")


class Node(Generic[E]):
    """One link of a chain.

    Parameters
    ----------
    item:
        The stored element.
    next:
        The successor node, or ``None`` at the end of the chain.
    """

    __slots__ = ("item", "next")

    def __init__(self, item: E, next: Node[E] | None = None) -> None:  # noqa: A002
        self.item = item
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.item!r})"


class ChainIterator(Generic[E]):
    """Single-pass, forward-only cursor over a chain of nodes.

    Once exhausted the cursor stays exhausted; call ``iter()`` on the
    collection again to get a fresh one.
    """

    __slots__ = ("_current",)

    def __init__(self, head: Node[E] | None) -> None:
        self._current = head

    def __iter__(self) -> ChainIterator[E]:
        return self

    def __next__(self) -> E:
        node = self._current
        if node is None:
            raise StopIteration
        self._current = node.next
        return node.item
