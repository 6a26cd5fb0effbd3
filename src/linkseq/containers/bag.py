"""Bag: an insertion-only collection backed by a singly linked chain.

New items are linked in at the head, so ``add`` is O(1) and iteration
yields the most recently added item first.  There is no removal.

Example
-------
::

    from linkseq import Bag

    bag = Bag()
    for n in (1, 2, 3):
        bag.add(n)
    list(bag)   # [3, 2, 1]
    str(bag)    # '[3, 2, 1]'
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from linkseq.containers.base import LinkedCollection
from linkseq.containers.node import Node

E = TypeVar("E")


class Bag(LinkedCollection[E]):
    """Unordered multiset supporting insertion and traversal."""

    def __init__(self) -> None:
        super().__init__()
        self._first: Node[E] | None = None

    @property
    def _head(self) -> Node[E] | None:
        return self._first

    @classmethod
    def from_iterable(cls, items: Iterable[E]) -> Bag[E]:
        """Build a bag that iterates in the same order as ``items``.

        Items are added last-to-first since every ``add`` becomes the new
        head.
        """
        bag: Bag[E] = cls()
        for item in reversed(list(items)):
            bag.add(item)
        return bag

    def add(self, item: E) -> None:
        """Add ``item`` as the new head of the chain."""
        self._first = Node(item, self._first)
        self._count += 1
