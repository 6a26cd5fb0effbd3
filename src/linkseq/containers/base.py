"""Abstract base shared by the linked collections.

``LinkedCollection`` owns the element count and provides everything that
only needs the head of the chain: length, emptiness, iteration, and
rendering.  Subclasses decide where new nodes are linked in.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from linkseq.containers.node import ChainIterator, Node
from linkseq.containers.render import render

E = TypeVar("E")

C = TypeVar("C", bound="LinkedCollection[object]")


class LinkedCollection(ABC, Generic[E]):
    """A collection stored as a singly linked chain of nodes.

    Invariant: ``count == 0`` exactly when the head node is ``None``.
    """

    def __init__(self) -> None:
        self._count: int = 0

    # ------------------------------------------------------------------
    # Chain access
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def _head(self) -> Node[E] | None:
        """The node iteration starts from."""

    @classmethod
    @abstractmethod
    def from_iterable(cls: type[C], items: Iterable[object]) -> C:
        """Build a collection whose iteration order equals ``items``."""

    # ------------------------------------------------------------------
    # Size
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        """Number of elements currently held."""
        return self._count

    def is_empty(self) -> bool:
        """Return True if the collection holds no elements."""
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    # ------------------------------------------------------------------
    # Traversal and display
    # ------------------------------------------------------------------

    def __iter__(self) -> ChainIterator[E]:
        """Return a new cursor positioned at the current head."""
        return ChainIterator(self._head)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(item) for item in self)}])"
