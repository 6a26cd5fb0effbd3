"""Queue: a FIFO collection backed by a singly linked chain.

The chain runs from the least recently added node (the head, next to be
dequeued) to the most recently added one (the tail).  Holding both ends
makes ``enqueue`` and ``dequeue`` O(1).

``dequeue`` and ``peek`` on an empty queue return ``None`` instead of
raising.  A queue that may legitimately hold ``None`` should be checked
with ``is_empty()`` first.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from linkseq.containers.base import LinkedCollection
from linkseq.containers.node import Node

E = TypeVar("E")


class Queue(LinkedCollection[E]):
    """First-in-first-out collection.

    Example
    -------
    ::

        from linkseq import Queue

        queue = Queue()
        queue.enqueue("a")
        queue.enqueue("b")
        queue.peek()     # 'a'
        queue.dequeue()  # 'a'
        str(queue)       # '[b]'
    """

    def __init__(self) -> None:
        super().__init__()
        self._least_recent: Node[E] | None = None
        self._most_recent: Node[E] | None = None

    @property
    def _head(self) -> Node[E] | None:
        return self._least_recent

    @classmethod
    def from_iterable(cls, items: Iterable[E]) -> Queue[E]:
        """Build a queue holding ``items`` with the first one at the head."""
        queue: Queue[E] = cls()
        for item in items:
            queue.enqueue(item)
        return queue

    def enqueue(self, item: E) -> None:
        """Append ``item`` after the current tail."""
        node = Node(item)
        if self._most_recent is None:
            self._least_recent = node
        else:
            self._most_recent.next = node
        self._most_recent = node
        self._count += 1

    def dequeue(self) -> E | None:
        """Remove and return the least recently added item.

        Returns
        -------
        E | None
            The head item, or ``None`` if the queue is empty.  An empty
            queue is left untouched.
        """
        node = self._least_recent
        if node is None:
            return None
        self._least_recent = node.next
        if self._least_recent is None:
            self._most_recent = None
        self._count -= 1
        return node.item

    def peek(self) -> E | None:
        """Return the least recently added item without removing it."""
        node = self._least_recent
        return None if node is None else node.item
