"""Unit tests for linkseq.containers.node: Node and ChainIterator."""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from linkseq.containers.node import ChainIterator, Node


def _chain(*items: int) -> Node[int] | None:
    head: Node[int] | None = None
    for item in reversed(items):
        head = Node(item, head)
    return head


class TestNode:
    def test_defaults_to_no_successor(self) -> None:
        node = Node("a")
        assert node.item == "a"
        assert node.next is None

    def test_links_to_successor(self) -> None:
        tail = Node(2)
        head = Node(1, tail)
        assert head.next is tail

    def test_repr_shows_item(self) -> None:
        assert repr(Node("x")) == "Node('x')"


class TestChainIterator:
    def test_walks_chain_in_link_order(self) -> None:
        assert list(ChainIterator(_chain(1, 2, 3))) == [1, 2, 3]

    def test_empty_chain_yields_nothing(self) -> None:
        assert list(ChainIterator(None)) == []

    def test_is_an_iterator(self) -> None:
        it = ChainIterator(_chain(1))
        assert isinstance(it, Iterator)
        assert iter(it) is it

    def test_single_pass(self) -> None:
        it = ChainIterator(_chain(1, 2))
        assert list(it) == [1, 2]
        assert list(it) == []
        with pytest.raises(StopIteration):
            next(it)

    def test_independent_cursors(self) -> None:
        head = _chain(1, 2, 3)
        first = ChainIterator(head)
        second = ChainIterator(head)
        assert next(first) == 1
        assert next(first) == 2
        assert next(second) == 1
        assert list(first) == [3]
        assert list(second) == [2, 3]

    def test_does_not_modify_chain(self) -> None:
        head = _chain(1, 2)
        list(ChainIterator(head))
        assert head is not None
        assert head.item == 1
        assert head.next is not None and head.next.item == 2
