"""Unit tests for linkseq.containers.bag: insertion, traversal, rendering."""
from __future__ import annotations

import pytest

from linkseq import Bag
from linkseq.containers.base import LinkedCollection


# ---------------------------------------------------------------------------
# Empty bag
# ---------------------------------------------------------------------------


class TestEmptyBag:
    def test_new_bag_is_empty(self) -> None:
        bag: Bag[int] = Bag()
        assert bag.is_empty()
        assert bag.count == 0
        assert len(bag) == 0

    def test_iteration_yields_nothing(self) -> None:
        assert list(Bag()) == []

    def test_renders_as_empty_brackets(self) -> None:
        assert str(Bag()) == "[]"

    def test_falsy_when_empty(self) -> None:
        assert not Bag()

    def test_repr(self) -> None:
        assert repr(Bag()) == "Bag([])"


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


class TestAdd:
    def test_add_increments_count(self) -> None:
        bag: Bag[str] = Bag()
        bag.add("a")
        assert bag.count == 1
        assert not bag.is_empty()

    @pytest.mark.parametrize("n", [1, 2, 10, 1000])
    def test_count_matches_number_of_adds(self, n: int) -> None:
        bag: Bag[int] = Bag()
        for i in range(n):
            bag.add(i)
        assert bag.count == n
        assert len(bag) == n
        assert list(bag) == list(reversed(range(n)))

    def test_duplicates_are_kept(self) -> None:
        bag: Bag[str] = Bag()
        for word in ("x", "x", "y", "x"):
            bag.add(word)
        assert bag.count == 4
        assert sorted(bag) == ["x", "x", "x", "y"]

    def test_none_is_a_valid_item(self) -> None:
        bag: Bag[None] = Bag()
        bag.add(None)
        assert bag.count == 1
        assert list(bag) == [None]

    def test_is_empty_tracks_count(self) -> None:
        bag: Bag[int] = Bag()
        assert bag.is_empty() == (bag.count == 0)
        bag.add(1)
        assert bag.is_empty() == (bag.count == 0)

    def test_count_is_read_only(self) -> None:
        bag: Bag[int] = Bag()
        with pytest.raises(AttributeError):
            bag.count = 5  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------


class TestIteration:
    def test_most_recent_first(self, bag_123: Bag[int]) -> None:
        assert list(bag_123) == [3, 2, 1]

    def test_iteration_does_not_consume(self, bag_123: Bag[int]) -> None:
        assert list(bag_123) == [3, 2, 1]
        assert list(bag_123) == [3, 2, 1]
        assert bag_123.count == 3

    def test_each_iterator_is_single_pass(self, bag_123: Bag[int]) -> None:
        it = iter(bag_123)
        assert list(it) == [3, 2, 1]
        assert list(it) == []

    def test_iterators_are_independent(self, bag_123: Bag[int]) -> None:
        first = iter(bag_123)
        second = iter(bag_123)
        assert first is not second
        assert next(first) == 3
        assert next(first) == 2
        assert next(second) == 3
        assert list(first) == [1]
        assert list(second) == [2, 1]

    def test_iterator_starts_at_head_when_created(self, bag_123: Bag[int]) -> None:
        it = iter(bag_123)
        bag_123.add(4)
        assert list(it) == [3, 2, 1]
        assert list(bag_123) == [4, 3, 2, 1]

    def test_membership_uses_iteration(self, bag_123: Bag[int]) -> None:
        assert 2 in bag_123
        assert 5 not in bag_123


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestRendering:
    def test_scenario_renders_reverse_insertion(self, bag_123: Bag[int]) -> None:
        assert str(bag_123) == "[3, 2, 1]"

    def test_single_item_has_no_separator(self) -> None:
        bag: Bag[str] = Bag()
        bag.add("only")
        assert str(bag) == "[only]"

    def test_strings_rendered_without_quotes(self) -> None:
        bag: Bag[str] = Bag()
        bag.add("a")
        bag.add("b")
        assert str(bag) == "[b, a]"

    def test_repr_uses_item_reprs(self) -> None:
        bag: Bag[str] = Bag()
        bag.add("a")
        assert repr(bag) == "Bag(['a'])"


# ---------------------------------------------------------------------------
# from_iterable
# ---------------------------------------------------------------------------


class TestFromIterable:
    def test_preserves_iteration_order(self) -> None:
        bag = Bag.from_iterable([3, 2, 1])
        assert list(bag) == [3, 2, 1]
        assert bag.count == 3

    def test_accepts_generators(self) -> None:
        bag = Bag.from_iterable(x for x in "abc")
        assert list(bag) == ["a", "b", "c"]

    def test_empty_input(self) -> None:
        assert Bag.from_iterable([]).is_empty()

    def test_is_a_linked_collection(self) -> None:
        assert isinstance(Bag(), LinkedCollection)


def test_large_bag_drops_cleanly() -> None:
    bag: Bag[int] = Bag()
    for i in range(200_000):
        bag.add(i)
    assert bag.count == 200_000
    del bag
