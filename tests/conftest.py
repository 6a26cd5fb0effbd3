"""Shared test fixtures for linkseq.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
collection-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from linkseq import Bag, Queue


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "linkseq"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def bag_123() -> Bag[int]:
    """A bag built with ``add(1); add(2); add(3)``."""
    bag: Bag[int] = Bag()
    for n in (1, 2, 3):
        bag.add(n)
    return bag


@pytest.fixture()
def queue_123() -> Queue[int]:
    """A queue built with ``enqueue(1); enqueue(2); enqueue(3)``."""
    queue: Queue[int] = Queue()
    for n in (1, 2, 3):
        queue.enqueue(n)
    return queue
