#!/usr/bin/env python3
"""Example: Quickstart for linkseq

Minimal working example: fill a Bag and a Queue, walk them, drain the
queue, and serialize what is left.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install linkseq
"""
from __future__ import annotations

import linkseq


def main() -> None:
    print(f"linkseq version: {linkseq.__version__}")

    # Step 1: a Bag iterates most recently added first
    bag = linkseq.Bag()
    for word in "to be or not to be".split():
        bag.add(word)
    print(f"Bag of {bag.count} words: {bag}")

    # Step 2: a Queue iterates and drains oldest first
    queue = linkseq.Queue()
    for n in range(1, 6):
        queue.enqueue(n)
    print(f"Queue: {queue}, next up: {queue.peek()}")
    print(f"Dequeued: {queue.dequeue()}, {queue.dequeue()}")

    # Step 3: an empty queue answers None instead of raising
    while not queue.is_empty():
        queue.dequeue()
    print(f"Empty queue: {queue}, dequeue -> {queue.dequeue()}")

    # Step 4: serialize and restore
    queue.enqueue("x")
    queue.enqueue("y")
    text = linkseq.to_json(queue)
    print(f"JSON:\n{text}")
    print(f"Restored: {linkseq.from_json(text)!r}")


if __name__ == "__main__":
    main()
