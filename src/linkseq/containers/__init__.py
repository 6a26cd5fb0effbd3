"""Linked collection types.

Exports the two public collections, their shared base, and the
rendering helpers.
"""
from __future__ import annotations

from linkseq.containers.bag import Bag
from linkseq.containers.base import LinkedCollection
from linkseq.containers.node import ChainIterator, Node
from linkseq.containers.queue import Queue
from linkseq.containers.render import DEFAULT_RENDER_CONFIG, RenderConfig, render

__all__ = [
    "Bag",
    "ChainIterator",
    "DEFAULT_RENDER_CONFIG",
    "LinkedCollection",
    "Node",
    "Queue",
    "RenderConfig",
    "render",
]
