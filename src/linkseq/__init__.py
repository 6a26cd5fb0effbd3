"""linkseq: Bag and Queue collections backed by singly linked chains.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import linkseq

    bag = linkseq.Bag()
    bag.add(1)
    bag.add(2)
    str(bag)            # '[2, 1]'

    queue = linkseq.Queue()
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()     # 1
    queue.peek()        # 2

    # Serialize and restore
    text = linkseq.to_json(queue)
    restored = linkseq.from_json(text)

    linkseq.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from linkseq.containers import Bag, Queue, RenderConfig, render

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from linkseq.containers.base import LinkedCollection


def to_json(collection: "LinkedCollection[object]", indent: int = 2) -> str:
    """Serialize a collection to a JSON document.

    Parameters
    ----------
    collection:
        A ``Bag``, ``Queue`` or other registered collection.
    indent:
        JSON indentation width.

    Returns
    -------
    str
        A document of the form ``{"kind": ..., "count": ..., "items": [...]}``.

    Raises
    ------
    linkseq.serializer.SerializationError
        If the collection kind is unregistered or an item cannot be
        encoded as JSON.
    """
    from linkseq.serializer import CollectionSerializer

    return CollectionSerializer().to_json(collection, indent=indent)


def from_json(text: str) -> "LinkedCollection[object]":
    """Restore a collection from a JSON document produced by :func:`to_json`.

    Raises
    ------
    linkseq.serializer.SerializationError
        If the document is malformed or names an unknown kind.
    """
    from linkseq.serializer import CollectionSerializer

    return CollectionSerializer().from_json(text)


__all__ = [
    "__version__",
    "Bag",
    "Queue",
    "RenderConfig",
    "render",
    "to_json",
    "from_json",
]
