"""Serialization of linked collections to and from JSON and YAML.

The serialized form is a plain mapping::

    {"kind": "queue", "count": 3, "items": [1, 2, 3]}

``items`` is always listed in the collection's iteration order, so a
bag serializes most recently added first.  Deserialization resolves
``kind`` through :data:`linkseq.registry.container_registry` and rebuilds
the collection with the same iteration order.

Usage
-----
::

    from linkseq.serializer import CollectionSerializer

    serializer = CollectionSerializer()
    text = serializer.to_json(queue)
    queue2 = serializer.from_json(text)
    assert list(queue) == list(queue2)
"""
from __future__ import annotations

import json
import logging

import yaml

from linkseq.containers.base import LinkedCollection
from linkseq.registry import KindNotFoundError, KindRegistry, container_registry

logger = logging.getLogger(__name__)


class SerializationError(ValueError):
    """Raised when a document cannot be turned back into a collection."""


class CollectionSerializer:
    """Converts between linked collections and plain Python dicts.

    Parameters
    ----------
    registry:
        Registry used to name collection classes and resolve ``kind``
        fields. Defaults to the module-level ``container_registry``.
    """

    def __init__(self, registry: KindRegistry | None = None) -> None:
        self._registry = registry if registry is not None else container_registry

    # ------------------------------------------------------------------
    # Serialization (collection -> dict)
    # ------------------------------------------------------------------

    def to_dict(self, collection: LinkedCollection[object]) -> dict[str, object]:
        """Serialize ``collection`` to a plain dict.

        Items are copied as they are; whether they survive JSON or YAML
        encoding is checked by :meth:`to_json` and :meth:`to_yaml`.

        Raises
        ------
        SerializationError
            If neither the collection's class nor any of its bases is a
            registered kind.
        """
        try:
            kind = self._registry.name_of(type(collection))
        except KindNotFoundError as exc:
            raise SerializationError(
                f"{type(collection).__qualname__} is not a registered collection kind"
            ) from exc
        return {
            "kind": kind,
            "count": collection.count,
            "items": list(collection),
        }

    # ------------------------------------------------------------------
    # Deserialization (dict -> collection)
    # ------------------------------------------------------------------

    def from_dict(self, data: object) -> LinkedCollection[object]:
        """Rebuild a collection from a dict produced by :meth:`to_dict`.

        Raises
        ------
        SerializationError
            If ``data`` is malformed or names an unknown kind.
        """
        if not isinstance(data, dict):
            raise SerializationError(
                f"Expected a mapping, got {type(data).__name__}"
            )
        for key in ("kind", "items"):
            if key not in data:
                raise SerializationError(f"Missing required field {key!r}")

        items = data["items"]
        if not isinstance(items, list):
            raise SerializationError(
                f"Field 'items' must be a list, got {type(items).__name__}"
            )
        count = data.get("count")
        if count is not None:
            # bool is an int subclass, and True == 1
            if isinstance(count, bool) or not isinstance(count, int):
                raise SerializationError(
                    f"Field 'count' must be an integer, got {type(count).__name__}"
                )
            if count != len(items):
                raise SerializationError(
                    f"Field 'count' is {count!r} but {len(items)} item(s) are listed"
                )

        kind = str(data["kind"])
        try:
            cls = self._registry.get(kind)
        except KindNotFoundError as exc:
            raise SerializationError(f"Unknown collection kind {kind!r}") from exc

        logger.debug("Restoring %s with %d item(s)", kind, len(items))
        return cls.from_iterable(items)

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, collection: LinkedCollection[object], indent: int = 2) -> str:
        """Serialize ``collection`` to a JSON string.

        Raises
        ------
        SerializationError
            If the collection kind is unregistered or an item has no JSON
            representation.
        """
        data = self.to_dict(collection)
        try:
            return json.dumps(data, indent=indent, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Cannot encode items as JSON: {exc}") from exc

    def from_json(self, text: str) -> LinkedCollection[object]:
        """Deserialize a collection from a JSON string."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SerializationError(f"Invalid JSON: {exc}") from exc
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, collection: LinkedCollection[object]) -> str:
        """Serialize ``collection`` to a YAML string.

        Only plain YAML types are written, so the output always loads back
        through ``yaml.safe_load``.

        Raises
        ------
        SerializationError
            If the collection kind is unregistered or an item has no plain
            YAML representation.
        """
        data = self.to_dict(collection)
        try:
            return yaml.safe_dump(
                data,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )
        except yaml.YAMLError as exc:
            raise SerializationError(f"Cannot encode items as YAML: {exc}") from exc

    def from_yaml(self, text: str) -> LinkedCollection[object]:
        """Deserialize a collection from a YAML string."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SerializationError(f"Invalid YAML: {exc}") from exc
        return self.from_dict(data)
