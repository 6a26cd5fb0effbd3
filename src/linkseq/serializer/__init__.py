"""Collection serializer for JSON and YAML."""
from __future__ import annotations

from linkseq.serializer.serializer import CollectionSerializer, SerializationError

__all__ = ["CollectionSerializer", "SerializationError"]
