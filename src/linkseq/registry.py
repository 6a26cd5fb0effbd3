"""Registry of collection kinds.

Maps short kind names (``"bag"``, ``"queue"``) to ``LinkedCollection``
subclasses.  The serializer resolves the ``kind`` field of a document
through this registry, and the CLI lists it with ``linkseq kinds``.

Third-party collections register by declaring entry-points in their own
``pyproject.toml`` under the ``linkseq.containers`` group.

Example
-------
Register a custom collection with the decorator::

    from linkseq.containers import LinkedCollection
    from linkseq.registry import container_registry

    @container_registry.register("stack")
    class Stack(LinkedCollection):
        ...

Pick up kinds from installed distributions::

    added = container_registry.load_entrypoints()

Retrieve a kind by name::

    cls = container_registry.get("queue")
    queue = cls.from_iterable([1, 2, 3])
"""
from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Callable

from linkseq.containers.bag import Bag
from linkseq.containers.base import LinkedCollection
from linkseq.containers.queue import Queue

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "linkseq.containers"

CollectionType = type[LinkedCollection[object]]


class KindNotFoundError(KeyError):
    """No collection class is bound to the requested kind name.

    ``known`` lists the kinds that were available at lookup time so the
    message can suggest a valid one.
    """

    def __init__(self, name: str, registry_name: str, known: list[str] | None = None) -> None:
        self.kind_name = name
        self.registry_name = registry_name
        self.known = sorted(known or [])
        choices = ", ".join(self.known) if self.known else "none"
        super().__init__(
            f"No collection kind {name!r} in registry {registry_name!r} "
            f"(known kinds: {choices})"
        )


class KindAlreadyRegisteredError(ValueError):
    """A kind name is already bound to a collection class."""

    def __init__(self, name: str, registry_name: str, existing: type) -> None:
        self.kind_name = name
        self.registry_name = registry_name
        self.existing = existing
        super().__init__(
            f"Kind {name!r} in registry {registry_name!r} is already bound to "
            f"{existing.__module__}.{existing.__qualname__}"
        )


class KindRegistry:
    """Name-to-class registry for ``LinkedCollection`` subclasses.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._kinds: dict[str, CollectionType] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str) -> Callable[[CollectionType], CollectionType]:
        """Return a class decorator that registers the decorated class.

        Raises
        ------
        KindAlreadyRegisteredError
            If ``name`` is already in use in this registry.
        TypeError
            If the decorated class does not subclass ``LinkedCollection``.
        """

        def decorator(cls: CollectionType) -> CollectionType:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: CollectionType) -> None:
        """Register ``cls`` under ``name`` without the decorator syntax."""
        if name in self._kinds:
            raise KindAlreadyRegisteredError(name, self._name, self._kinds[name])
        if not (isinstance(cls, type) and issubclass(cls, LinkedCollection)):
            raise TypeError(
                f"{cls!r} is not a LinkedCollection subclass; "
                f"cannot bind it to kind {name!r}"
            )
        self._kinds[name] = cls
        logger.debug(
            "Registered kind %r -> %s in registry %r",
            name,
            cls.__qualname__,
            self._name,
        )

    def deregister(self, name: str) -> None:
        """Remove a kind from the registry.

        Raises
        ------
        KindNotFoundError
            If ``name`` is not currently registered.
        """
        if name not in self._kinds:
            raise KindNotFoundError(name, self._name, self.list_kinds())
        del self._kinds[name]
        logger.debug("Deregistered kind %r from registry %r", name, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> CollectionType:
        """Return the class registered under ``name``.

        Raises
        ------
        KindNotFoundError
            If no class is registered under ``name``.
        """
        try:
            return self._kinds[name]
        except KeyError:
            raise KindNotFoundError(name, self._name, self.list_kinds()) from None

    def name_of(self, cls: type) -> str:
        """Return the name ``cls`` (or its nearest registered base) is registered under.

        Raises
        ------
        KindNotFoundError
            If neither ``cls`` nor any of its bases is registered.
        """
        for klass in cls.__mro__:
            for name, registered in self._kinds.items():
                if registered is klass:
                    return name
        raise KindNotFoundError(cls.__qualname__, self._name, self.list_kinds())

    def list_kinds(self) -> list[str]:
        """Return registered kind names in alphabetical order."""
        return sorted(self._kinds)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def __repr__(self) -> str:
        return f"KindRegistry(name={self._name!r}, kinds={self.list_kinds()})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = ENTRYPOINT_GROUP) -> list[str]:
        """Register collection classes advertised by installed distributions.

        An entry-point whose name is already a kind is left alone, which
        makes the call safe to repeat.  One that cannot be imported, or
        that does not resolve to a ``LinkedCollection`` subclass, is
        reported through the module logger and does not stop the scan.

        Returns
        -------
        list[str]
            The kind names added by this call, in discovery order.
        """
        added: list[str] = []
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._kinds:
                logger.debug("Kind %r already known; ignoring entry-point", ep.name)
                continue
            cls = self._load_entrypoint(ep, group)
            if cls is None:
                continue
            if not (isinstance(cls, type) and issubclass(cls, LinkedCollection)):
                logger.warning(
                    "Entry-point %r in %r resolved to %r, not a collection class",
                    ep.name,
                    group,
                    cls,
                )
                continue
            self.register_class(ep.name, cls)
            added.append(ep.name)
        return added

    @staticmethod
    def _load_entrypoint(
        ep: importlib.metadata.EntryPoint, group: str
    ) -> object | None:
        try:
            return ep.load()
        except Exception:
            logger.exception("Cannot import collection kind %r from %r", ep.name, group)
            return None


container_registry = KindRegistry("containers")
container_registry.register_class("bag", Bag)
container_registry.register_class("queue", Queue)
