"""CLI package.

The ``cli`` sub-package contains the Click application and its commands.
It should import only from the public API of the parent package and the
registry/serializer modules, never from container internals.
"""
from __future__ import annotations
