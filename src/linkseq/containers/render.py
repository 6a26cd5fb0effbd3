"""Textual rendering of collections.

The default rendering is ``[`` + items joined by ``", "`` + ``]`` with
an empty collection rendered as exactly ``[]``.  Test harnesses and the
CLI compare against this byte for byte.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Delimiters used by :func:`render`.

    Parameters
    ----------
    open:
        Text emitted before the first item.
    close:
        Text emitted after the last item.
    separator:
        Text emitted between two consecutive items.
    """

    open: str = "["  # noqa: A003
    close: str = "]"
    separator: str = ", "


DEFAULT_RENDER_CONFIG = RenderConfig()


def render(items: Iterable[object], config: RenderConfig | None = None) -> str:
    """Render ``items`` in the order they are produced.

    Parameters
    ----------
    items:
        Any iterable; a collection renders in its own iteration order.
    config:
        Delimiters to use. Defaults to :data:`DEFAULT_RENDER_CONFIG`.

    Returns
    -------
    str
        For example ``"[3, 2, 1]"``, or ``"[]"`` when ``items`` is empty.
    """
    cfg = config or DEFAULT_RENDER_CONFIG
    return cfg.open + cfg.separator.join(str(item) for item in items) + cfg.close
