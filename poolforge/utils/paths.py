"""Derived output paths.

The extension starts at the first ``.`` anywhere in the path string, not the
last one. ``"out.d/photo.png"`` therefore has the extension
``".d/photo.png"``. Tools built on the ``_min``/``_max``/``_avg`` naming rely
on this, so both helpers share the single lookup in :func:`_extension_start`.
"""
from __future__ import annotations

EXTENSION_SEPARATOR = "."


def _extension_start(path: str) -> int:
    return path.find(EXTENSION_SEPARATOR)


def extension_of(path: str) -> str:
    """Return the extension including the dot, or ``""`` when there is none."""
    start = _extension_start(path)
    return "" if start < 0 else path[start:]


def derive_path(path: str, suffix: str) -> str:
    """Insert ``suffix`` right before the extension of ``path``.

    >>> derive_path("photo.png", "_min")
    'photo_min.png'
    >>> derive_path("photo", "_min")
    'photo'
    """
    start = _extension_start(path)
    if start < 0:
        return path
    return path[:start] + suffix + path[start:]


__all__ = ["EXTENSION_SEPARATOR", "extension_of", "derive_path"]
