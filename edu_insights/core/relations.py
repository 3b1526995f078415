"""Helpers for walking optional relation chains on upstream rows."""

from collections.abc import Iterable, Mapping
from typing import Any

_MISSING = object()


def _step(node: Any, key: str) -> Any:
    if isinstance(node, Mapping):
        return node.get(key, _MISSING)
    return getattr(node, key, _MISSING)


def resolve_path(obj: Any, path: Iterable[str], default: Any = None) -> Any:
    """Follow *path* through nested objects / mappings and return the leaf.

    Any missing, ``None`` or empty-string hop along the way yields *default*,
    so the "unknown relation" policy lives in one place:

        resolve_path(quiz, ("topic", "chapter", "subject", "name"), "Unknown")
    """
    node = obj
    for key in path:
        if node is None:
            return default
        node = _step(node, key)
        if node is _MISSING:
            return default
    if node is None or node == "":
        return default
    return node
