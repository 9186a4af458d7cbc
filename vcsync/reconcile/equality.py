"""Semantic equality for decoded API objects.

The API server does not distinguish a missing field from its empty value, so
neither do these helpers. Map-shaped values (labels, data) keep every key;
struct-shaped trees (e.g. Endpoints subsets) ignore empty members.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, Mapping)):
        return len(value) == 0
    return False


def _prune(value: Any) -> Any:
    if isinstance(value, Mapping):
        pruned = {k: _prune(v) for k, v in value.items()}
        return {k: v for k, v in pruned.items() if not _is_empty(v)}
    if isinstance(value, (list, tuple)):
        return [_prune(v) for v in value]
    return value


def semantic_equal(a: Any, b: Any) -> bool:
    """Compare two struct-shaped trees, treating absent and empty members as equal."""
    if _is_empty(a) and _is_empty(b):
        return True
    return _prune(a) == _prune(b)


def maps_equal(a: Mapping[str, Any] | None, b: Mapping[str, Any] | None) -> bool:
    """Compare two string maps; a missing map equals an empty one."""
    return dict(a or {}) == dict(b or {})


def bytes_equal(a: bytes | None, b: bytes | None) -> bool:
    return (a or b"") == (b or b"")


def binary_maps_equal(
    a: Mapping[str, bytes | None] | None,
    b: Mapping[str, bytes | None] | None,
) -> bool:
    """Compare two binary maps. Keys must match; a None value equals ``b""``."""
    a = a or {}
    b = b or {}
    if a.keys() != b.keys():
        return False
    return all(bytes_equal(a[k], b[k]) for k in a)
