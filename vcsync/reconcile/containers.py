"""Image reconciliation for named container lists.

Both lists are projected to ``name -> image`` maps and compared with the
key/value reconciler. Only images of containers present on both sides are
updated; containers are never added, removed or reordered.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any

from vcsync.reconcile.kv import KeyValueReconciler


class ContainerSetReconciler:
    """Propagates ``value_field`` of name-matched entries in a named list."""

    def __init__(
        self,
        kv: KeyValueReconciler | None = None,
        key_field: str = "name",
        value_field: str = "image",
    ) -> None:
        self._kv = kv or KeyValueReconciler()
        self._key_field = key_field
        self._value_field = value_field

    def _project(self, entries: Sequence[Mapping[str, Any]]) -> dict[str, str]:
        return {e.get(self._key_field, ""): e.get(self._value_field) or "" for e in entries}

    def reconcile(
        self,
        physical: Sequence[Mapping[str, Any]] | None,
        virtual: Sequence[Mapping[str, Any]] | None,
    ) -> list[dict[str, Any]] | None:
        """Return a new list with drifted images replaced, or None if nothing changed."""
        physical = physical or []
        merged, equal = self._kv.reconcile(self._project(physical), self._project(virtual or []))
        if equal or merged is None:
            return None

        updated: list[dict[str, Any]] = []
        changed = False
        for entry in physical:
            entry = copy.deepcopy(dict(entry))
            name = entry.get(self._key_field, "")
            if name in merged and merged[name] != (entry.get(self._value_field) or ""):
                entry[self._value_field] = merged[name]
                changed = True
            updated.append(entry)

        # Additions or removals on the virtual side alone are not propagated.
        return updated if changed else None
