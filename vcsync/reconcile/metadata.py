"""Object metadata reconciliation.

Only these metadata fields may be updated on an existing object:

- generateName
- labels
- annotations
- clusterName

ownerReferences, finalizers and managedFields are observed by the tenant
controllers and are never compared or copied here.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from vcsync.reconcile.kv import KeyValueReconciler

_STRING_FIELDS = ("generateName", "clusterName")
_MAP_FIELDS = ("labels", "annotations")


class MetadataReconciler:
    """Computes updated physical metadata, or None when already in sync."""

    def __init__(self, kv: KeyValueReconciler | None = None) -> None:
        self._kv = kv or KeyValueReconciler()

    def reconcile(
        self,
        physical: Mapping[str, Any] | None,
        virtual: Mapping[str, Any] | None,
    ) -> dict[str, Any] | None:
        physical = physical or {}
        virtual = virtual or {}
        changes: dict[str, Any] = {}

        for name in _STRING_FIELDS:
            wanted = virtual.get(name) or ""
            if (physical.get(name) or "") != wanted:
                changes[name] = wanted

        for name in _MAP_FIELDS:
            merged, equal = self._kv.reconcile(physical.get(name), virtual.get(name))
            if not equal:
                changes[name] = merged

        if not changes:
            return None

        updated = copy.deepcopy(dict(physical))
        for name, value in changes.items():
            if value == "":
                updated.pop(name, None)
            else:
                updated[name] = value
        return updated
