"""Reconciliation of binary payload maps (ConfigMap binaryData, Secret data).

Binary payloads are not subject to the reserved key namespace.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping

from vcsync.reconcile.equality import binary_maps_equal


class BinaryMapReconciler:
    """Structural comparison and copy of ``str -> bytes`` maps."""

    def reconcile(
        self,
        physical: Mapping[str, bytes | None] | None,
        virtual: Mapping[str, bytes | None] | None,
    ) -> tuple[dict[str, bytes | None] | None, bool]:
        if binary_maps_equal(physical, virtual):
            return None, True
        # Differs, but an absent virtual map is not a removal request.
        if virtual is None:
            return None, False
        # None values stay None; they are distinct from a missing key.
        return {k: None if v is None else copy.copy(v) for k, v in virtual.items()}, False
