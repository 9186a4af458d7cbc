"""Key/value map reconciliation with a reserved key namespace.

Labels, annotations and (via the container projection) container images all
go through ``KeyValueReconciler.reconcile``. Keys under the reserved prefix
belong to the syncer: a tenant can neither set them nor remove them.
"""

from __future__ import annotations

from collections.abc import Mapping

from vcsync.constants import RESERVED_KEY_PREFIX
from vcsync.reconcile.equality import maps_equal


class KeyValueReconciler:
    """Merges a virtual string map onto a physical one."""

    def __init__(self, reserved_prefix: str = RESERVED_KEY_PREFIX) -> None:
        if not reserved_prefix:
            raise ValueError("reserved_prefix must not be empty")
        self._reserved_prefix = reserved_prefix

    @property
    def reserved_prefix(self) -> str:
        return self._reserved_prefix

    def is_reserved(self, key: str) -> bool:
        return key.startswith(self._reserved_prefix)

    def reconcile(
        self,
        physical: Mapping[str, str] | None,
        virtual: Mapping[str, str] | None,
    ) -> tuple[dict[str, str] | None, bool]:
        """Return ``(None, True)`` when in sync, else ``(merged, False)``.

        The merged map starts from *physical*, drops non-reserved keys the
        virtual map no longer has, and overlays non-reserved keys the virtual
        map adds or changes.
        """
        physical = physical or {}
        virtual = virtual or {}

        more_or_diff = {
            k: v
            for k, v in virtual.items()
            if not self.is_reserved(k) and (k not in physical or physical[k] != v)
        }
        # Only membership matters here; the values are never read.
        less = {k for k in physical if not self.is_reserved(k) and k not in virtual}

        if not more_or_diff and not less:
            return None, True

        merged = {k: v for k, v in physical.items() if k not in less}
        merged.update(more_or_diff)
        return merged, False


def reconcile_plain(
    physical: Mapping[str, str] | None,
    virtual: Mapping[str, str] | None,
) -> tuple[dict[str, str] | None, bool]:
    """Plain map comparison with no reserved-key filtering.

    Returns a fresh copy of *virtual* on difference, or ``(None, False)`` when
    the virtual map is absent: there is nothing to propagate in that case.
    """
    if maps_equal(physical, virtual):
        return None, True
    if virtual is None:
        return None, False
    return dict(virtual), False
