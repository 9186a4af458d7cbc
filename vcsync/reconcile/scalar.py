"""Optional scalar comparison (e.g. spec.activeDeadlineSeconds)."""

from __future__ import annotations


class ScalarFieldReconciler:
    """Compares two optional integers. The returned value always comes from the virtual side."""

    def reconcile(self, physical: int | None, virtual: int | None) -> tuple[int | None, bool]:
        if physical is None and virtual is None:
            return None, True
        if physical is not None and virtual is not None:
            return virtual, physical == virtual
        return virtual, False
