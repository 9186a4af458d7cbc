"""vcsync: selective reconciliation of tenant (virtual) objects onto the super cluster."""

from vcsync.reconcile import (
    KindMismatchError,
    ResourceReconciler,
    UnsupportedKindError,
    reconcile_config_map,
    reconcile_endpoints,
    reconcile_pod,
    reconcile_secret,
)

__version__ = "0.1.0"

__all__ = [
    "KindMismatchError",
    "ResourceReconciler",
    "UnsupportedKindError",
    "__version__",
    "reconcile_config_map",
    "reconcile_endpoints",
    "reconcile_pod",
    "reconcile_secret",
]
