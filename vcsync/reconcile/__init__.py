"""Reconciliation of physical (super cluster) objects against virtual (tenant) objects.

Submodules:
    kv          -- Key/value maps with the reserved key namespace.
    binary      -- Binary payload maps.
    scalar      -- Optional integer fields.
    metadata    -- Object metadata (generateName, labels, annotations, clusterName).
    containers  -- Images of name-matched containers.
    equality    -- Semantic equality helpers.
    engine      -- Policy-driven ResourceReconciler.
    kinds       -- Policies for Pod, ConfigMap, Secret and Endpoints.
"""

from vcsync.reconcile.binary import BinaryMapReconciler
from vcsync.reconcile.containers import ContainerSetReconciler
from vcsync.reconcile.engine import KindMismatchError, ResourceReconciler, UnsupportedKindError
from vcsync.reconcile.kinds import (
    DEFAULT_POLICIES,
    default_reconciler,
    reconcile,
    reconcile_config_map,
    reconcile_endpoints,
    reconcile_pod,
    reconcile_secret,
)
from vcsync.reconcile.kv import KeyValueReconciler, reconcile_plain
from vcsync.reconcile.metadata import MetadataReconciler
from vcsync.reconcile.scalar import ScalarFieldReconciler

__all__ = [
    "DEFAULT_POLICIES",
    "BinaryMapReconciler",
    "ContainerSetReconciler",
    "KeyValueReconciler",
    "KindMismatchError",
    "MetadataReconciler",
    "ResourceReconciler",
    "ScalarFieldReconciler",
    "UnsupportedKindError",
    "default_reconciler",
    "reconcile",
    "reconcile_config_map",
    "reconcile_endpoints",
    "reconcile_plain",
    "reconcile_pod",
    "reconcile_secret",
]
