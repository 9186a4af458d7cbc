"""Mutable field sets of the supported kinds and their entry points.

Pod:
    metadata, spec.activeDeadlineSeconds, spec.containers[*].image,
    spec.initContainers[*].image
ConfigMap:
    metadata, data, binaryData
Secret:
    metadata, stringData, data (content skipped for service account tokens)
Endpoints:
    metadata, subsets (replaced wholesale)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from vcsync.config import load_config
from vcsync.constants import SECRET_TYPE_SERVICE_ACCOUNT_TOKEN
from vcsync.models.policy import CompareMode, FieldRule, KindPolicy, Manifest
from vcsync.reconcile.engine import ResourceReconciler

_METADATA = FieldRule(("metadata",), CompareMode.METADATA)


def is_service_account_token(secret: Manifest) -> bool:
    """Token secrets are populated by the token controller and always count as in sync."""
    return secret.get("type") == SECRET_TYPE_SERVICE_ACCOUNT_TOKEN


POD_POLICY = KindPolicy(
    kind="Pod",
    fields=(
        _METADATA,
        FieldRule(("spec", "activeDeadlineSeconds"), CompareMode.SCALAR),
        FieldRule(("spec", "containers"), CompareMode.NAMED_LIST),
        FieldRule(("spec", "initContainers"), CompareMode.NAMED_LIST),
    ),
)

CONFIG_MAP_POLICY = KindPolicy(
    kind="ConfigMap",
    fields=(
        _METADATA,
        FieldRule(("data",), CompareMode.PLAIN_MAP),
        FieldRule(("binaryData",), CompareMode.BINARY_MAP),
    ),
)

SECRET_POLICY = KindPolicy(
    kind="Secret",
    fields=(
        _METADATA,
        FieldRule(("stringData",), CompareMode.PLAIN_MAP, skip_if=is_service_account_token),
        FieldRule(("data",), CompareMode.BINARY_MAP, skip_if=is_service_account_token),
    ),
)

ENDPOINTS_POLICY = KindPolicy(
    kind="Endpoints",
    fields=(
        _METADATA,
        FieldRule(("subsets",), CompareMode.WHOLESALE),
    ),
)

DEFAULT_POLICIES: tuple[KindPolicy, ...] = (
    POD_POLICY,
    CONFIG_MAP_POLICY,
    SECRET_POLICY,
    ENDPOINTS_POLICY,
)


@lru_cache(maxsize=1)
def default_reconciler() -> ResourceReconciler:
    """Engine configured from the VCSYNC_* environment, built on first use."""
    config = load_config()
    return ResourceReconciler(config.reconciler, metrics_enabled=config.metrics.enabled)


def reconcile(physical: Manifest, virtual: Manifest) -> dict[str, Any] | None:
    return default_reconciler().reconcile(physical, virtual)


def reconcile_pod(physical: Manifest, virtual: Manifest) -> dict[str, Any] | None:
    return default_reconciler().reconcile_kind("Pod", physical, virtual)


def reconcile_config_map(physical: Manifest, virtual: Manifest) -> dict[str, Any] | None:
    return default_reconciler().reconcile_kind("ConfigMap", physical, virtual)


def reconcile_secret(physical: Manifest, virtual: Manifest) -> dict[str, Any] | None:
    return default_reconciler().reconcile_kind("Secret", physical, virtual)


def reconcile_endpoints(physical: Manifest, virtual: Manifest) -> dict[str, Any] | None:
    return default_reconciler().reconcile_kind("Endpoints", physical, virtual)
