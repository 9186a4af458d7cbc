"""Shared object factories for vcsync tests.

Objects are built in API wire shape, the same way a watch event delivers
them once decoded from JSON.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from vcsync.constants import LABEL_CLUSTER, LABEL_NAMESPACE, LABEL_UID
from vcsync.reconcile.kinds import default_reconciler

SUPER_LABELS = {
    LABEL_CLUSTER: "tenant-a-7f3e",
    LABEL_NAMESPACE: "default",
    LABEL_UID: "0b6d3b71-4f38-4f0c-9d4e-5a1f2c3d4e5f",
}


def make_metadata(
    name: str = "web-0",
    namespace: str = "default",
    labels: dict[str, str] | None = None,
    annotations: dict[str, str] | None = None,
    **extra: Any,
) -> dict[str, Any]:
    meta: dict[str, Any] = {
        "name": name,
        "namespace": namespace,
        "uid": "5e1c8f2a-1111-2222-3333-444455556666",
        "resourceVersion": "1024",
    }
    if labels is not None:
        meta["labels"] = labels
    if annotations is not None:
        meta["annotations"] = annotations
    meta.update(extra)
    return meta


def make_pod(
    images: dict[str, str] | None = None,
    init_images: dict[str, str] | None = None,
    labels: dict[str, str] | None = None,
    annotations: dict[str, str] | None = None,
    active_deadline_seconds: int | None = None,
    **meta: Any,
) -> dict[str, Any]:
    images = images if images is not None else {"app": "nginx:1.25"}
    spec: dict[str, Any] = {
        "containers": [{"name": n, "image": i, "ports": [{"containerPort": 80}]} for n, i in images.items()],
        "nodeName": "node-3",
        "restartPolicy": "Always",
    }
    if init_images:
        spec["initContainers"] = [{"name": n, "image": i} for n, i in init_images.items()]
    if active_deadline_seconds is not None:
        spec["activeDeadlineSeconds"] = active_deadline_seconds
    return {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": make_metadata(labels=labels, annotations=annotations, **meta),
        "spec": spec,
        "status": {"phase": "Running", "podIP": "10.0.3.17"},
    }


def make_config_map(
    data: dict[str, str] | None = None,
    binary_data: dict[str, bytes | None] | None = None,
    labels: dict[str, str] | None = None,
) -> dict[str, Any]:
    obj: dict[str, Any] = {
        "apiVersion": "v1",
        "kind": "ConfigMap",
        "metadata": make_metadata(name="app-config", labels=labels),
    }
    if data is not None:
        obj["data"] = data
    if binary_data is not None:
        obj["binaryData"] = binary_data
    return obj


def make_secret(
    data: dict[str, bytes | None] | None = None,
    string_data: dict[str, str] | None = None,
    secret_type: str = "Opaque",
    labels: dict[str, str] | None = None,
) -> dict[str, Any]:
    obj: dict[str, Any] = {
        "apiVersion": "v1",
        "kind": "Secret",
        "metadata": make_metadata(name="db-credentials", labels=labels),
        "type": secret_type,
    }
    if data is not None:
        obj["data"] = data
    if string_data is not None:
        obj["stringData"] = string_data
    return obj


def make_endpoints(
    ips: list[str] | None = None,
    port: int = 8080,
    labels: dict[str, str] | None = None,
) -> dict[str, Any]:
    obj: dict[str, Any] = {
        "apiVersion": "v1",
        "kind": "Endpoints",
        "metadata": make_metadata(name="web", labels=labels),
    }
    if ips is not None:
        obj["subsets"] = [
            {
                "addresses": [{"ip": ip, "targetRef": {"kind": "Pod", "name": f"web-{i}"}} for i, ip in enumerate(ips)],
                "ports": [{"name": "http", "port": port, "protocol": "TCP"}],
            }
        ]
    return obj


def superize(obj: dict[str, Any]) -> dict[str, Any]:
    """Return a physical copy of a tenant object, as the syncer would create it."""
    physical = copy.deepcopy(obj)
    meta = physical["metadata"]
    meta["namespace"] = "tenant-a-7f3e-default"
    meta["labels"] = {**(meta.get("labels") or {}), **SUPER_LABELS}
    meta["ownerReferences"] = [{"kind": "Namespace", "name": "tenant-a-7f3e-default"}]
    meta["finalizers"] = ["tenancy.x-k8s.io/cleanup"]
    return physical


@pytest.fixture(autouse=True)
def _fresh_default_reconciler():
    """The module-level engine reads the environment once; reset it per test."""
    default_reconciler.cache_clear()
    yield
    default_reconciler.cache_clear()
