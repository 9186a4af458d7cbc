"""Fixtures for control-loop integration tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from vcsync.models.policy import Manifest
from vcsync.reconcile.engine import ResourceReconciler


class FakeSuperCluster:
    """In-memory stand-in for the super cluster API: stores objects and counts writes."""

    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], dict[str, Any]] = {}
        self.updates = 0

    def put(self, obj: dict[str, Any]) -> None:
        self.objects[(obj["kind"], obj["metadata"]["name"])] = obj

    def get(self, kind: str, name: str) -> dict[str, Any]:
        return self.objects[(kind, name)]

    def update(self, obj: dict[str, Any]) -> None:
        self.updates += 1
        self.put(obj)


def run_tick(
    cluster: FakeSuperCluster,
    reconciler: ResourceReconciler,
    tenant_objects: list[Manifest],
) -> int:
    """One pass of the syncer's update loop; returns the number of writes."""
    writes = 0
    for virtual in tenant_objects:
        physical = cluster.get(virtual["kind"], virtual["metadata"]["name"])
        updated = reconciler.reconcile(physical, virtual)
        if updated is not None:
            cluster.update(updated)
            writes += 1
    return writes


@pytest.fixture()
def cluster() -> FakeSuperCluster:
    return FakeSuperCluster()


@pytest.fixture()
def reconciler() -> ResourceReconciler:
    return ResourceReconciler()


@pytest.fixture()
def tick(cluster: FakeSuperCluster, reconciler: ResourceReconciler) -> Callable[[list[Manifest]], int]:
    return lambda objs: run_tick(cluster, reconciler, objs)
