"""Generic policy-driven reconciler.

``ResourceReconciler`` walks the ``FieldRule`` table of a kind, asks the
matching component whether the field drifted, and writes the drifted values
into a deep copy of the physical object. The copy is made on the first
confirmed change only; an object that is already in sync costs no copy.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Mapping
from typing import Any

from vcsync.models.config import ReconcilerConfig
from vcsync.models.policy import CompareMode, FieldRule, KindPolicy, Manifest
from vcsync.observability.logging import get_logger
from vcsync.observability.metrics import field_drift_total, reconcile_total
from vcsync.reconcile.binary import BinaryMapReconciler
from vcsync.reconcile.containers import ContainerSetReconciler
from vcsync.reconcile.equality import semantic_equal
from vcsync.reconcile.kv import KeyValueReconciler, reconcile_plain
from vcsync.reconcile.metadata import MetadataReconciler
from vcsync.reconcile.scalar import ScalarFieldReconciler

_logger = get_logger("reconcile.engine")

# Sentinel for "remove this field from the physical object".
_REMOVE = object()


class UnsupportedKindError(ValueError):
    """Raised when no policy is registered for a resource kind."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"No reconcile policy registered for kind '{kind}'")
        self.kind = kind


class KindMismatchError(ValueError):
    """Raised when the physical and virtual objects are of different kinds."""

    def __init__(self, physical_kind: str, virtual_kind: str) -> None:
        super().__init__(f"Cannot reconcile physical '{physical_kind}' with virtual '{virtual_kind}'")
        self.physical_kind = physical_kind
        self.virtual_kind = virtual_kind


def _lookup(obj: Manifest, path: tuple[str, ...]) -> Any:
    current: Any = obj
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
        if current is None:
            return None
    return current


def _assign(obj: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    parent = obj
    for key in path[:-1]:
        child = parent.get(key)
        if not isinstance(child, dict):
            if value is _REMOVE:
                return
            child = {}
            parent[key] = child
        parent = child
    if value is _REMOVE:
        parent.pop(path[-1], None)
    else:
        parent[path[-1]] = value


class _LazyCopy:
    """Deep-copies the source on the first write and collects later writes there."""

    def __init__(self, source: Manifest) -> None:
        self._source = source
        self._copy: dict[str, Any] | None = None

    def set(self, path: tuple[str, ...], value: Any) -> None:
        if self._copy is None:
            # A top-level write replaces that key, so its old value is not copied.
            skip = path[0] if len(path) == 1 else None
            self._copy = {k: None if k == skip else copy.deepcopy(v) for k, v in self._source.items()}
        _assign(self._copy, path, value)

    @property
    def result(self) -> dict[str, Any] | None:
        return self._copy


class ResourceReconciler:
    """Computes the updated physical object for any kind with a registered policy.

    Instances hold only configuration and policy tables and can be shared
    between threads.
    """

    def __init__(
        self,
        config: ReconcilerConfig | None = None,
        policies: Iterable[KindPolicy] | None = None,
        metrics_enabled: bool = True,
    ) -> None:
        self.config = config or ReconcilerConfig()
        self._kv = KeyValueReconciler(self.config.reserved_prefix)
        self._metadata = MetadataReconciler(self._kv)
        self._binary = BinaryMapReconciler()
        self._scalar = ScalarFieldReconciler()
        self._metrics_enabled = metrics_enabled
        self._policies: dict[str, KindPolicy] = {}
        if policies is None:
            from vcsync.reconcile.kinds import DEFAULT_POLICIES

            policies = DEFAULT_POLICIES
        for policy in policies:
            self.register(policy)

    def register(self, policy: KindPolicy) -> None:
        """Add or replace the policy for ``policy.kind``."""
        self._policies[policy.kind] = policy

    def policy_for(self, kind: str) -> KindPolicy:
        try:
            return self._policies[kind]
        except KeyError:
            raise UnsupportedKindError(kind) from None

    @property
    def kinds(self) -> list[str]:
        return sorted(self._policies)

    def reconcile(self, physical: Manifest, virtual: Manifest) -> dict[str, Any] | None:
        """Dispatch on the object kind and reconcile.

        The virtual object's ``kind`` wins; the physical one is used when the
        virtual object does not carry it.
        """
        virtual_kind = virtual.get("kind") or ""
        physical_kind = physical.get("kind") or ""
        if virtual_kind and physical_kind and virtual_kind != physical_kind:
            raise KindMismatchError(physical_kind, virtual_kind)
        return self.reconcile_kind(virtual_kind or physical_kind, physical, virtual)

    def reconcile_kind(self, kind: str, physical: Manifest, virtual: Manifest) -> dict[str, Any] | None:
        """Reconcile two objects under the policy of *kind*.

        Returns None when every mutable field is in sync, otherwise a deep copy
        of *physical* with the drifted fields taken from *virtual*.
        """
        policy = self.policy_for(kind)
        updated = _LazyCopy(physical)
        drifted: list[str] = []

        for rule in policy.fields:
            if rule.skip_if is not None and rule.skip_if(virtual):
                continue
            value = self._compare(rule, _lookup(physical, rule.path), _lookup(virtual, rule.path))
            if value is None:
                continue
            updated.set(rule.path, value)
            drifted.append(rule.dotted)

        self._observe(kind, physical, drifted)
        return updated.result

    def _compare(self, rule: FieldRule, physical: Any, virtual: Any) -> Any:
        """Return the value to write for *rule*, _REMOVE, or None when nothing changes."""
        mode = rule.mode
        if mode is CompareMode.METADATA:
            return self._metadata.reconcile(physical, virtual)

        if mode is CompareMode.SCALAR:
            value, equal = self._scalar.reconcile(physical, virtual)
            if equal:
                return None
            return _REMOVE if value is None else value

        if mode is CompareMode.PREFIXED_MAP:
            merged, equal = self._kv.reconcile(physical, virtual)
            return None if equal else merged

        if mode is CompareMode.PLAIN_MAP:
            # (None, False) means "differs, nothing to propagate": leave it.
            updated_map, _ = reconcile_plain(physical, virtual)
            return updated_map

        if mode is CompareMode.BINARY_MAP:
            updated_bin, _ = self._binary.reconcile(physical, virtual)
            return updated_bin

        if mode is CompareMode.NAMED_LIST:
            entries = ContainerSetReconciler(self._kv, rule.key_field, rule.value_field)
            return entries.reconcile(physical, virtual)

        if mode is CompareMode.WHOLESALE:
            if semantic_equal(physical, virtual):
                return None
            return _REMOVE if virtual is None else copy.deepcopy(virtual)

        raise ValueError(f"Unknown compare mode: {mode}")

    def _observe(self, kind: str, physical: Manifest, drifted: list[str]) -> None:
        if drifted:
            meta = physical.get("metadata") or {}
            _logger.debug(
                "update_required",
                kind=kind,
                namespace=meta.get("namespace", ""),
                name=meta.get("name", ""),
                fields=drifted,
            )
        if not self._metrics_enabled:
            return
        reconcile_total.labels(kind=kind, outcome="update" if drifted else "in_sync").inc()
        for name in drifted:
            field_drift_total.labels(kind=kind, field=name).inc()
