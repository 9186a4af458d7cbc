"""Prometheus counters for reconciliation outcomes.

Counters are registered on the default registry; the hosting control loop
decides whether and where to expose them.
"""

from __future__ import annotations

from prometheus_client import Counter

reconcile_total = Counter(
    "vcsync_reconcile_total",
    "Reconcile calls by resource kind and outcome (update, in_sync).",
    ["kind", "outcome"],
)

field_drift_total = Counter(
    "vcsync_field_drift_total",
    "Mutable fields found out of sync, by resource kind and field path.",
    ["kind", "field"],
)
