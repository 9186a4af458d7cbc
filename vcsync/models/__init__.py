"""Core data structures for vcsync."""

from vcsync.models.config import LogConfig, MetricsConfig, ReconcilerConfig, SyncerConfig
from vcsync.models.policy import CompareMode, FieldRule, KindPolicy, Manifest

__all__ = [
    "CompareMode",
    "FieldRule",
    "KindPolicy",
    "LogConfig",
    "Manifest",
    "MetricsConfig",
    "ReconcilerConfig",
    "SyncerConfig",
]
