"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from vcsync.constants import RESERVED_KEY_PREFIX


@dataclass(frozen=True)
class ReconcilerConfig:
    """Reconciler configuration."""

    reserved_prefix: str = RESERVED_KEY_PREFIX


@dataclass
class MetricsConfig:
    """Metrics configuration."""

    enabled: bool = True


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class SyncerConfig:
    """Top-level vcsync configuration."""

    reconciler: ReconcilerConfig = field(default_factory=ReconcilerConfig)
    metrics: MetricsConfig = field(default_factory=MetricsConfig)
    log: LogConfig = field(default_factory=LogConfig)
