"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from vcsync.constants import RESERVED_KEY_PREFIX
from vcsync.models.config import (
    LogConfig,
    MetricsConfig,
    ReconcilerConfig,
    SyncerConfig,
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"VCSYNC_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _validate_reserved_prefix(value: str) -> str:
    # An empty prefix would match every key and freeze all labels.
    if not value.strip():
        raise ValueError("Reserved key prefix must not be empty")
    return value.strip()


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    valid = {"json", "console"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log format: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> SyncerConfig:
    """Load configuration from VCSYNC_* environment variables."""
    return SyncerConfig(
        reconciler=ReconcilerConfig(
            reserved_prefix=_validate_reserved_prefix(_env("RESERVED_PREFIX", RESERVED_KEY_PREFIX)),
        ),
        metrics=MetricsConfig(
            enabled=_env_bool("METRICS_ENABLED", True),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
