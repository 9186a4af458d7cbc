"""Per-kind mutability policy structures.

A ``KindPolicy`` lists the only fields of a kind that may flow from the
virtual object to the physical one. Every field not named by one of its
``FieldRule`` entries is left exactly as the physical object has it.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

Manifest = Mapping[str, Any]


class CompareMode(StrEnum):
    """How a field is compared and written back."""

    METADATA = "metadata"
    SCALAR = "scalar"
    PREFIXED_MAP = "prefixed_map"
    PLAIN_MAP = "plain_map"
    BINARY_MAP = "binary_map"
    NAMED_LIST = "named_list"
    WHOLESALE = "wholesale"


@dataclass(frozen=True)
class FieldRule:
    """One mutable field of a kind.

    ``skip_if`` is evaluated against the virtual object; when it returns True
    the field is treated as in sync. ``key_field``/``value_field`` only apply
    to NAMED_LIST fields.
    """

    path: tuple[str, ...]
    mode: CompareMode
    skip_if: Callable[[Manifest], bool] | None = None
    key_field: str = "name"
    value_field: str = "image"

    @property
    def dotted(self) -> str:
        return ".".join(self.path)


@dataclass(frozen=True)
class KindPolicy:
    """The mutable field set of one resource kind."""

    kind: str
    fields: tuple[FieldRule, ...]
