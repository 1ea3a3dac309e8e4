"""Run options for a single zone synchronisation."""

from dataclasses import dataclass, field
from typing import FrozenSet


@dataclass(frozen=True)
class SyncOptions:
    """Options controlling one reconciliation run."""

    skip_confirmation: bool = False
    preserve_unknown: bool = False
    excluded_types: FrozenSet[str] = field(default_factory=frozenset)
    origin_override: str = ""
    auto_ttl: int = 0
    cache_ttl: int = 1
