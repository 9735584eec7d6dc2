"""Outcome and statistics types of the sync modules."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum

from exocomp.errors import FetchError, WriteError


class Side(str, Enum):
    SITELINK = "sitelink"
    PROPERTY = "property"


class SkipReason(str, Enum):
    NEITHER_PRESENT = "neither_present"
    ALREADY_EQUAL = "already_equal"


@dataclass(frozen=True)
class Decision:
    """What to do with one entity: skip it, or write ``target`` to ``sides``."""
    skip: SkipReason | None = None
    target: str | None = None
    sides: frozenset[Side] = frozenset()


@dataclass(frozen=True)
class Skipped:
    reason: SkipReason


@dataclass(frozen=True)
class Synced:
    target: str
    sides_updated: frozenset[Side] = frozenset()
    dry_run: bool = False


@dataclass(frozen=True)
class Error:
    cause: FetchError | WriteError


SyncOutcome = Skipped | Synced | Error


@dataclass
class RunStatistics:
    """Counters of one run. ``checked == synced + skipped + errors``."""
    checked: int = 0
    synced: int = 0
    skipped: int = 0
    errors: int = 0

    def record(self, outcome: SyncOutcome) -> None:
        self.checked += 1
        if isinstance(outcome, Synced):
            self.synced += 1
        elif isinstance(outcome, Skipped):
            self.skipped += 1
        else:
            self.errors += 1

    @property
    def total(self) -> int:
        return self.synced + self.skipped + self.errors

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass
class ModuleMetadata:
    name: str
    description: str
    version: str = "1.0.0"
    author: str = "WikiTrek"
