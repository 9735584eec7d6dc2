"""Bot modules and the registry of modules available to the CLI."""

from typing import Dict, Type

from .models import ModuleMetadata, RunStatistics, Side, Skipped, SkipReason, Synced, Error, SyncOutcome
from .sitelink_property_sync import SitelinkPropertySync, decide

# Module name -> class built with (store, config, dry_run, logger)
AVAILABLE_MODULES: Dict[str, Type[SitelinkPropertySync]] = {
    SitelinkPropertySync.name: SitelinkPropertySync,
}

__all__ = [
    "AVAILABLE_MODULES",
    "Error",
    "ModuleMetadata",
    "RunStatistics",
    "Side",
    "SitelinkPropertySync",
    "SkipReason",
    "Skipped",
    "Synced",
    "SyncOutcome",
    "decide",
]
