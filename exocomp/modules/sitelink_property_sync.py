"""Keeps a sitelink and a property of every item in agreement.

For each item the sitelink title and the property value are compared. When
they differ the sitelink wins if it is present, otherwise the property value
is adopted, and only the side that does not hold the winning value is
written. Items are processed one at a time and a failure on one item never
stops the run.
"""

from __future__ import annotations

import logging
from typing import Iterable

from exocomp.backend.interface import EntityStore, property_value, sitelink_value
from exocomp.config.models import SitelinkPropertySyncConfig
from exocomp.errors import FetchError, WriteError
from .models import (
    Decision,
    Error,
    ModuleMetadata,
    RunStatistics,
    Side,
    Skipped,
    SkipReason,
    Synced,
    SyncOutcome,
)


def decide(sitelink: str | None, prop: str | None) -> Decision:
    """Decide whether an item needs syncing and which sides to write."""
    if sitelink is None and prop is None:
        return Decision(skip=SkipReason.NEITHER_PRESENT)
    if sitelink == prop:
        return Decision(skip=SkipReason.ALREADY_EQUAL)

    target = sitelink if sitelink is not None else prop
    sides = frozenset(
        side
        for side, current in ((Side.SITELINK, sitelink), (Side.PROPERTY, prop))
        if current != target
    )
    return Decision(target=target, sides=sides)


class SitelinkPropertySync:
    """Bot module synchronizing a sitelink with a property."""

    name = "sitelink-property-sync"
    METADATA = ModuleMetadata(
        name="SitelinkPropertySync",
        description="Synchronizes a sitelink with a specific property in Wikibase items",
    )

    def __init__(
        self,
        store: EntityStore,
        config: SitelinkPropertySyncConfig | None = None,
        dry_run: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        self.store = store
        self.config = config or SitelinkPropertySyncConfig()
        self.dry_run = dry_run or self.config.dry_run
        self.log = logger or logging.getLogger(__name__)
        self.stats = RunStatistics()
        self.outcomes: list[tuple[str, SyncOutcome]] = []

    @property
    def metadata(self) -> ModuleMetadata:
        return self.METADATA

    def execute(self) -> RunStatistics:
        """List items from the store and sync the configured property and sitelink."""
        property_id = self.config.property
        site = self.config.sitelink

        mode = "DRY-RUN" if self.dry_run else "LIVE"
        self.log.info(f"Starting sitelink-property sync [{mode}] (Property: {property_id}, Sitelink: {site})")

        entity_ids = self.store.list_entity_ids(self.config.limit)
        if not entity_ids:
            self.log.warning("No items found to process")
        else:
            self.log.info(f"Processing {len(entity_ids)} items")

        stats = self.run(entity_ids, property_id, site, self.dry_run)
        self.log.info(f"Sync complete. Stats: {stats.as_dict()}")
        return stats

    def run(
        self,
        entity_ids: Iterable[str],
        property_id: str,
        site: str,
        dry_run: bool | None = None,
    ) -> RunStatistics:
        """Sync each item in turn and return the statistics of this run."""
        if dry_run is None:
            dry_run = self.dry_run

        self.stats = RunStatistics()
        self.outcomes = []

        for entity_id in entity_ids:
            outcome = self.sync_entity(entity_id, property_id, site, dry_run)
            self.stats.record(outcome)
            self.outcomes.append((entity_id, outcome))

        return self.stats

    def sync_entity(self, entity_id: str, property_id: str, site: str, dry_run: bool = False) -> SyncOutcome:
        """Sync a single item. Never raises for per-item failures."""
        try:
            entity = self.store.get_entity(entity_id)
        except Exception as e:
            self.log.error(f"Error fetching {entity_id}: {e}")
            return Error(FetchError(entity_id, str(e)))

        if not entity:
            self.log.warning(f"Item {entity_id} not found")
            return Error(FetchError(entity_id))

        try:
            current_sitelink = sitelink_value(entity, site)
            current_property = property_value(entity, property_id)
        except Exception as e:
            self.log.error(f"Error reading {entity_id}: {e}")
            return Error(FetchError(entity_id, f"Unreadable entity {entity_id}: {e}"))

        self.log.debug(f"Item {entity_id}: sitelink={current_sitelink}, property={current_property}")

        decision = decide(current_sitelink, current_property)
        if decision.skip is SkipReason.NEITHER_PRESENT:
            self.log.debug(f"Item {entity_id} has neither sitelink nor property, skipping")
            return Skipped(decision.skip)
        if decision.skip is SkipReason.ALREADY_EQUAL:
            self.log.debug(f"Item {entity_id} already synchronized")
            return Skipped(decision.skip)

        if dry_run:
            self.log.info(
                f"[DRY-RUN] Would sync {entity_id}: sitelink={current_sitelink}, "
                f"property={current_property} -> {decision.target}"
            )
            return Synced(decision.target, dry_run=True)

        return self._apply(entity_id, property_id, site, decision)

    def _apply(self, entity_id: str, property_id: str, site: str, decision: Decision) -> SyncOutcome:
        # Each side is written independently, a failure does not undo the other
        updated: set[Side] = set()
        failed: list[Side] = []

        if Side.SITELINK in decision.sides:
            if self._write(self.store.set_sitelink, entity_id, site, decision.target):
                self.log.info(f"Updated sitelink for {entity_id} to '{decision.target}'")
                updated.add(Side.SITELINK)
            else:
                self.log.error(f"Failed to update sitelink for {entity_id}")
                failed.append(Side.SITELINK)

        if Side.PROPERTY in decision.sides:
            if self._write(self.store.set_property_value, entity_id, property_id, decision.target):
                self.log.info(f"Updated property {property_id} for {entity_id} to '{decision.target}'")
                updated.add(Side.PROPERTY)
            else:
                self.log.error(f"Failed to update property {property_id} for {entity_id}")
                failed.append(Side.PROPERTY)

        if updated:
            return Synced(decision.target, frozenset(updated))
        return Error(WriteError(entity_id, "+".join(side.value for side in failed)))

    def _write(self, setter, entity_id: str, key: str, value: str) -> bool:
        try:
            return bool(setter(entity_id, key, value))
        except Exception as e:
            self.log.error(f"Error writing {entity_id}: {e}")
            return False
