from __future__ import annotations

import copy
from typing import Any

from exocomp.backend.interface import EntityStore, EntityView


def make_entity(entity_id: str, sitelink: str | None = None, prop: str | None = None,
                site: str = "wikidata", property_id: str = "P42") -> EntityView:
    entity: dict[str, Any] = {"id": entity_id, "type": "item", "sitelinks": {}, "claims": {}}
    if sitelink is not None:
        entity["sitelinks"][site] = {"site": site, "title": sitelink, "badges": []}
    if prop is not None:
        entity["claims"][property_id] = [statement(property_id, prop)]
    return entity


def statement(property_id: str, value: Any, snaktype: str = "value") -> dict[str, Any]:
    mainsnak: dict[str, Any] = {"snaktype": snaktype, "property": property_id}
    if snaktype == "value":
        mainsnak["datavalue"] = {"value": value, "type": "string"}
    return {"mainsnak": mainsnak, "type": "statement", "rank": "normal"}


class FakeEntityStore(EntityStore):
    """In-memory entity store recording every write."""

    def __init__(self, entities: dict[str, EntityView] | None = None, site: str = "wikidata",
                 property_id: str = "P42") -> None:
        self.entities = entities or {}
        self.site = site
        self.property_id = property_id
        self.writes: list[tuple[str, str, str, str]] = []
        self.fail_sitelink: set[str] = set()
        self.fail_property: set[str] = set()
        self.raise_on_get: set[str] = set()
        self.listed_with: list[int] = []

    def add(self, entity_id: str, sitelink: str | None = None, prop: str | None = None) -> None:
        self.entities[entity_id] = make_entity(entity_id, sitelink, prop, self.site, self.property_id)

    def list_entity_ids(self, limit: int) -> list[str]:
        self.listed_with.append(limit)
        return list(self.entities)[:limit]

    def get_entity(self, entity_id: str) -> EntityView | None:
        if entity_id in self.raise_on_get:
            raise RuntimeError("connection reset")
        entity = self.entities.get(entity_id)
        return copy.deepcopy(entity) if entity is not None else None

    def set_sitelink(self, entity_id: str, site: str, title: str) -> bool:
        self.writes.append(("sitelink", entity_id, site, title))
        if entity_id in self.fail_sitelink:
            return False
        self.entities[entity_id]["sitelinks"][site] = {"site": site, "title": title, "badges": []}
        return True

    def set_property_value(self, entity_id: str, property_id: str, value: str) -> bool:
        self.writes.append(("property", entity_id, property_id, value))
        if entity_id in self.fail_property:
            return False
        self.entities[entity_id]["claims"][property_id] = [statement(property_id, value)]
        return True


