from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

# An entity as returned by wbgetentities (sitelinks and claims)
EntityView = Dict[str, Any]


class EntityStore(ABC):
    """Abstract base class for the Wikibase entity stores used by the bot modules."""

    @abstractmethod
    def list_entity_ids(self, limit: int) -> List[str]:
        """Return up to ``limit`` item ids. Ordering is not guaranteed."""
        pass

    @abstractmethod
    def get_entity(self, entity_id: str) -> Optional[EntityView]:
        """Fetch an entity, or None when it is missing or could not be retrieved."""
        pass

    @abstractmethod
    def set_sitelink(self, entity_id: str, site: str, title: str) -> bool:
        """Set the sitelink of an entity for ``site``."""
        pass

    @abstractmethod
    def set_property_value(self, entity_id: str, property_id: str, value: str) -> bool:
        """Replace the value of ``property_id``, encoded for the property's datatype."""
        pass


def sitelink_value(entity: EntityView, site: str) -> Optional[str]:
    """Title of the entity's sitelink to ``site``, or None."""
    sitelink = (entity.get('sitelinks') or {}).get(site) or {}
    return sitelink.get('title') or None


def property_value(entity: EntityView, property_id: str) -> Optional[str]:
    """Value of the first valued statement for ``property_id``, as a string.

    Entity references yield their id (``Q42``), rebuilt from ``numeric-id``
    in the legacy serialization; novalue and somevalue
    snaks count as absent.
    """
    statements = (entity.get('claims') or {}).get(property_id) or []
    for statement in statements:
        mainsnak = statement.get('mainsnak') or {}
        if mainsnak.get('snaktype', 'value') != 'value':
            continue
        value = (mainsnak.get('datavalue') or {}).get('value')
        if value is None or value == '':
            continue
        if isinstance(value, dict):
            if 'id' not in value and 'numeric-id' in value:
                prefix = 'P' if value.get('entity-type') == 'property' else 'Q'
                return f"{prefix}{value['numeric-id']}"
            for key in ('id', 'text', 'time', 'amount'):
                if key in value:
                    return str(value[key])
            continue
        return str(value)
    return None
