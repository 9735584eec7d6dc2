import logging
from typing import Dict, List, Optional

from wikibaseintegrator import WikibaseIntegrator
from wikibaseintegrator import wbi_helpers
from wikibaseintegrator.wbi_enums import ActionIfExists
from wikibaseintegrator.datatypes import (
    String, ExternalID, Item, URL, CommonsMedia
)

from .interface import EntityStore, EntityView

log = logging.getLogger(__name__)

# allpages returns at most 500 titles per request for bots without apihighlimits
PAGE_SIZE = 500


class ApiBackend(EntityStore):
    """Entity store using the WikibaseIntegrator API helpers."""

    def __init__(self, wbi: WikibaseIntegrator, summary: str = "Updated via Exocomp", namespace: int = 0) -> None:
        self.wbi = wbi
        self.summary = summary
        self.namespace = namespace
        # Cache for property datatypes to avoid repeated lookups
        self.datatypes_by_property: Dict[str, str] = {}

    def list_entity_ids(self, limit: int = 500) -> List[str]:
        entity_ids: List[str] = []
        query = {
            'action': 'query',
            'list': 'allpages',
            'apnamespace': str(self.namespace),
            'aplimit': min(limit, PAGE_SIZE),
            'format': 'json',
        }

        try:
            while len(entity_ids) < limit:
                result = wbi_helpers.mediawiki_api_call_helper(
                    data=dict(query), login=self.wbi.login, allow_anonymous=True
                )
                pages = result.get('query', {}).get('allpages')
                if pages is None:
                    break

                for page in pages:
                    # Items outside the main namespace are titled "Item:Q1"
                    entity_ids.append(page['title'].split(':')[-1])

                if 'continue' not in result or 'apcontinue' not in result['continue']:
                    break
                query.update(result['continue'])
        except Exception as e:
            log.error(f"list_entity_ids(): {e}")
            return []

        return entity_ids[:limit]

    def get_entity(self, entity_id: str) -> Optional[EntityView]:
        try:
            result = wbi_helpers.mediawiki_api_call_helper(
                data={
                    'action': 'wbgetentities',
                    'ids': entity_id,
                    'props': 'sitelinks|claims',
                    'format': 'json',
                },
                login=self.wbi.login,
                allow_anonymous=True,
            )
        except Exception as e:
            log.error(f"get_entity({entity_id}): {e}")
            return None

        entity = result.get('entities', {}).get(entity_id)
        if not entity or 'missing' in entity:
            return None
        return entity

    def set_sitelink(self, entity_id: str, site: str, title: str) -> bool:
        try:
            wbi_helpers.mediawiki_api_call_helper(
                data={
                    'action': 'wbsetsitelink',
                    'id': entity_id,
                    'linksite': site,
                    'linktitle': title,
                    'summary': self.summary,
                    'format': 'json',
                },
                login=self.wbi.login,
                is_bot=True,
            )
            return True
        except Exception as e:
            log.error(f"set_sitelink({entity_id}): {e}")
            return False

    def set_property_value(self, entity_id: str, property_id: str, value: str) -> bool:
        try:
            claim = self._create_claim(property_id, value)
            item = self.wbi.item.get(entity_id=entity_id)
            item.add_claims([claim], ActionIfExists.REPLACE_ALL)
            item.write(login=self.wbi.login, summary=self.summary, is_bot=True)
            return True
        except Exception as e:
            log.error(f"set_property_value({entity_id}): {e}")
            return False

    def get_property_datatype(self, property_id: str) -> str:
        """Declared datatype of a property, e.g. ``wikibase-item``."""
        if property_id not in self.datatypes_by_property:
            prop = self.wbi.property.get(entity_id=property_id)
            datatype = prop.datatype
            self.datatypes_by_property[property_id] = str(getattr(datatype, 'value', datatype))
        return self.datatypes_by_property[property_id]

    def _create_claim(self, property_id: str, value: str):
        match self.get_property_datatype(property_id):
            case 'wikibase-item':
                # TODO: resolve labels to item ids so title-like sitelink values can be written too
                return Item(prop_nr=property_id, value=value)
            case 'url':
                return URL(prop_nr=property_id, value=value)
            case 'commonsMedia':
                return CommonsMedia(prop_nr=property_id, value=value)
            case 'external-id':
                return ExternalID(prop_nr=property_id, value=value)
            case _:
                return String(prop_nr=property_id, value=value)
