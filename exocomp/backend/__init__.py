from .interface import EntityStore, EntityView, property_value, sitelink_value
from .api import ApiBackend

__all__ = ["EntityStore", "EntityView", "ApiBackend", "property_value", "sitelink_value"]
