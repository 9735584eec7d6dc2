"""Error types raised and recorded by the bot."""

from __future__ import annotations


class ExocompError(Exception):
    """Base class for bot errors."""


class InitializationError(ExocompError):
    """Configuration, credentials or the wiki connection are unusable."""


class UnknownModuleError(ExocompError):
    """Raised when a module name is not registered."""


class FetchError(ExocompError):
    """An entity could not be retrieved."""

    def __init__(self, entity_id: str, message: str | None = None) -> None:
        self.entity_id = entity_id
        super().__init__(message or f"Entity {entity_id} not found")


class WriteError(ExocompError):
    """A sitelink or property write failed."""

    def __init__(self, entity_id: str, side: str, message: str | None = None) -> None:
        self.entity_id = entity_id
        self.side = side
        super().__init__(message or f"Failed to update {side} for {entity_id}")
