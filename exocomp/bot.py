"""Host that registers bot modules and runs them by name."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from exocomp.errors import UnknownModuleError
from exocomp.modules.models import ModuleMetadata, RunStatistics


@runtime_checkable
class BotModule(Protocol):
    """What every bot module provides."""

    stats: RunStatistics

    @property
    def metadata(self) -> ModuleMetadata: ...

    def execute(self) -> RunStatistics: ...


class Bot:
    """Keeps registered modules by name and runs them."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.log = logger or logging.getLogger(__name__)
        self.modules: dict[str, BotModule] = {}

    def register_module(self, name: str, module: BotModule) -> None:
        self.modules[name] = module
        self.log.debug(f"Module registered: {name}")

    def run_module(self, name: str) -> RunStatistics:
        """Run one module and return its statistics.

        Raises:
            UnknownModuleError: If no module is registered under ``name``
        """
        if name not in self.modules:
            raise UnknownModuleError(f"Module not found: {name}")

        module = self.modules[name]
        self.log.info(f"Running module: {name}")
        module.execute()

        stats = module.stats
        self.log.info(f"Module {name} completed with stats: {stats.as_dict()}")
        return stats

    def run_all(self) -> dict[str, RunStatistics]:
        """Run every registered module; a failing module doesn't stop the others."""
        results: dict[str, RunStatistics] = {}
        if not self.modules:
            self.log.warning("No modules registered")
            return results

        for name in self.modules:
            try:
                results[name] = self.run_module(name)
            except Exception as e:
                self.log.error(f"Error running module {name}: {e}")

        return results
