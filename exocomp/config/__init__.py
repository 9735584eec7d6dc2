"""Configuration management for Exocomp."""

from .manager import ConfigManager
from .models import ProjectConfig, SitelinkPropertySyncConfig
from .settings import Settings, load_settings

__all__ = [
    "ConfigManager",
    "ProjectConfig",
    "SitelinkPropertySyncConfig",
    "Settings",
    "load_settings",
]
