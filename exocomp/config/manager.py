"""Configuration manager for loading and validating project settings."""

import yaml
from pathlib import Path
from pydantic import ValidationError
from wikibaseintegrator import WikibaseIntegrator
from wikibaseintegrator.wbi_config import config as wbi_config
from wikibaseintegrator.wbi_login import Login

from exocomp.errors import InitializationError
from .models import ProjectConfig, SitelinkPropertySyncConfig
from .settings import Settings


class ConfigManager:
    """Manages project configuration loading and validation."""

    def __init__(self, config_path: str | Path) -> None:
        """Initialize configuration manager.

        Args:
            config_path: Path to the project configuration file
        """
        self.config_path = Path(config_path)
        self._config: ProjectConfig | None = None
        self._wbi: WikibaseIntegrator | None = None

    def load_config(self) -> ProjectConfig:
        """Load and validate project configuration.

        Returns:
            Validated project configuration

        Raises:
            InitializationError: If the file is missing, is invalid YAML
                or doesn't match the schema
        """
        if not self.config_path.exists():
            raise InitializationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
            self._config = ProjectConfig(**config_data)
        except yaml.YAMLError as e:
            raise InitializationError(f"Invalid YAML in {self.config_path}: {e}") from e
        except (ValidationError, TypeError) as e:
            raise InitializationError(f"Invalid configuration in {self.config_path}: {e}") from e

        return self._config

    @property
    def config(self) -> ProjectConfig:
        """Get the loaded configuration (loads if not already loaded)."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def module_config(self, name: str) -> SitelinkPropertySyncConfig:
        """Get the configuration of an enabled module.

        Raises:
            InitializationError: If the module is absent or disabled
        """
        module_config = self.config.modules.get(name)
        if module_config is None or not module_config.enabled:
            raise InitializationError(f"Module '{name}' is not enabled in configuration")
        return module_config

    def get_wikibase_integrator(self, settings: Settings) -> WikibaseIntegrator:
        """Get a WikibaseIntegrator instance logged in as the bot.

        Raises:
            InitializationError: If credentials are missing or the login fails
        """
        if self._wbi is None:
            if not settings.wikibase_url:
                raise InitializationError("Wikibase URL not configured")
            if not settings.bot_username or not settings.bot_password:
                raise InitializationError(
                    "Bot credentials not configured. Set EXOCOMP_BOT_USERNAME and EXOCOMP_BOT_PASSWORD"
                )

            wbi_config['MEDIAWIKI_API_URL'] = settings.mediawiki_api_url
            wbi_config['WIKIBASE_URL'] = settings.wikibase_url
            wbi_config['USER_AGENT'] = settings.user_agent

            try:
                login = Login(
                    user=settings.bot_username,
                    password=settings.bot_password,
                    mediawiki_api_url=settings.mediawiki_api_url,
                    user_agent=settings.user_agent,
                )
            except Exception as e:
                raise InitializationError(f"Failed to authenticate bot: {e}") from e

            self._wbi = WikibaseIntegrator(login=login)

        return self._wbi
