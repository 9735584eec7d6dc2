from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from exocomp.errors import InitializationError


class Settings(BaseSettings):
    """Connection, credential and logging settings sourced from .env and environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXOCOMP_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    wikibase_url: str = "https://data.wikitrek.org"
    api_path: str = "/w/api.php"

    bot_username: str = ""
    bot_password: str = ""
    user_agent: str = "ExocompBot/1.0 (https://data.wikitrek.org)"

    log_path: str = "logs"
    log_level: str = "info"

    @property
    def mediawiki_api_url(self) -> str:
        return self.wikibase_url.rstrip("/") + "/" + self.api_path.lstrip("/")


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, raising InitializationError when invalid."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise InitializationError(f"Invalid settings: {e}") from e
