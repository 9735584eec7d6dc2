from __future__ import annotations

from pathlib import Path

import pytest

from exocomp.config import ConfigManager, Settings, SitelinkPropertySyncConfig, load_settings
from exocomp.errors import InitializationError

CONFIG = """
name: exocomp
modules:
  sitelink-property-sync:
    enabled: true
    property: p31
    sitelink: enwiki
    dry_run: true
"""


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_module_config(tmp_path: Path) -> None:
    manager = ConfigManager(write_config(tmp_path, CONFIG))

    module_config = manager.module_config("sitelink-property-sync")

    assert module_config.property == "P31"
    assert module_config.sitelink == "enwiki"
    assert module_config.dry_run is True
    assert module_config.limit == 500


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(InitializationError, match="not found"):
        ConfigManager(tmp_path / "absent.yml").load_config()


def test_invalid_yaml(tmp_path: Path) -> None:
    manager = ConfigManager(write_config(tmp_path, "modules: [unclosed"))
    with pytest.raises(InitializationError, match="Invalid YAML"):
        manager.load_config()


def test_invalid_property_id(tmp_path: Path) -> None:
    manager = ConfigManager(write_config(tmp_path, CONFIG.replace("p31", "instance of")))
    with pytest.raises(InitializationError, match="Invalid configuration"):
        manager.load_config()


def test_disabled_or_absent_module(tmp_path: Path) -> None:
    manager = ConfigManager(write_config(tmp_path, CONFIG.replace("enabled: true", "enabled: false")))
    with pytest.raises(InitializationError, match="not enabled"):
        manager.module_config("sitelink-property-sync")
    with pytest.raises(InitializationError):
        manager.module_config("other")


def test_module_defaults() -> None:
    config = SitelinkPropertySyncConfig()
    assert (config.property, config.sitelink, config.dry_run) == ("P42", "wikidata", False)


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("EXOCOMP_WIKIBASE_URL", "https://wiki.example.org/")
    monkeypatch.setenv("EXOCOMP_BOT_USERNAME", "Exocomp")
    monkeypatch.setenv("EXOCOMP_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.bot_username == "Exocomp"
    assert settings.log_level == "debug"
    assert settings.mediawiki_api_url == "https://wiki.example.org/w/api.php"


def test_settings_from_env_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("EXOCOMP_BOT_PASSWORD", raising=False)
    (tmp_path / ".env").write_text('EXOCOMP_BOT_PASSWORD="s3cret"\n', encoding="utf-8")

    assert load_settings().bot_password == "s3cret"


def test_invalid_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("EXOCOMP_LOG_LEVEL", "info")
    with pytest.raises(InitializationError):
        load_settings(log_level=["not", "a", "string"])


def test_missing_credentials(tmp_path: Path) -> None:
    manager = ConfigManager(write_config(tmp_path, CONFIG))
    settings = Settings(_env_file=None, bot_username="", bot_password="")

    with pytest.raises(InitializationError, match="credentials"):
        manager.get_wikibase_integrator(settings)


def test_failed_login(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def refuse(**kwargs):
        raise RuntimeError("Login failed: WrongPass")

    monkeypatch.setattr("exocomp.config.manager.Login", refuse)
    manager = ConfigManager(write_config(tmp_path, CONFIG))
    settings = Settings(_env_file=None, bot_username="Exocomp", bot_password="wrong")

    with pytest.raises(InitializationError, match="WrongPass"):
        manager.get_wikibase_integrator(settings)
