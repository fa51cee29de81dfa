"""Unit tests for configuration loading.

Tests cover:
- List parsing helpers
- YAML merging and directory loading
- Environment overlays and environment variable overrides
- Derived settings properties
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipeshare.core.config import Settings, StorageBackend
from recipeshare.core.config.settings import DatabaseSettings, parse_list
from recipeshare.core.config.yaml_source import (
    MultiYamlConfigSettingsSource,
    deep_merge,
    load_yaml_dir,
)


if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create a config tree with base files and a staging overlay."""
    base = tmp_path / "base"
    base.mkdir()
    (base / "app.yaml").write_text(
        "app:\n  name: FromYaml\n  debug: false\napi:\n  prefix: /api\n"
    )
    (base / "storage.yaml").write_text(
        "storage:\n  backend: memory\ndatabase:\n  host: base-db\n  port: 5432\n"
    )

    staging = tmp_path / "environments" / "staging"
    staging.mkdir(parents=True)
    (staging / "app.yaml").write_text(
        "app:\n  debug: true\nstorage:\n  backend: postgres\n"
    )
    return tmp_path


class TestParseList:
    """Tests for parse_list helper."""

    def test_splits_comma_separated_string(self) -> None:
        """Should split and strip a comma-separated string."""
        assert parse_list("a.com, b.com ,,c.com") == ["a.com", "b.com", "c.com"]

    def test_passes_lists_through(self) -> None:
        """Should return lists unchanged."""
        assert parse_list(["x", "y"]) == ["x", "y"]


class TestDeepMerge:
    """Tests for deep_merge."""

    def test_merges_nested_dicts(self) -> None:
        """Should merge nested keys instead of replacing the dict."""
        base = {"app": {"name": "A", "debug": False}, "other": 1}
        override = {"app": {"debug": True}}

        assert deep_merge(base, override) == {
            "app": {"name": "A", "debug": True},
            "other": 1,
        }

    def test_does_not_mutate_inputs(self) -> None:
        """Should leave the base dictionary untouched."""
        base = {"app": {"name": "A"}}

        deep_merge(base, {"app": {"name": "B"}})

        assert base == {"app": {"name": "A"}}

    def test_scalars_replace_dicts(self) -> None:
        """Should let a non-dict override replace a dict."""
        assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": None}


class TestLoadYamlDir:
    """Tests for load_yaml_dir."""

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Should return an empty dict for a missing directory."""
        assert load_yaml_dir(tmp_path / "nope") == {}

    def test_merges_files(self, config_dir: Path) -> None:
        """Should merge every YAML file in the directory."""
        data = load_yaml_dir(config_dir / "base")

        assert data["app"]["name"] == "FromYaml"
        assert data["database"]["host"] == "base-db"

    def test_empty_file(self, tmp_path: Path) -> None:
        """Should treat an empty file as an empty mapping."""
        (tmp_path / "empty.yaml").write_text("")

        assert load_yaml_dir(tmp_path) == {}


class TestMultiYamlConfigSettingsSource:
    """Tests for the layered YAML settings source."""

    def test_applies_environment_overlay(
        self,
        config_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should deep-merge the APP_ENV overlay onto the base files."""
        monkeypatch.setenv("APP_ENV", "staging")

        data = MultiYamlConfigSettingsSource(Settings, config_dir=config_dir)()

        assert data["app"] == {"name": "FromYaml", "debug": True}
        assert data["storage"]["backend"] == "postgres"
        assert data["database"]["host"] == "base-db"

    def test_unknown_environment_uses_base(
        self,
        config_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should fall back to base values when no overlay exists."""
        monkeypatch.setenv("APP_ENV", "qa")

        data = MultiYamlConfigSettingsSource(Settings, config_dir=config_dir)()

        assert data["app"]["debug"] is False


class TestSettings:
    """Tests for the Settings class."""

    def test_loads_yaml_through_config_dir(
        self,
        config_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should read YAML from CONFIG_DIR for the active environment."""
        monkeypatch.setenv("CONFIG_DIR", str(config_dir))
        monkeypatch.setenv("APP_ENV", "staging")

        settings = Settings()

        assert settings.APP_ENV == "staging"
        assert settings.app.name == "FromYaml"
        assert settings.app.debug is True
        assert settings.storage.backend == StorageBackend.POSTGRES

    def test_environment_variables_override_yaml(
        self,
        config_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Should let nested environment variables win over YAML."""
        monkeypatch.setenv("CONFIG_DIR", str(config_dir))
        monkeypatch.setenv("APP_ENV", "staging")
        monkeypatch.setenv("STORAGE__BACKEND", "memory")
        monkeypatch.setenv("API__CORS_ORIGINS", '["http://a.test", "http://b.test"]')

        settings = Settings()

        assert settings.storage.backend == StorageBackend.MEMORY
        assert settings.api.cors_origins == ["http://a.test", "http://b.test"]

    def test_init_values_win(self) -> None:
        """Should prefer values passed to the constructor."""
        settings = Settings(APP_ENV="production")

        assert settings.is_production
        assert not settings.is_development
        assert not settings.is_testing

    def test_rejects_unknown_backend(self) -> None:
        """Should refuse a storage backend that does not exist."""
        with pytest.raises(ValueError, match="backend"):
            Settings(storage={"backend": "mongo"})

    def test_database_url_without_password(self) -> None:
        """Should build a DSN that never includes the password."""
        settings = Settings(
            DATABASE_PASSWORD="hunter2",
            database=DatabaseSettings(
                host="db", port=5433, name="recipes", user="chef"
            ),
        )

        assert settings.database_url == "postgresql://chef@db:5433/recipes"
        assert "hunter2" not in settings.database_url

    def test_database_url_without_user(self) -> None:
        """Should omit the user part when no user is configured."""
        settings = Settings(database=DatabaseSettings(host="db", name="recipes"))

        assert settings.database_url == "postgresql://db:5432/recipes"
