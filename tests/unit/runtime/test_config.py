"""Configuration loading, templating and the context override helpers."""

from pathlib import Path

import pytest

from src.inventory.runtime.config.config_data import ConfigData, DatabaseConfig
from src.inventory.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)
from src.inventory.runtime.context import get_config, set_config, with_context
from src.inventory.runtime.settings import EnvironmentVariables


class TestSubstituteEnvVars:
    def test_default_used_when_unset(self, monkeypatch):
        monkeypatch.delenv("INVENTORY_TEST_VAR", raising=False)

        assert substitute_env_vars("x: ${INVENTORY_TEST_VAR:-fallback}") == "x: fallback"

    def test_value_from_environment(self, monkeypatch):
        monkeypatch.setenv("INVENTORY_TEST_VAR", "from-env")

        assert substitute_env_vars("x: ${INVENTORY_TEST_VAR:-fallback}") == "x: from-env"

    def test_required_variable_missing(self, monkeypatch):
        monkeypatch.delenv("INVENTORY_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="INVENTORY_TEST_VAR"):
            substitute_env_vars("x: ${INVENTORY_TEST_VAR}")

    def test_required_variable_custom_message(self, monkeypatch):
        monkeypatch.delenv("INVENTORY_TEST_VAR", raising=False)

        with pytest.raises(ValueError, match="set me"):
            substitute_env_vars("x: ${INVENTORY_TEST_VAR:?set me}")


class TestLoadTemplatedYaml:
    def test_load(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("INVENTORY_DB", "sqlite:///./other.db")
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n"
            "  database:\n"
            "    url: ${INVENTORY_DB}\n"
            "  client:\n"
            "    base_url: http://example.test/api\n",
            encoding="utf-8",
        )

        config = load_templated_yaml(config_file, "test")

        assert config.database.url == "sqlite:///./other.db"
        assert config.client.base_url == "http://example.test/api"
        assert config.client.currency_symbol == "₱"
        assert config.app.environment == "test"

    def test_environment_prefixed_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("TEST_INVENTORY_PORT", "9001")
        monkeypatch.delenv("INVENTORY_PORT", raising=False)
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "config:\n  app:\n    port: ${INVENTORY_PORT:-8000}\n", encoding="utf-8"
        )

        try:
            config = load_templated_yaml(config_file, "test")
        finally:
            monkeypatch.delenv("INVENTORY_PORT", raising=False)

        assert config.app.port == 9001

    def test_repository_config_loads_without_extra_env(self, monkeypatch):
        """Every placeholder in the shipped config.yaml has a default."""
        monkeypatch.delenv("VAR", raising=False)
        repository_config = Path(__file__).resolve().parents[3] / "config.yaml"

        config = load_templated_yaml(repository_config, "test")

        assert config.app.api_prefix == "/api"
        assert config.database.url == "sqlite://"
        assert config.jwt.gen_issuer == "inventory-api"
        assert config.client.currency_symbol == "₱"

    def test_invalid_document(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("config:\n  app:\n    port: not-a-port\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(config_file, "test")

    def test_empty_document(self, tmp_path: Path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("", encoding="utf-8")

        with pytest.raises(ValueError):
            load_templated_yaml(config_file, "test")


class TestDatabaseConfig:
    def test_sqlite_detection(self):
        assert DatabaseConfig(url="sqlite://").is_sqlite
        assert not DatabaseConfig(url="postgresql://u:p@db/inventory").is_sqlite

    def test_connection_string_keeps_password(self):
        config = DatabaseConfig(url="postgresql://u:secret@db:5432/inventory")

        assert config.connection_string == "postgresql://u:secret@db:5432/inventory"


class TestContext:
    """The test session runs against an in-memory database."""

    def test_active_config(self):
        config = get_config()

        assert config.database.url == "sqlite://"
        assert config.app.environment == "test"
        assert config.app.api_prefix == "/api"

    def test_with_context_merges_partial_override(self):
        original = get_config()
        override = ConfigData.model_validate({"client": {"currency_symbol": "$"}})

        with with_context(override):
            inside = get_config()
            assert inside.client.currency_symbol == "$"
            assert inside.database.url == original.database.url
            assert inside.client.base_url == original.client.base_url

        assert get_config().client.currency_symbol == original.client.currency_symbol

    def test_with_context_none_is_noop(self):
        original = get_config()

        with with_context(None):
            assert get_config() is original

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError):
            with with_context({"client": {}}):
                pass

    def test_set_config(self):
        original = get_config()
        try:
            set_config(ConfigData.model_validate({"app": {"port": 9999}}))
            assert get_config().app.port == 9999
        finally:
            set_config(original)


class TestEnvironmentVariables:
    def test_reads_aliases(self, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "production")
        monkeypatch.setenv("APP_CONFIG_FILE", "/etc/inventory/config.yaml")

        env = EnvironmentVariables(_env_file=None)

        assert env.environment == "production"
        assert env.config_file == Path("/etc/inventory/config.yaml")
