"""Tests for environment substitution and templated YAML loading."""

import os
import textwrap
from pathlib import Path

import pytest

from src.ichor.runtime.config.config_template import (
    load_templated_yaml,
    substitute_env_vars,
)


class TestSubstituteEnvVars:
    def test_required_variable(self, monkeypatch):
        monkeypatch.setenv("ICHOR_TEST_HOST", "db.internal")
        assert substitute_env_vars("host: ${ICHOR_TEST_HOST}") == "host: db.internal"

    def test_missing_required_variable(self, monkeypatch):
        monkeypatch.delenv("ICHOR_TEST_MISSING", raising=False)
        with pytest.raises(ValueError, match="ICHOR_TEST_MISSING not set"):
            substitute_env_vars("${ICHOR_TEST_MISSING}")

    def test_default_value(self, monkeypatch):
        monkeypatch.delenv("ICHOR_TEST_PORT", raising=False)
        assert substitute_env_vars("${ICHOR_TEST_PORT:-3000}") == "3000"
        monkeypatch.setenv("ICHOR_TEST_PORT", "8080")
        assert substitute_env_vars("${ICHOR_TEST_PORT:-3000}") == "8080"

    def test_custom_error_message(self, monkeypatch):
        monkeypatch.delenv("ICHOR_TEST_KEY", raising=False)
        with pytest.raises(ValueError, match="signing key is required"):
            substitute_env_vars("${ICHOR_TEST_KEY:?signing key is required}")

    def test_comment_lines_are_not_substituted(self, monkeypatch):
        monkeypatch.delenv("VAR", raising=False)
        monkeypatch.delenv("ICHOR_TEST_PORT", raising=False)
        text = "# ${VAR} is required\nport: ${ICHOR_TEST_PORT:-3000}\n"
        assert substitute_env_vars(text) == "# ${VAR} is required\nport: 3000\n"


class TestLoadTemplatedYaml:
    def _write(self, tmp_path, body: str):
        path = tmp_path / "config.yaml"
        path.write_text(textwrap.dedent(body))
        return path

    def test_loads_sections(self, tmp_path, monkeypatch):
        monkeypatch.setenv("APP_ENVIRONMENT", "test")
        monkeypatch.setenv("ICHOR_TEST_ROWS", "25")
        path = self._write(
            tmp_path,
            """
            config:
              app:
                environment: test
              query:
                default_rows: ${ICHOR_TEST_ROWS}
              cache:
                enabled: false
            """,
        )

        config = load_templated_yaml(path)

        assert config.app.environment == "test"
        assert config.query.default_rows == 25
        assert config.query.max_rows == 100
        assert config.cache.enabled is False

    def test_environment_prefixed_override(self, tmp_path, monkeypatch):
        """``<ENV>_NAME`` wins over ``NAME`` for the active environment."""
        monkeypatch.setenv("APP_ENVIRONMENT", "test")
        monkeypatch.setenv("ICHOR_TEST_DB", "sqlite:///plain.db")
        monkeypatch.setenv("TEST_ICHOR_TEST_DB", "sqlite:///override.db")
        path = self._write(
            tmp_path,
            """
            config:
              database:
                url: ${ICHOR_TEST_DB}
            """,
        )

        assert load_templated_yaml(path).database.url == "sqlite:///override.db"

    def test_invalid_document(self, tmp_path):
        path = self._write(
            tmp_path,
            """
            config:
              app:
                environment: staging
            """,
        )
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_templated_yaml(path)

    def test_empty_document(self, tmp_path):
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_templated_yaml(self._write(tmp_path, ""))

    def test_shipped_config_loads_with_clean_environment(self, monkeypatch):
        """The repository's own config.yaml needs no environment at all."""
        for name in list(os.environ):
            monkeypatch.delenv(name)
        shipped = Path(__file__).resolve().parents[3] / "config.yaml"

        config = load_templated_yaml(shipped)

        assert config.app.environment == "development"
        assert config.database.url == "sqlite:///./ichor.db"
        assert config.auth.active_kid in config.auth.keys
