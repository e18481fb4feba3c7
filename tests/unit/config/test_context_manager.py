"""Unit tests for the configuration context manager."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.ichor.runtime.config.config_data import ConfigData, QueryConfig
from src.ichor.runtime.context import (
    AppContext,
    get_config,
    get_context,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        """Should have a default context available."""
        context = get_context()
        config = get_config()

        assert isinstance(context, AppContext)
        assert isinstance(config, ConfigData)
        assert context.config is config

    def test_with_context_override_single_level(self):
        """Should override config for the duration of the context manager."""
        original_config = get_config()
        original_host = original_config.app.host

        test_config = ConfigData()
        test_config.app.host = "custom_host"

        with with_context(test_config):
            override_config = get_config()
            assert override_config.app.host == "custom_host"
            assert override_config is not original_config

        after_config = get_config()
        assert after_config.app.host == original_host
        assert after_config is original_config

    def test_unset_fields_are_inherited(self):
        """Only explicitly set values replace the enclosing configuration."""
        original = get_config()

        with with_context(ConfigData(query=QueryConfig(max_rows=5))):
            config = get_config()
            assert config.query.max_rows == 5
            assert config.query.default_rows == original.query.default_rows
            assert config.database.url == original.database.url
            assert config.auth.keys == original.auth.keys

    def test_with_context_nested_overrides(self):
        """Should handle nested context overrides correctly."""
        level1 = ConfigData()
        level1.app.port = 8001

        with with_context(level1):
            level1_config = get_config()
            level2 = ConfigData()
            level2.logging.level = "TRACE"

            with with_context(level2):
                config = get_config()
                assert config.app.port == 8001
                assert config.logging.level == "TRACE"

            assert get_config() is level1_config

    def test_none_override_is_noop(self):
        original = get_config()
        with with_context(None):
            assert get_config() is original

    def test_rejects_wrong_type(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"port": 1}}):
                pass

    def test_override_is_local_to_thread(self):
        """A worker thread without the override still sees the default."""
        original_port = get_config().app.port
        override = ConfigData()
        override.app.port = 9999

        with with_context(override):
            with ThreadPoolExecutor(max_workers=1) as pool:
                other_port = pool.submit(lambda: get_config().app.port).result()
            assert get_config().app.port == 9999

        assert other_port == original_port
