"""Unit tests for the application context."""

import pytest

from src.library_api.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
)
from src.library_api.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestContextManager:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert isinstance(get_config(), ConfigData)
        assert context.config is get_config()

    def test_with_context_override(self):
        original_config = get_config()

        with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
            assert get_config().database.url == "sqlite://"
            assert get_config() is not original_config

        assert get_config() is original_config

    def test_partial_override_inherits_other_values(self):
        original_config = get_config()

        override = ConfigData()
        override.logging.level = "DEBUG"

        with with_context(override):
            config = get_config()
            assert config.logging.level == "DEBUG"
            assert config.logging.format == original_config.logging.format
            assert config.database.url == original_config.database.url
            assert config.app == original_config.app

    def test_nested_overrides(self):
        level1 = ConfigData(app=AppConfig(environment="production"))
        level2 = ConfigData(logging=LoggingConfig(level="ERROR"))

        with with_context(level1):
            with with_context(level2):
                config = get_config()
                assert config.app.environment == "production"
                assert config.logging.level == "ERROR"
            assert get_config().app.environment == "production"

    def test_none_override_is_noop(self):
        original_config = get_config()

        with with_context(None):
            assert get_config() is original_config

    def test_invalid_override_type(self):
        with pytest.raises(ValueError):
            with with_context({"logging": {"level": "DEBUG"}}):  # type: ignore[arg-type]
                pass

    def test_context_restored_after_exception(self):
        original_config = get_config()

        with pytest.raises(RuntimeError):
            with with_context(ConfigData(database=DatabaseConfig(url="sqlite://"))):
                raise RuntimeError("boom")

        assert get_config() is original_config

    def test_set_config_replaces_configuration(self):
        original_config = get_config()
        replacement = ConfigData(app=AppConfig(port=9999))

        try:
            set_config(replacement)
            assert get_config() is replacement
        finally:
            set_config(original_config)
