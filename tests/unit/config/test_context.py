"""Unit tests for the application context."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.bookstore.runtime.config.config_data import ConfigData
from src.bookstore.runtime.context import (
    AppContext,
    get_config,
    get_context,
    merge_configs,
    with_context,
)


class TestContextManager:
    """Test the context manager functionality."""

    def test_default_context_available(self):
        context = get_context()
        assert isinstance(context, AppContext)
        assert isinstance(get_config(), ConfigData)
        assert context.config is get_config()

    def test_with_context_overrides_and_restores(self):
        original_config = get_config()
        override = ConfigData()
        override.storage.max_record_bytes = 256

        with with_context(override):
            assert get_config().storage.max_record_bytes == 256
            assert get_config() is not original_config

        assert get_config() is original_config

    def test_unset_fields_are_inherited(self):
        outer = ConfigData()
        outer.database.url = "sqlite:///./outer.db"

        with with_context(outer):
            outer_port = get_config().app.port
            inner = ConfigData()
            inner.app.port = outer_port + 1
            with with_context(inner):
                config = get_config()
                assert config.app.port == outer_port + 1
                assert config.database.url == "sqlite:///./outer.db"
            assert get_config().app.port == outer_port

    def test_none_override_is_a_no_op(self):
        original_config = get_config()
        with with_context(None):
            assert get_config() is original_config

    def test_rejects_non_config_override(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"port": 1}}):  # type: ignore[arg-type]
                pass

    def test_override_is_not_visible_in_other_threads(self):
        override = ConfigData()
        override.app.port = 9999
        with with_context(override):
            with ThreadPoolExecutor(max_workers=1) as pool:
                port = pool.submit(lambda: get_config().app.port).result()
        assert port != 9999


def test_merge_configs_keeps_base_values():
    base = ConfigData()
    base.logging.level = "DEBUG"
    override = ConfigData()
    override.storage.max_record_bytes = 4096

    merged = merge_configs(base, override)
    assert merged.logging.level == "DEBUG"
    assert merged.storage.max_record_bytes == 4096
