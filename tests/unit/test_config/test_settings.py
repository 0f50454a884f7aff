"""
Unit tests for settings configuration

Tests YAML config loading for the cache store and pool settings.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from config.settings import Settings, get_settings
from core.utils.config import load_yaml, load_yaml_safe


@pytest.fixture
def fresh_settings():
    """Force Settings to reload YAML, restoring the cached config afterwards"""
    saved = Settings.__dict__.get("_cache_config")
    if hasattr(Settings, "_yaml_loaded"):
        delattr(Settings, "_yaml_loaded")
    yield
    if saved is not None:
        Settings._cache_config = saved
        Settings._yaml_loaded = True
    elif hasattr(Settings, "_yaml_loaded"):
        delattr(Settings, "_yaml_loaded")


@pytest.mark.unit
class TestCacheSettings:
    """Test Redis settings loaded from cache.yaml"""

    def test_redis_defaults_from_yaml(self):
        settings = get_settings()

        assert settings.REDIS_HOST == "localhost"
        assert settings.REDIS_PORT == 6379
        assert settings.REDIS_DB == 0
        assert settings.redis_endpoint == "localhost:6379"

    def test_pool_settings(self):
        settings = get_settings()

        assert isinstance(settings.REDIS_MAX_CONNECTIONS, int)
        assert settings.REDIS_MAX_CONNECTIONS > 0
        assert settings.REDIS_POOL_TIMEOUT > 0
        assert settings.REDIS_SOCKET_TIMEOUT > 0
        assert settings.REDIS_SOCKET_CONNECT_TIMEOUT > 0

    def test_strict_decoding_enabled(self):
        assert get_settings().CACHE_STRICT_DECODING is True

    def test_get_settings_singleton(self):
        assert get_settings() is get_settings()

    def test_password_from_env(self, monkeypatch):
        monkeypatch.setenv("REDIS_PASSWORD", "s3cret")

        assert Settings().REDIS_PASSWORD == "s3cret"

    def test_missing_yaml_falls_back_to_defaults(self, fresh_settings):
        with patch("config.settings.load_yaml_safe", return_value={}):
            settings = Settings()

        assert settings.REDIS_HOST == "localhost"
        assert settings.REDIS_PORT == 6379
        assert settings.REDIS_MAX_CONNECTIONS == 50
        assert settings.CACHE_STRICT_DECODING is True

    def test_yaml_overrides(self, fresh_settings):
        config = {
            "redis": {"host": "cache.internal", "port": 6380, "db": 3, "pool": {"max_connections": 8}},
            "codec": {"strict": False},
        }
        with patch("config.settings.load_yaml_safe", return_value=config):
            settings = Settings()

        assert settings.redis_endpoint == "cache.internal:6380"
        assert settings.REDIS_DB == 3
        assert settings.REDIS_MAX_CONNECTIONS == 8
        assert settings.CACHE_STRICT_DECODING is False

    @pytest.mark.parametrize(
        "raw, expected",
        [("false", False), ("off", False), ("0", False), ("true", True), ("yes", True), (1, True)],
    )
    def test_strict_decoding_parses_quoted_values(self, fresh_settings, raw, expected):
        with patch("config.settings.load_yaml_safe", return_value={"codec": {"strict": raw}}):
            settings = Settings()

        assert settings.CACHE_STRICT_DECODING is expected

    def test_strict_decoding_rejects_unknown_value(self, fresh_settings):
        with patch("config.settings.load_yaml_safe", return_value={"codec": {"strict": "maybe"}}):
            settings = Settings()

        with pytest.raises(ValidationError):
            settings.CACHE_STRICT_DECODING


@pytest.mark.unit
class TestYamlLoading:
    """Test core.utils.config helpers"""

    def test_load_yaml_resolves_from_project_root(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = load_yaml("config/providers/cache.yaml")

        assert config["redis"]["port"] == 6379

    def test_load_yaml_missing_raises(self):
        with pytest.raises(FileNotFoundError):
            load_yaml("config/providers/missing.yaml")

    def test_load_yaml_safe_missing_returns_empty(self):
        assert load_yaml_safe("config/providers/missing.yaml") == {}

    def test_load_yaml_safe_invalid_returns_empty(self, tmp_path):
        broken = tmp_path / "broken.yaml"
        broken.write_text("redis: [unclosed")

        assert load_yaml_safe(str(broken)) == {}

    def test_load_yaml_empty_file(self, tmp_path):
        empty = tmp_path / "empty.yaml"
        empty.write_text("")

        assert load_yaml(str(empty)) == {}
