"""
Application Settings - Load from YAML configs + .env secrets

Design Philosophy:
- Store configs (host, port, pool sizing) → config/providers/cache.yaml (public, versioned in git)
- Secrets (passwords) → .env file (gitignored)

Uses Pydantic for validation and type safety
"""

from pydantic import Field, TypeAdapter
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.utils.config import load_yaml_safe

CACHE_CONFIG_PATH = "config/providers/cache.yaml"


class Settings(BaseSettings):
    """
    Application settings

    Architecture:
    - Infrastructure configs → config/providers/cache.yaml (public)
    - Secrets → .env (gitignored)

    Usage:
        from config.settings import get_settings

        settings = get_settings()
        print(settings.redis_endpoint)  # From cache.yaml
        print(settings.REDIS_PASSWORD)  # From .env
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Load YAML config from file (cached at class level)
        if not hasattr(Settings, "_yaml_loaded"):
            Settings._cache_config = load_yaml_safe(CACHE_CONFIG_PATH)
            Settings._yaml_loaded = True

    # ============================================
    # ENVIRONMENT (.env only)
    # ============================================
    ENVIRONMENT: str = Field(default="local", description="Environment: local, dev, staging, prod")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # ============================================
    # REDIS (from YAML + .env)
    # ============================================
    @property
    def _redis(self) -> dict:
        return self._cache_config.get("redis", {})

    @property
    def REDIS_HOST(self) -> str:
        """Redis host from cache.yaml"""
        return self._redis.get("host", "localhost")

    @property
    def REDIS_PORT(self) -> int:
        """Redis port from cache.yaml (default for endpoints without a port)"""
        return int(self._redis.get("port", 6379))

    @property
    def REDIS_DB(self) -> int:
        """Redis database from cache.yaml"""
        return int(self._redis.get("db", 0))

    # Redis password from .env (optional secret)
    REDIS_PASSWORD: str | None = Field(default=None)

    @property
    def redis_endpoint(self) -> str:
        """Default endpoint as host:port"""
        return f"{self.REDIS_HOST}:{self.REDIS_PORT}"

    # ============================================
    # CONNECTION POOL (from YAML)
    # ============================================
    @property
    def REDIS_MAX_CONNECTIONS(self) -> int:
        """Max pooled connections per endpoint"""
        return int(self._redis.get("pool", {}).get("max_connections", 50))

    @property
    def REDIS_POOL_TIMEOUT(self) -> float:
        """Seconds to block waiting for a free pooled connection"""
        return float(self._redis.get("pool", {}).get("timeout", 5))

    @property
    def REDIS_SOCKET_TIMEOUT(self) -> float:
        """Socket read/write timeout (seconds)"""
        return float(self._redis.get("pool", {}).get("socket_timeout", 5))

    @property
    def REDIS_SOCKET_CONNECT_TIMEOUT(self) -> float:
        """Socket connect timeout (seconds)"""
        return float(self._redis.get("pool", {}).get("socket_connect_timeout", 5))

    # ============================================
    # CODEC (from YAML)
    # ============================================
    @property
    def CACHE_STRICT_DECODING(self) -> bool:
        """Decode cached JSON in pydantic strict mode"""
        # "false", "0", "no", "off" parse as False; unknown strings raise
        return TypeAdapter(bool).validate_python(
            self._cache_config.get("codec", {}).get("strict", True)
        )


# Singleton pattern
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton)

    Returns:
        Settings instance

    Example:
        >>> settings = get_settings()
        >>> print(settings.redis_endpoint)
        localhost:6379
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
