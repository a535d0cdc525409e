"""Configuration for redisesh, loaded from the environment."""

from .provider import ConfigProvider, EnvConfigProvider, StoreConfig

__all__ = ["ConfigProvider", "EnvConfigProvider", "StoreConfig"]
