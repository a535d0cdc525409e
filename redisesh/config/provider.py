"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol

from redisesh.modules.session import Config
from redisesh.modules.storage import DEFAULT_REDIS_URL
from redisesh.modules.token import DEFAULT_TOKEN_BYTES


@dataclass
class StoreConfig:
    """Redis connection configuration."""
    url: str
    password: Optional[str] = None
    socket_timeout: Optional[float] = None


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_store_config(self) -> StoreConfig:
        """Get Redis connection configuration."""
        ...

    def get_session_config(self) -> Config:
        """Get session configuration."""
        ...

    def get_token_bytes(self) -> int:
        """Get the number of random bytes per session token."""
        ...

    def get_log_level(self) -> Optional[str]:
        """Get the redisesh log level, None to leave logging untouched."""
        ...


def _parse_number(name: str, raw: Optional[str], cast):
    if raw is None or not raw.strip():
        return None
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ

    def get_store_config(self) -> StoreConfig:
        """Get Redis connection configuration from environment variables."""
        return StoreConfig(
            url=self.environ.get("REDIS_URL") or DEFAULT_REDIS_URL,
            password=self.environ.get("REDIS_PASSWORD") or None,
            socket_timeout=_parse_number(
                "REDIS_SOCKET_TIMEOUT", self.environ.get("REDIS_SOCKET_TIMEOUT"), float
            ),
        )

    def get_session_config(self) -> Config:
        """Get session configuration from environment variables."""
        expiration = _parse_number(
            "SESSION_EXPIRATION", self.environ.get("SESSION_EXPIRATION"), int
        )
        return Config(expiration=expiration)

    def get_token_bytes(self) -> int:
        """Get token size from environment variables."""
        num_bytes = _parse_number(
            "SESSION_TOKEN_BYTES", self.environ.get("SESSION_TOKEN_BYTES"), int
        )
        return DEFAULT_TOKEN_BYTES if num_bytes is None else num_bytes

    def get_log_level(self) -> Optional[str]:
        """Get log level from environment variables."""
        return self.environ.get("LOG_LEVEL") or None
