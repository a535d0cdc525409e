import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from redisesh.errors import (
    SessionExistsError,
    StoreError,
    StoreResponseError,
    translate_store_errors,
)
from redisesh.modules.storage import SessionStore, StorageModule
from redisesh.modules.token import SessionToken, TokenGenerator

logger = logging.getLogger("redisesh.session")

# Hash field holding the session payload
SESSION_DATA_FIELD = "session_data"


def mask_token(token: str) -> str:
    """Shorten a token for log output."""
    return f"{token[:6]}..." if token else "<empty>"


@dataclass(frozen=True)
class Config:
    """
    Session configuration.

    Attributes:
        expiration: TTL given to every session inserted after this config is
            applied. None means sessions never expire.
    """

    expiration: Optional[Union[timedelta, int, float]] = None

    def __post_init__(self):
        if self.expiration is None:
            return
        if not isinstance(self.expiration, timedelta):
            object.__setattr__(self, "expiration", timedelta(seconds=self.expiration))
        if self.expiration < timedelta(seconds=1):
            # EXPIRE 0 (or negative) deletes the key immediately
            raise ValueError(
                f"Session expiration must be at least one second, got {self.expiration}"
            )

    @property
    def expiration_seconds(self) -> Optional[int]:
        """Expiration in whole seconds, as sent to EXPIRE."""
        if self.expiration is None:
            return None
        return int(self.expiration.total_seconds())


class SessionManager:
    """
    Manages session records in Redis.

    Each session is a hash keyed by its token with a single field holding the
    payload. Expiration is delegated to Redis TTLs.
    """

    def __init__(
        self,
        redis_client: SessionStore,
        config: Optional[Config] = None,
        token_generator: Optional[TokenGenerator] = None,
    ):
        """
        Initialize session manager.

        Args:
            redis_client: Redis client (or anything implementing SessionStore)
            config: Session configuration (default: no expiration)
            token_generator: Token source (default: 32 random bytes)
        """
        self.redis = redis_client
        self._config = config or Config()
        self.token_generator = token_generator or TokenGenerator()

    @classmethod
    def from_url(
        cls,
        redis_url: str,
        config: Optional[Config] = None,
        token_generator: Optional[TokenGenerator] = None,
        **storage_options,
    ) -> "SessionManager":
        """
        Connect to Redis and build a manager.

        Raises:
            StoreConnectionError: Malformed URL or unreachable server
        """
        storage = StorageModule(redis_url, **storage_options)
        return cls(storage.connect(), config=config, token_generator=token_generator)

    @classmethod
    def from_env(cls, provider=None) -> "SessionManager":
        """Build a manager from environment configuration."""
        from redisesh.config.provider import EnvConfigProvider
        from redisesh.logging_config import configure_logging

        provider = provider or EnvConfigProvider()

        log_level = provider.get_log_level()
        if log_level:
            configure_logging(log_level)

        store_config = provider.get_store_config()
        return cls.from_url(
            store_config.url,
            config=provider.get_session_config(),
            token_generator=TokenGenerator(num_bytes=provider.get_token_bytes()),
            password=store_config.password,
            socket_timeout=store_config.socket_timeout,
        )

    @property
    def config(self) -> Config:
        return self._config

    def configure(self, config: Config) -> None:
        """Replace the session configuration. Applies to future inserts only."""
        self._config = config
        logger.debug(f"Session expiration set to {config.expiration}")

    def insert(self, session_data: Optional[str] = None) -> SessionToken:
        """
        Insert a new session.

        Args:
            session_data: Opaque payload; None is stored as an empty string

        Returns:
            The session token

        Raises:
            SessionExistsError: The generated token is already in use
            StoreError: Redis failed; if the TTL could not be set the record
                stays without expiration and the error carries its token

        Logic:
        1. Generate token
        2. HSETNX the payload field (atomic, no liveness pre-check)
        3. EXPIRE the record if an expiration is configured
        """
        seconds = self._config.expiration_seconds
        token = self.token_generator.new_token()

        with translate_store_errors(token):
            created = self.redis.hsetnx(token, SESSION_DATA_FIELD, session_data or "")

        if not created:
            raise SessionExistsError(token=token)

        if seconds is not None:
            try:
                self._set_expiration(token, seconds)
            except StoreError:
                logger.warning(
                    f"Session {mask_token(token)} was stored but its expiration could not be set"
                )
                raise

        logger.debug(f"Inserted session {mask_token(token)} (TTL: {seconds})")
        return token

    def _set_expiration(self, token: str, seconds: int) -> None:
        """Set a TTL on the whole session record."""
        with translate_store_errors(token):
            self.redis.expire(token, seconds)

    def get(self, token: str) -> Optional[str]:
        """
        Get session payload.

        Returns:
            Payload string or None if the session does not exist
        """
        try:
            with translate_store_errors(token):
                data = self.redis.hget(token, SESSION_DATA_FIELD)

            # Handle bytes from clients without decode_responses
            if isinstance(data, bytes):
                data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise StoreResponseError(
                f"Session payload is not valid UTF-8: {e}", token=token
            ) from e

        return data

    def is_active(self, token: str) -> bool:
        """Check if a session exists. Expired and never inserted both give False."""
        with translate_store_errors(token):
            return bool(self.redis.hexists(token, SESSION_DATA_FIELD))

    def remove(self, token: str) -> None:
        """Remove a session. Removing an unknown token is not an error."""
        with translate_store_errors(token):
            removed = self.redis.hdel(token, SESSION_DATA_FIELD)

        if removed:
            logger.debug(f"Removed session {mask_token(token)}")

    def ttl(self, token: str) -> Optional[int]:
        """
        Remaining lifetime of a session.

        Returns:
            Seconds until expiration, or None if the session does not expire
            or does not exist
        """
        with translate_store_errors(token):
            remaining = self.redis.ttl(token)

        if remaining is None or remaining < 0:
            return None
        return remaining

    def close(self) -> None:
        """Release the Redis connection."""
        with translate_store_errors():
            self.redis.close()

    def __enter__(self) -> "SessionManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
