"""
Storage Module - Black Box Interface

Purpose: Abstract the connection to the session store
Interface: connect(), disconnect(), SessionStore protocol
Hidden: Redis specifics, connection pooling, URL parsing

Can be replaced with any store offering hash fields and TTLs.
"""

import logging
import os
from typing import Optional

import redis
from redis import exceptions as redis_exceptions

from redisesh.errors import StoreConnectionError, StoreError, translate_store_errors

from .interfaces import SessionStore

logger = logging.getLogger("redisesh.storage")

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class StorageModule:
    """Black box storage abstraction."""

    def __init__(
        self,
        connection_url: str = None,
        password: Optional[str] = None,
        socket_timeout: Optional[float] = None,
    ):
        """Initialize storage with connection URL."""
        self.url = connection_url or os.getenv("REDIS_URL", DEFAULT_REDIS_URL)
        self.password = password
        self.socket_timeout = socket_timeout
        self._client = None

    def connect(self) -> redis.Redis:
        """
        Get storage connection.

        The server is pinged so an unreachable store fails here rather than
        on the first session command.

        Raises:
            StoreConnectionError: Malformed URL or unreachable server
        """
        if self._client:
            return self._client

        options = {"decode_responses": True}
        if self.password is not None:
            # Passed separately to avoid URL encoding issues
            options["password"] = self.password
        if self.socket_timeout is not None:
            options["socket_timeout"] = self.socket_timeout
            options["socket_connect_timeout"] = self.socket_timeout

        try:
            client = redis.Redis.from_url(self.url, **options)
        except (ValueError, redis_exceptions.RedisError) as e:
            raise StoreConnectionError(f"Invalid Redis URL: {e}") from e

        try:
            with translate_store_errors():
                client.ping()
        except StoreError:
            client.close()
            raise

        logger.info(f"Connected to session store at {client.connection_pool}")
        self._client = client
        return self._client

    def disconnect(self):
        """Close storage connection."""
        if self._client:
            self._client.close()
            self._client = None


__all__ = ["DEFAULT_REDIS_URL", "SessionStore", "StorageModule"]
