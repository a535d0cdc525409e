"""
Error types raised by redisesh.

Callers branch on the class to tell connectivity problems (StoreConnectionError)
from bad replies (StoreResponseError) from token generation problems
(TokenEncodingError).
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from redis import exceptions as redis_exceptions


class SessionError(Exception):
    """Base class for all session errors."""

    default_message = "Session error"

    def __init__(self, message: Optional[str] = None, token: Optional[str] = None):
        self.message = message or self.default_message
        self.token = token
        super().__init__(self.message)


class StoreError(SessionError):
    """The session store failed to execute a command."""

    default_message = "Session store error"


class StoreConnectionError(StoreError):
    """Redis could not be reached or the connection failed mid-request."""

    default_message = "Error establishing connection with Redis"


class StoreResponseError(StoreError):
    """Redis answered with an error reply."""

    default_message = "Redis response error"


class TokenEncodingError(SessionError):
    """Random bytes could not be produced or rendered as a token."""

    default_message = "Error while generating random token"


class SessionExistsError(SessionError):
    """A session already exists under the generated token."""

    default_message = "Session already active"


@contextmanager
def translate_store_errors(token: Optional[str] = None) -> Iterator[None]:
    """
    Convert redis client exceptions into StoreError subclasses.

    Args:
        token: Session token the command targets, attached to the raised error

    Raises:
        StoreResponseError: Redis replied with an error
        StoreConnectionError: Any other redis client failure
    """
    try:
        yield
    except redis_exceptions.ResponseError as e:
        raise StoreResponseError(f"Redis response error: {e}", token=token) from e
    except redis_exceptions.RedisError as e:
        raise StoreConnectionError(
            f"Error establishing connection with Redis: {e}", token=token
        ) from e


__all__ = [
    "SessionError",
    "SessionExistsError",
    "StoreConnectionError",
    "StoreError",
    "StoreResponseError",
    "TokenEncodingError",
    "translate_store_errors",
]
