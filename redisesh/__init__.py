"""
Redisesh - Redis based session management

Issues unguessable session tokens, stores opaque session payloads in Redis
and lets Redis expire them.

Architecture:
- Each module is self-contained with clear interfaces
- Modules communicate only through their public API
- Redis is reached through a narrow command interface (SessionStore)

Modules:
- token: Random session token generation and encoding
- storage: Redis connection handling and the store command interface
- session: Session lifecycle (insert, get, is_active, remove, expiration)
"""

from redisesh.errors import (
    SessionError,
    SessionExistsError,
    StoreConnectionError,
    StoreError,
    StoreResponseError,
    TokenEncodingError,
)
from redisesh.modules.session import Config, SessionManager
from redisesh.modules.token import SessionToken, TokenGenerator

__version__ = "0.1.0"

__all__ = [
    "Config",
    "SessionError",
    "SessionExistsError",
    "SessionManager",
    "SessionToken",
    "StoreConnectionError",
    "StoreError",
    "StoreResponseError",
    "TokenEncodingError",
    "TokenGenerator",
]
