"""Store command interface following Black Box Design principles."""
from typing import Optional, Protocol, Union

Reply = Union[str, bytes]


class SessionStore(Protocol):
    """
    Commands the session manager issues against the key-value store.

    Method names and signatures match the redis-py client, so a redis.Redis
    instance satisfies this protocol directly.
    """

    def hsetnx(self, name: str, key: str, value: str) -> Union[bool, int]:
        """Set hash field only if it does not exist. Returns truthy if it was set."""
        ...

    def hexists(self, name: str, key: str) -> bool:
        """Check whether a hash field exists."""
        ...

    def hget(self, name: str, key: str) -> Optional[Reply]:
        """Read a hash field, None if missing."""
        ...

    def hdel(self, name: str, *keys: str) -> int:
        """Delete hash fields. Returns the number removed."""
        ...

    def expire(self, name: str, time: int) -> bool:
        """Set a TTL in seconds on a key."""
        ...

    def ttl(self, name: str) -> int:
        """Remaining TTL in seconds; -1 without expiration, -2 if missing."""
        ...

    def close(self) -> None:
        """Release connections."""
        ...
