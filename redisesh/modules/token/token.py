import base64
import binascii
import re
import secrets
from typing import Callable

from redisesh.errors import TokenEncodingError

# The session token is a standard Base64 string (with "+", "/" and "=" padding)
SessionToken = str

DEFAULT_TOKEN_BYTES = 32
MIN_TOKEN_BYTES = 16

_BASE64_RE = re.compile(r"[A-Za-z0-9+/]+={0,2}")


class TokenGenerator:
    def __init__(
        self,
        num_bytes: int = DEFAULT_TOKEN_BYTES,
        random_source: Callable[[int], bytes] = secrets.token_bytes,
    ):
        """
        Initialize token generator.

        Args:
            num_bytes: Random bytes per token (at least 16)
            random_source: Callable returning n cryptographically secure bytes
        """
        if num_bytes < MIN_TOKEN_BYTES:
            raise ValueError(
                f"Session tokens need at least {MIN_TOKEN_BYTES} random bytes, got {num_bytes}"
            )
        self.num_bytes = num_bytes
        self.random_source = random_source

    def generate(self) -> bytes:
        """
        Draw fresh random bytes for a token.

        Returns:
            Exactly num_bytes random bytes

        Raises:
            TokenEncodingError: If the random source misbehaves
        """
        raw = self.random_source(self.num_bytes)

        if not isinstance(raw, (bytes, bytearray)) or len(raw) != self.num_bytes:
            raise TokenEncodingError(
                f"Random source returned an invalid value for {self.num_bytes} bytes"
            )

        return bytes(raw)

    @staticmethod
    def encode(raw: bytes) -> SessionToken:
        """Render raw bytes as a padded standard Base64 token."""
        try:
            return base64.b64encode(raw).decode("ascii")
        except (TypeError, UnicodeDecodeError) as e:
            raise TokenEncodingError(f"Error while encoding random token: {e}") from e

    def new_token(self) -> SessionToken:
        return self.encode(self.generate())


def is_well_formed(token: str) -> bool:
    """Check that a string looks like a token this module could have produced."""
    if not token or len(token) % 4 != 0 or not _BASE64_RE.fullmatch(token):
        return False
    try:
        base64.b64decode(token, validate=True)
    except binascii.Error:
        return False
    return True
