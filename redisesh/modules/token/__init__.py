"""
Token Module - Black Box Interface

Purpose: Produce unguessable session tokens
Interface: TokenGenerator.generate(), TokenGenerator.encode(), TokenGenerator.new_token()
Hidden: Random source, encoding alphabet

Replaceable random source (any callable returning n random bytes).
"""

from .token import (
    DEFAULT_TOKEN_BYTES,
    MIN_TOKEN_BYTES,
    SessionToken,
    TokenGenerator,
    is_well_formed,
)

__all__ = [
    "DEFAULT_TOKEN_BYTES",
    "MIN_TOKEN_BYTES",
    "SessionToken",
    "TokenGenerator",
    "is_well_formed",
]
