"""
Session Module - Black Box Interface

Purpose: Manage session lifecycle
Interface: insert(), get(), is_active(), remove(), configure()
Hidden: Session storage layout, TTL management

Replaceable with any session backend offering set-if-not-exists and TTLs.
"""

from .session import SESSION_DATA_FIELD, Config, SessionManager, mask_token

__all__ = ["Config", "SESSION_DATA_FIELD", "SessionManager", "mask_token"]
