"""
Utility functions for generating identifiers and timestamps for stored rows.
"""

import secrets
import uuid
from datetime import datetime, timezone


def generate_uuid() -> str:
    """
    Generate a primary key for a new row.

    Returns:
        str: A random UUID4 string (e.g., 3f2b9c1e-...)
    """
    return str(uuid.uuid4())


def generate_invite_token() -> str:
    """
    Generate an invitation token from 16 random bytes.

    Returns:
        str: A 32-character lowercase hex string
    """
    return secrets.token_hex(16)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # Some backends (SQLite) hand back naive datetimes for timezone-aware columns
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
