"""
Question board rules: input sanitizing and age labels.

Pure functions with no IO.
"""

import re
from datetime import datetime, timezone
from typing import Any, Optional

MAX_FIELD_LENGTH = 1000

TAG_PATTERN = re.compile(r"<[^>]*>")
UNSAFE_CHARS_PATTERN = re.compile(r"[<>\"'`;]")


def sanitize(value: str, max_length: int = MAX_FIELD_LENGTH) -> str:
    """Strip markup and quote characters, trim, then truncate."""
    cleaned = TAG_PATTERN.sub("", value)
    cleaned = UNSAFE_CHARS_PATTERN.sub("", cleaned)
    return cleaned.strip()[:max_length]


def sanitize_field(
    value: Any, default: str = "", max_length: int = MAX_FIELD_LENGTH
) -> str:
    """Sanitize a raw JSON value; anything but a string becomes ``default``."""
    if not isinstance(value, str):
        return default
    return sanitize(value, max_length)


def age_label(created_at: datetime, now: Optional[datetime] = None) -> str:
    """Return a short relative age such as ``5m ago`` or ``2d ago``."""
    now = now or datetime.now(timezone.utc)
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)

    minutes = int((now - created_at).total_seconds() // 60)
    if minutes < 1:
        return "just now"
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"
