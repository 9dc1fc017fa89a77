"""Timestamp rendering shared by the payload and the ConfigMap metadata."""

from __future__ import annotations

from datetime import datetime
from typing import Optional


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as ISO-8601, keeping its UTC offset."""
    return value.isoformat()


def format_optional_timestamp(value: Optional[datetime]) -> str:
    """Render an optional timestamp; an absent value becomes an empty string."""
    if value is None:
        return ""
    return format_timestamp(value)
