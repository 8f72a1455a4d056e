"""Shared column helpers"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp with microsecond precision"""
    return datetime.now(timezone.utc)
