"""
Timestamp helpers for the last_opened column.
"""
from datetime import datetime, timezone

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def now_iso() -> str:
    """Current UTC time as YYYY-MM-DDTHH:MM:SSZ (sorts lexicographically)."""
    return datetime.now(timezone.utc).strftime(ISO_FORMAT)
