from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    # Client-side default so timestamps are loaded without a refresh round-trip
    return datetime.now(timezone.utc)
