from datetime import datetime
from typing import Any, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """PostgREST returns timestamps as ISO-8601 strings."""
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def to_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if isinstance(value, datetime) else value
