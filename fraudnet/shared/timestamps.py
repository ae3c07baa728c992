"""ISO-8601 helpers. All times are handled in UTC."""

from datetime import UTC, datetime


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp to an aware UTC datetime; None if unparseable.

    Naive timestamps are taken to be UTC.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
