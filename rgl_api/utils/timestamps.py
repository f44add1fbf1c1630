"""Timestamp helpers for RGL API payloads."""

from datetime import UTC, datetime


def parse_timestamp(value: str | None) -> datetime | None:
    """
    Parse an RGL timestamp into an aware UTC datetime.

    RGL renders every timestamp as ISO-8601 with milliseconds and a ``Z``
    suffix, e.g. ``2023-02-12T21:48:27.196Z``. Permanent bans use the year
    9999, which ``datetime`` handles.

    Args:
        value: Timestamp text. Empty strings and None mean "no timestamp".

    Returns:
        Parsed datetime in UTC, or None when value is empty.

    Raises:
        ValueError: If value is not an ISO-8601 timestamp.
    """
    if not value:
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)
