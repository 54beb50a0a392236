"""UTC timestamp formatting shared by API payloads and log entries."""

from datetime import datetime, timezone


def utc_timestamp(moment: datetime | None = None) -> str:
    """
    Format a moment as ISO 8601 UTC with millisecond precision.

    Args:
        moment: Aware or naive-UTC datetime (defaults to now)

    Returns:
        String such as 2024-01-01T00:00:00.000Z
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
