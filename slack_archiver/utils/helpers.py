"""
Shared Utility Functions

Common helper functions used across multiple modules.
"""

from datetime import datetime, timezone

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_slack_timestamp(ts: str) -> str:
    """
    Format a Slack ts ("1741754154.975769") as "YYYY-MM-DD HH:MM:SS" in UTC.

    Args:
        ts: Slack message timestamp (epoch seconds with fractional part)

    Returns:
        Formatted timestamp string
    """
    moment = datetime.fromtimestamp(float(ts), tz=timezone.utc)
    return moment.strftime(TIMESTAMP_FORMAT)


def extension_from_mime(mime_type: str) -> str:
    """
    Derive a file extension from a mime type's subtype.

    Parameters and structured-syntax suffixes are dropped:
    - "image/png" -> "png"
    - "image/svg+xml" -> "svg"
    - "image/jpeg; charset=binary" -> "jpeg"
    - "image" -> "bin"
    """
    if "/" not in mime_type:
        return "bin"

    subtype = mime_type.split("/", 1)[1]
    subtype = subtype.split(";", 1)[0].split("+", 1)[0].strip().lower()
    return subtype or "bin"
