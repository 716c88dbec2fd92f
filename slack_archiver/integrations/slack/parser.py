"""
Slack Permalink Parser

Parses Slack thread permalinks to extract channel_id and thread_ts.
"""

import re
from dataclasses import dataclass

from slack_archiver.errors import InvalidUrlError

# Pattern: https://{workspace}[.{org}].slack.com/archives/{channel_id}/p{timestamp}
# (Enterprise Grid hosts look like acme.enterprise.slack.com)
PERMALINK_PATTERN = re.compile(
    r"^https?://([A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*)\.slack\.com/archives/([A-Z0-9]+)/p(\d+)/?(?:[?#].*)?$"
)
THREAD_TS_PATTERN = re.compile(r"^\d+\.\d{6}$")

MICROS_DIGITS = 6


@dataclass(frozen=True)
class ThreadIdentifier:
    """Parsed Slack permalink components."""

    workspace: str
    channel_id: str
    thread_ts: str
    thread_id: str


def parse_permalink(permalink: str) -> ThreadIdentifier:
    """
    Parse Slack thread permalink to extract channel and timestamp.

    Examples:
        https://myworkspace.slack.com/archives/C123ABC456/p1234567890123456
        -> channel_id: C123ABC456
        -> thread_ts: 1234567890.123456
        -> thread_id: 1234567890123456

    Args:
        permalink: Full Slack permalink URL

    Returns:
        ThreadIdentifier with workspace, channel_id, thread_ts and thread_id

    Raises:
        InvalidUrlError: If permalink format is invalid or the timestamp
            token is too short to hold seconds and microseconds
    """
    match = PERMALINK_PATTERN.match(permalink.strip()) if permalink else None

    if not match:
        raise InvalidUrlError(f"Invalid Slack permalink format: {permalink}")

    host_prefix, channel_id, ts_raw = match.groups()
    workspace = host_prefix.split(".", 1)[0]

    # p1234567890123456 -> 1234567890.123456 (last 6 digits are microseconds)
    if len(ts_raw) <= MICROS_DIGITS:
        raise InvalidUrlError(
            f"Timestamp token 'p{ts_raw}' is too short in permalink: {permalink}"
        )

    thread_ts = f"{ts_raw[:-MICROS_DIGITS]}.{ts_raw[-MICROS_DIGITS:]}"
    if not THREAD_TS_PATTERN.match(thread_ts):
        raise InvalidUrlError(f"Malformed thread timestamp {thread_ts!r} in {permalink}")

    return ThreadIdentifier(
        workspace=workspace,
        channel_id=channel_id,
        thread_ts=thread_ts,
        thread_id=ts_raw,
    )
