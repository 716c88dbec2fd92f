"""
Unit Tests for Utility Functions

Tests shared helper functions.
"""

import pytest

from slack_archiver.utils.helpers import extension_from_mime, format_slack_timestamp


def test_format_slack_timestamp():
    """Slack ts is epoch seconds, rendered in UTC."""
    assert format_slack_timestamp("1741754154.975769") == "2025-03-12 04:35:54"


def test_format_slack_timestamp_epoch():
    assert format_slack_timestamp("0.000000") == "1970-01-01 00:00:00"


@pytest.mark.parametrize(
    "mime_type, expected",
    [
        ("image/png", "png"),
        ("image/jpeg", "jpeg"),
        ("image/gif", "gif"),
        ("image/svg+xml", "svg"),
        ("image/PNG; charset=binary", "png"),
        ("image", "bin"),
        ("image/", "bin"),
    ],
)
def test_extension_from_mime(mime_type, expected):
    assert extension_from_mime(mime_type) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
