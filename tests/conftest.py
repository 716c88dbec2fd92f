"""
Shared fixtures: a canned Slack thread, a fake thread source and a media
fetcher whose downloads never touch the network.
"""

import sys
import time
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from slack_archiver.services.media_fetcher import MediaFetcher

THREAD_URL = "https://myworkspace.slack.com/archives/C123ABC/p1741754154975769"


def _image(name: str, mimetype: str) -> dict:
    return {
        "id": f"F_{name}",
        "name": name,
        "mimetype": mimetype,
        "url_private": f"https://files.slack.com/files-pri/T1-F1/{name}",
    }


MOCK_THREAD_MESSAGES = [
    {
        "ts": "1741754154.975769",
        "user": "U123USER1",
        "text": "Deploy failed again, screenshots attached",
        "thread_ts": "1741754154.975769",
        "reply_count": 2,
        "files": [
            _image("error.png", "image/png"),
            _image("dashboard.jpg", "image/jpeg"),
        ],
    },
    {
        "ts": "1741754200.000100",
        "user": "U456USER2",
        "text": "Here is the log and the graph",
        "thread_ts": "1741754154.975769",
        "files": [
            {
                "id": "F_log",
                "name": "deploy.log",
                "mimetype": "text/plain",
                "url_private": "https://files.slack.com/files-pri/T1-F1/deploy.log",
            },
            _image("graph.gif", "image/gif"),
        ],
    },
    {
        "ts": "1741754300.123456",
        "user": "U123USER1",
        "text": "",
        "thread_ts": "1741754154.975769",
    },
]

TEXT_ONLY_THREAD = [
    {"ts": "1741754154.975769", "user": "U1", "text": "Anyone around?"},
    {"ts": "1741754160.000001", "user": "U2", "text": "Yes"},
]


class FakeThreadSource:
    """Stands in for SlackClient."""

    def __init__(self, messages):
        self.messages = messages
        self.calls = []

    async def fetch_thread_replies(self, channel_id, thread_ts):
        self.calls.append((channel_id, thread_ts))
        return [dict(m) for m in self.messages]


class StubMediaFetcher(MediaFetcher):
    """
    MediaFetcher with the HTTP download replaced.

    delays: file name -> seconds to wait before finishing
    failures: file names whose download raises
    """

    def __init__(self, delays=None, failures=()):
        super().__init__(token="xoxb-test")
        self.delays = delays or {}
        self.failures = set(failures)
        self.completed = []

    def download(self, url, output_path):
        name = url.rsplit("/", 1)[-1]
        time.sleep(self.delays.get(name, 0))
        if name in self.failures:
            raise ConnectionError(f"connection reset while fetching {name}")
        Path(output_path).write_bytes(f"fake image {name}".encode())
        self.completed.append(name)


@pytest.fixture
def thread_messages():
    return [dict(m) for m in MOCK_THREAD_MESSAGES]


@pytest.fixture
def thread_source():
    return FakeThreadSource(MOCK_THREAD_MESSAGES)


@pytest.fixture
def text_only_source():
    return FakeThreadSource(TEXT_ONLY_THREAD)
