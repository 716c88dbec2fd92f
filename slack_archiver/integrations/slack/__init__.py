# Slack integration module
from slack_archiver.integrations.slack.client import SlackClient
from slack_archiver.integrations.slack.models import (
    Attachment,
    ResolvedMedia,
    SlackMessage,
)
from slack_archiver.integrations.slack.parser import ThreadIdentifier, parse_permalink

__all__ = [
    "SlackClient",
    "Attachment",
    "ResolvedMedia",
    "SlackMessage",
    "ThreadIdentifier",
    "parse_permalink",
]
