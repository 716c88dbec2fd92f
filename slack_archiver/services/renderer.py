"""
Conversation Renderer

Turns thread messages (with their downloaded images) into a Markdown document.
Message text is inserted verbatim - no escaping or mrkdwn translation.
"""

import logging
from typing import List, Optional

from slack_archiver.integrations.slack.models import ResolvedMedia, SlackMessage
from slack_archiver.integrations.slack.parser import ThreadIdentifier
from slack_archiver.utils.helpers import format_slack_timestamp

logger = logging.getLogger(__name__)

EMPTY_TEXT_PLACEHOLDER = "_(no text)_"
SECTION_DIVIDER = "\n\n---\n\n"


class ConversationRenderer:
    """Markdown renderer for archived threads."""

    def render(
        self,
        messages: List[SlackMessage],
        thread: Optional[ThreadIdentifier] = None,
    ) -> str:
        """
        Render messages as Markdown, one section per message.

        Args:
            messages: Thread messages in service order
            thread: Optional identifier; adds a title block when given

        Returns:
            Markdown document
        """
        sections = [self._render_message(message) for message in messages]
        body = SECTION_DIVIDER.join(sections)

        if thread is not None:
            body = self._render_title(thread, len(messages)) + body

        logger.debug(f"Rendered {len(messages)} messages")
        return body + "\n"

    def _render_title(self, thread: ThreadIdentifier, message_count: int) -> str:
        return (
            f"# Slack Thread {thread.thread_id}\n\n"
            f"- **Channel:** {thread.channel_id}\n"
            f"- **Thread timestamp:** {thread.thread_ts} "
            f"({format_slack_timestamp(thread.thread_ts)} UTC)\n"
            f"- **Messages:** {message_count}\n\n"
            "---\n\n"
        )

    def _render_message(self, message: SlackMessage) -> str:
        header = f"## {format_slack_timestamp(message.ts)} - {message.user}"
        text = message.text if message.text.strip() else EMPTY_TEXT_PLACEHOLDER
        parts = [header, text]

        if message.media:
            parts.append(self._render_media(message.media))

        return "\n\n".join(parts)

    def _render_media(self, media: List[ResolvedMedia]) -> str:
        lines = ["**Images:**", ""]
        for item in media:
            name = item.original_name or item.local_file_name
            lines.append(f"- [{name}]({item.relative_path})")
            lines.append(f"  ![{name}]({item.relative_path})")
        return "\n".join(lines)
