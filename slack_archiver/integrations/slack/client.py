"""
Slack API Client

Responsibilities:
- conversations.replies: Fetch a thread (parent message first, then replies)
- Cursor pagination until the whole thread is read
- Pure fetching focus - raw message dicts are returned untouched
"""

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError
from typing import List, Dict, Any, Optional
import asyncio
import logging

from slack_archiver.errors import ThreadFetchError

logger = logging.getLogger(__name__)

REPLIES_PAGE_LIMIT = 200


class SlackClient:
    """Slack API client used as the pipeline's thread source."""

    def __init__(self, token: str, client: Optional[WebClient] = None):
        self.token = token
        self.client = client or WebClient(token=token)

    async def fetch_thread_replies(
        self, channel_id: str, thread_ts: str
    ) -> List[Dict[str, Any]]:
        """
        Fetch all replies in a thread.

        Args:
            channel_id: Slack channel ID
            thread_ts: Thread timestamp

        Returns:
            List of raw message dictionaries (including the parent message)

        Raises:
            ThreadFetchError: If Slack returns an error or cannot be reached
        """
        raw_messages: List[Dict[str, Any]] = []
        cursor: Optional[str] = None

        try:
            logger.debug(f"Fetching thread replies for {thread_ts}")

            while True:
                api_params = {
                    "channel": channel_id,
                    "ts": thread_ts,
                    "limit": REPLIES_PAGE_LIMIT,
                }
                if cursor:
                    api_params["cursor"] = cursor

                result = await asyncio.to_thread(
                    self.client.conversations_replies, **api_params
                )

                raw_messages.extend(result.get("messages", []))

                cursor = (result.get("response_metadata") or {}).get("next_cursor")
                if not cursor:
                    break
                logger.debug(f"Thread {thread_ts} has more replies, following cursor")

        except SlackApiError as e:
            error_code = e.response.get("error", "unknown_error")
            logger.error(f"Slack API error fetching thread {thread_ts}: {error_code}")
            raise ThreadFetchError(
                f"Slack API error fetching thread {thread_ts} in {channel_id}: {error_code}"
            ) from e
        except Exception as e:
            logger.error(f"Error fetching thread replies {thread_ts}: {e}")
            raise ThreadFetchError(
                f"Error fetching thread {thread_ts} in {channel_id}: {e}"
            ) from e

        logger.info(f"Fetched {len(raw_messages)} messages from thread {thread_ts}")
        return raw_messages
