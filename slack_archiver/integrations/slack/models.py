"""
Slack Data Models

Messages keep Slack's field names (ts, user, text) so raw_data.json and the
rendered document describe the same thing.
"""

from pydantic import BaseModel
from typing import Any, Dict, List


class Attachment(BaseModel):
    """A file attached to a Slack message."""

    mime_type: str = ""
    source_url: str = ""
    original_name: str = ""

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @classmethod
    def from_slack(cls, file_data: Dict[str, Any]) -> "Attachment":
        return cls(
            mime_type=file_data.get("mimetype") or "",
            source_url=file_data.get("url_private") or "",
            original_name=file_data.get("name") or "",
        )


class ResolvedMedia(BaseModel):
    """An image attachment that was downloaded into the bundle."""

    local_file_name: str  # image_<N>.<ext>
    relative_path: str  # relative to the bundle directory, e.g. images/image_1.png
    original_name: str


class SlackMessage(BaseModel):
    """One message of a thread, parent first."""

    ts: str
    user: str = "unknown"
    text: str = ""
    attachments: List[Attachment] = []
    media: List[ResolvedMedia] = []

    @property
    def image_attachments(self) -> List[Attachment]:
        return [a for a in self.attachments if a.is_image]

    @classmethod
    def from_slack(cls, msg_data: Dict[str, Any]) -> "SlackMessage":
        """Build a message from a raw conversations.replies entry."""
        return cls(
            ts=msg_data["ts"],
            user=msg_data.get("user") or msg_data.get("bot_id") or "unknown",
            text=msg_data.get("text") or "",
            attachments=[
                Attachment.from_slack(f) for f in msg_data.get("files", []) or []
            ],
        )
