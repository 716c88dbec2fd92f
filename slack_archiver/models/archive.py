"""
Archive Run Models

State and result of one pipeline run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PipelineState(str, Enum):
    """Stages of an archive run."""

    PENDING = "pending"
    RESOLVING = "resolving"
    FETCHING = "fetching"
    DOWNLOADING = "downloading"
    RENDERING = "rendering"
    ARCHIVING = "archiving"
    DONE = "done"
    FAILED = "failed"


@dataclass
class PipelineResult:
    """Result of a completed archive run."""

    success: bool
    state: PipelineState
    channel_id: str
    thread_ts: str
    thread_id: str
    bundle_dir: str
    archive_path: str
    message_count: int = 0
    images_planned: int = 0
    images_downloaded: int = 0
    images_failed: int = 0
    error: Optional[str] = None
