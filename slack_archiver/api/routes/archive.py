"""
Archive API Routes

POST /api/archive - Archive a Slack thread into a local bundle
"""

from dataclasses import asdict
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Optional
import logging
import time

from slack_archiver.config import get_settings
from slack_archiver.errors import (
    ArchiveError,
    ConfigurationError,
    InvalidUrlError,
    ThreadFetchError,
)
from slack_archiver.services.pipeline import ArchivePipeline

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_STATUS = {
    InvalidUrlError: 400,
    ConfigurationError: 500,
    ThreadFetchError: 502,
    ArchiveError: 500,
}


class ArchiveRequest(BaseModel):
    """Request model for the archive endpoint."""

    url: str = Field(..., description="Slack thread permalink")
    output_dir: Optional[str] = Field(
        None, description="Output directory (uses OUTPUT_DIR setting if not provided)"
    )


@router.post("/archive")
async def archive_thread(request: ArchiveRequest):
    """
    Archive a Slack thread.

    Pipeline:
    1. Resolve the permalink and fetch the thread
    2. Save raw_data.json, download images
    3. Render conversation.md and pack the ZIP archive

    Example:
    - POST /api/archive {"url": "https://myworkspace.slack.com/archives/C123ABC/p1741754154975769"}
    """
    start_time = time.time()
    pipeline = ArchivePipeline.from_settings(get_settings(), output_dir=request.output_dir)

    try:
        result = await pipeline.run(request.url)
    except tuple(ERROR_STATUS) as e:
        processing_time = time.time() - start_time
        raise HTTPException(
            status_code=ERROR_STATUS[type(e)],
            detail={
                "success": False,
                "failed_state": pipeline.failed_state.value if pipeline.failed_state else None,
                "message": f"Archiving failed: {e}",
                "processing_time_seconds": round(processing_time, 2),
            },
        )

    processing_time = time.time() - start_time
    logger.info(f"Archived thread {result.thread_id} in {processing_time:.2f}s")

    response = asdict(result)
    response["processing_time_seconds"] = round(processing_time, 2)
    return response
