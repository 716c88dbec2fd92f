"""
Media Fetcher

Downloads every image attached to a thread into the bundle's images directory.

- Numbering (image_1, image_2, ...) is assigned up front in message-then-attachment
  order, so it is the same whatever order the downloads finish in
- All downloads run at once and are joined with a single asyncio.gather()
- A failed download is logged and dropped; its number is not reused
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import requests

from slack_archiver.errors import MediaDownloadError
from slack_archiver.integrations.slack.models import (
    Attachment,
    ResolvedMedia,
    SlackMessage,
)
from slack_archiver.services.storage import ArchiveBundle
from slack_archiver.utils.helpers import extension_from_mime

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass
class MediaJob:
    """One planned image download."""

    message: SlackMessage
    attachment: Attachment
    local_file_name: str
    target_path: Path
    relative_path: str


@dataclass
class MediaFetchSummary:
    """Outcome of downloading all images of a thread."""

    planned: int = 0
    resolved: List[ResolvedMedia] = field(default_factory=list)
    errors: List[MediaDownloadError] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return len(self.resolved)

    @property
    def failed(self) -> int:
        return len(self.errors)


class MediaFetcher:
    """Concurrent, failure-tolerant image downloader."""

    def __init__(self, token: str, timeout: Optional[float] = None):
        self.token = token
        self.timeout = timeout

    def plan(self, messages: List[SlackMessage], bundle: ArchiveBundle) -> List[MediaJob]:
        """Assign local file names to every image attachment, in traversal order."""
        jobs = []
        counter = 1
        for message in messages:
            for attachment in message.image_attachments:
                file_name = f"image_{counter}.{extension_from_mime(attachment.mime_type)}"
                jobs.append(
                    MediaJob(
                        message=message,
                        attachment=attachment,
                        local_file_name=file_name,
                        target_path=bundle.image_path(file_name),
                        relative_path=bundle.relative_image_path(file_name),
                    )
                )
                counter += 1
        return jobs

    async def fetch_all(
        self, messages: List[SlackMessage], bundle: ArchiveBundle
    ) -> MediaFetchSummary:
        """
        Download all image attachments and attach ResolvedMedia to their messages.

        Args:
            messages: Thread messages in service order (mutated in place)
            bundle: Bundle whose images directory receives the files

        Returns:
            MediaFetchSummary with the resolved media and the swallowed errors
        """
        jobs = self.plan(messages, bundle)
        summary = MediaFetchSummary(planned=len(jobs))

        if not jobs:
            logger.info("No image attachments to download")
            return summary

        logger.info(f"Downloading {len(jobs)} images in parallel...")
        results = await asyncio.gather(*(self._run_job(job) for job in jobs))

        # gather() keeps submission order, so media lands in traversal order
        for job, result in zip(jobs, results):
            if isinstance(result, MediaDownloadError):
                summary.errors.append(result)
                continue
            job.message.media.append(result)
            summary.resolved.append(result)

        logger.info(
            f"Image download summary: planned={summary.planned}, "
            f"saved={summary.succeeded}, failed={summary.failed}"
        )
        return summary

    async def _run_job(self, job: MediaJob) -> Union[ResolvedMedia, MediaDownloadError]:
        try:
            await asyncio.to_thread(
                self.download, job.attachment.source_url, job.target_path
            )
        except Exception as e:
            job.target_path.unlink(missing_ok=True)
            error = MediaDownloadError(
                f"Failed to download {job.attachment.original_name or job.attachment.source_url}: {e}"
            )
            error.__cause__ = e
            logger.error(f"Image download error: {job.attachment.source_url}: {e}")
            return error

        logger.info(f"Downloaded: {job.target_path}")
        return ResolvedMedia(
            local_file_name=job.local_file_name,
            relative_path=job.relative_path,
            original_name=job.attachment.original_name,
        )

    def download(self, url: str, output_path: Path) -> None:
        """
        Stream one private Slack file to disk.

        Raises:
            MediaDownloadError: If the URL is empty or Slack answers with a login page
            requests.RequestException: On transport or HTTP errors
        """
        if not url:
            raise MediaDownloadError("Attachment has no download URL")

        headers = {"Authorization": f"Bearer {self.token}"}
        # One request per call; worker threads share no connection state
        with requests.get(
            url, headers=headers, stream=True, timeout=self.timeout
        ) as response:
            response.raise_for_status()

            # An HTML body is the Slack sign-in page, not the file
            content_type = response.headers.get("Content-Type", "")
            if content_type.startswith("text/html"):
                raise MediaDownloadError(
                    f"Expected image data but got {content_type} (check token scopes)"
                )

            with open(output_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
