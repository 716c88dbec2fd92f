"""
Thread Archive Pipeline

Full pipeline orchestration:
Slack URL -> Resolve -> Fetch replies -> Save raw data -> Download images
-> Render Markdown -> ZIP archive
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from slack_archiver.config import Settings
from slack_archiver.errors import ConfigurationError
from slack_archiver.integrations.slack import (
    SlackClient,
    SlackMessage,
    parse_permalink,
)
from slack_archiver.models.archive import PipelineResult, PipelineState
from slack_archiver.services.media_fetcher import MediaFetcher
from slack_archiver.services.packager import ZipArchiver
from slack_archiver.services.renderer import ConversationRenderer
from slack_archiver.services.storage import ArchiveBundle

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "./slack_thread"


class ArchivePipeline:
    """
    Orchestrates archiving of one Slack thread.

    Pipeline steps:
    1. Resolve the permalink into channel / thread timestamp
    2. Fetch the thread from Slack
    3. Save raw_data.json (before anything else can fail)
    4. Download image attachments in parallel
    5. Render conversation.md
    6. Pack the ZIP archive

    A failure in any step except an individual image download moves the
    pipeline to FAILED and is re-raised. Files already written stay on disk.
    """

    def __init__(
        self,
        token: str,
        output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
        thread_source: Optional[SlackClient] = None,
        media_fetcher: Optional[MediaFetcher] = None,
        renderer: Optional[ConversationRenderer] = None,
        archiver: Optional[ZipArchiver] = None,
        media_timeout: Optional[float] = None,
    ):
        self.token = token
        self.output_dir = Path(output_dir)
        self._thread_source = thread_source
        self._media_fetcher = media_fetcher
        self.media_timeout = media_timeout
        self.renderer = renderer or ConversationRenderer()
        self.archiver = archiver or ZipArchiver()

        self.state = PipelineState.PENDING
        self.history: List[PipelineState] = []
        self.error: Optional[Exception] = None
        self.failed_state: Optional[PipelineState] = None

    @classmethod
    def from_settings(
        cls, settings: Settings, output_dir: Optional[Union[str, Path]] = None
    ) -> "ArchivePipeline":
        return cls(
            token=settings.slack_bot_token,
            output_dir=output_dir or settings.output_dir,
            media_timeout=settings.media_download_timeout,
        )

    @property
    def thread_source(self) -> SlackClient:
        if self._thread_source is None:
            self._thread_source = SlackClient(self.token)
        return self._thread_source

    @property
    def media_fetcher(self) -> MediaFetcher:
        if self._media_fetcher is None:
            self._media_fetcher = MediaFetcher(self.token, timeout=self.media_timeout)
        return self._media_fetcher

    def _enter(self, state: PipelineState) -> None:
        self.state = state
        self.history.append(state)
        logger.debug(f"Pipeline state -> {state.value}")

    async def run(self, url: str) -> PipelineResult:
        """
        Archive the Slack thread behind a permalink.

        Args:
            url: Slack thread permalink

        Returns:
            PipelineResult describing the finished bundle

        Raises:
            ConfigurationError: No Slack token was supplied
            InvalidUrlError: The URL is not a Slack thread permalink
            ThreadFetchError: Slack did not return the thread
            ArchiveError: The ZIP archive could not be written
        """
        if self.history:
            raise RuntimeError("ArchivePipeline instances run once; create a new one")

        try:
            # Step 1: Resolve the permalink (no I/O)
            self._enter(PipelineState.RESOLVING)
            if not self.token:
                raise ConfigurationError(
                    "SLACK_BOT_TOKEN is not set (environment or .env file)"
                )
            thread = parse_permalink(url)
            logger.info(
                f"Processing channel {thread.channel_id}, thread {thread.thread_ts}..."
            )

            bundle = await asyncio.to_thread(
                ArchiveBundle(self.output_dir, thread.thread_id).ensure
            )

            # Step 2: Fetch the thread, then persist it verbatim
            self._enter(PipelineState.FETCHING)
            raw_messages: List[Dict[str, Any]] = await self.thread_source.fetch_thread_replies(
                thread.channel_id, thread.thread_ts
            )
            logger.info(f"Fetched {len(raw_messages)} messages in total")
            await asyncio.to_thread(bundle.write_raw_data, raw_messages)
            messages = [SlackMessage.from_slack(m) for m in raw_messages]

            # Step 3: Download images (individual failures are tolerated)
            self._enter(PipelineState.DOWNLOADING)
            media_summary = await self.media_fetcher.fetch_all(messages, bundle)

            # Step 4: Render the conversation document
            self._enter(PipelineState.RENDERING)
            document = self.renderer.render(messages, thread)
            await asyncio.to_thread(bundle.write_document, document)

            # Step 5: Pack the archive
            self._enter(PipelineState.ARCHIVING)
            stale = len(bundle.image_files()) - media_summary.succeeded
            if stale > 0:
                logger.warning(
                    f"{stale} image file(s) in {bundle.images_dir} are left from an "
                    f"earlier run and will be packed although the document does not use them"
                )
            archive_path = await asyncio.to_thread(self.archiver.pack, bundle.root)

            self._enter(PipelineState.DONE)
            logger.info(f"Thread saved to {bundle.root}")

            return PipelineResult(
                success=True,
                state=self.state,
                channel_id=thread.channel_id,
                thread_ts=thread.thread_ts,
                thread_id=thread.thread_id,
                bundle_dir=str(bundle.root),
                archive_path=str(archive_path),
                message_count=len(messages),
                images_planned=media_summary.planned,
                images_downloaded=media_summary.succeeded,
                images_failed=media_summary.failed,
            )

        except Exception as e:
            self.failed_state = self.state
            self.error = e
            self._enter(PipelineState.FAILED)
            logger.error(f"Archiving failed during {self.failed_state.value}: {e}")
            raise
