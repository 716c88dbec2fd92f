"""
Bundle Storage

Owns the on-disk layout of one archived thread:

    <output_dir>/<thread_id>/raw_data.json
    <output_dir>/<thread_id>/conversation.md
    <output_dir>/<thread_id>/images/image_<N>.<ext>
    <output_dir>/<thread_id>/<thread_id>_archive.zip
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

logger = logging.getLogger(__name__)

RAW_DATA_FILENAME = "raw_data.json"
DOCUMENT_FILENAME = "conversation.md"
IMAGES_DIR_NAME = "images"
ARCHIVE_SUFFIX = "_archive.zip"


class ArchiveBundle:
    """Directory tree produced for one archived thread."""

    def __init__(self, output_dir: Union[str, Path], thread_id: str):
        self.output_dir = Path(output_dir).expanduser()
        self.thread_id = thread_id
        self.root = self.output_dir / thread_id

    @property
    def raw_data_path(self) -> Path:
        return self.root / RAW_DATA_FILENAME

    @property
    def document_path(self) -> Path:
        return self.root / DOCUMENT_FILENAME

    @property
    def images_dir(self) -> Path:
        return self.root / IMAGES_DIR_NAME

    @property
    def archive_path(self) -> Path:
        return self.root / f"{self.thread_id}{ARCHIVE_SUFFIX}"

    def ensure(self) -> "ArchiveBundle":
        """Create the bundle and images directories; existing ones are reused."""
        self.images_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Bundle directory ready: {self.root}")
        return self

    def image_files(self) -> List[Path]:
        """All files under images/, sorted; empty when the directory is missing."""
        if not self.images_dir.is_dir():
            return []
        return sorted(p for p in self.images_dir.rglob("*") if p.is_file())

    def image_path(self, file_name: str) -> Path:
        return self.images_dir / file_name

    def relative_image_path(self, file_name: str) -> str:
        # Markdown link path, always forward slashes
        return f"{IMAGES_DIR_NAME}/{file_name}"

    def write_raw_data(self, raw_messages: Any) -> Path:
        self.raw_data_path.write_text(
            json.dumps(raw_messages, indent=2, ensure_ascii=False), encoding="utf-8"
        )
        logger.info(f"Saved raw thread data: {self.raw_data_path}")
        return self.raw_data_path

    def read_raw_data(self) -> Any:
        return json.loads(self.raw_data_path.read_text(encoding="utf-8"))

    def write_document(self, content: str) -> Path:
        self.document_path.write_text(content, encoding="utf-8")
        logger.info(f"Saved conversation document: {self.document_path}")
        return self.document_path
