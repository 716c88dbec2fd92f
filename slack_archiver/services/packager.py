"""
Archive Packager

Zips the rendered document and the images directory of a bundle into
<bundle>/<thread_id>_archive.zip. Missing inputs are skipped.
"""

import logging
import zipfile
from pathlib import Path
from typing import Union

from slack_archiver.errors import ArchiveError
from slack_archiver.services.storage import ArchiveBundle

logger = logging.getLogger(__name__)


class ZipArchiver:
    """Packs a bundle directory into a single deflated ZIP file."""

    def pack(self, bundle_dir: Union[str, Path]) -> Path:
        """
        Create the archive for a bundle.

        Args:
            bundle_dir: Bundle directory, named after the thread id

        Returns:
            Path of the written archive

        Raises:
            ArchiveError: If the archive cannot be written
        """
        bundle_dir = Path(bundle_dir)
        bundle = ArchiveBundle(bundle_dir.parent, bundle_dir.name)
        archive_path = bundle.archive_path

        added = 0
        try:
            with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as z:
                if bundle.document_path.is_file():
                    z.write(bundle.document_path, bundle.document_path.name)
                    added += 1
                else:
                    logger.warning(f"No document at {bundle.document_path}, skipping")

                for image in bundle.image_files():
                    z.write(image, image.relative_to(bundle.root).as_posix())
                    added += 1
        except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
            logger.error(f"Error writing archive {archive_path}: {e}")
            raise ArchiveError(f"Could not write archive {archive_path}: {e}") from e

        logger.info(f"Created archive {archive_path} ({added} files)")
        return archive_path
