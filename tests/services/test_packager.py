"""
Tests for ZIP packaging of a bundle.
"""

import zipfile

import pytest

from slack_archiver.errors import ArchiveError
from slack_archiver.services.packager import ZipArchiver
from slack_archiver.services.storage import ArchiveBundle


@pytest.fixture
def bundle(tmp_path):
    return ArchiveBundle(tmp_path, "1741754154975769").ensure()


def test_pack_document_and_images(bundle):
    bundle.write_document("# thread\n")
    bundle.image_path("image_1.png").write_bytes(b"png")
    bundle.image_path("image_2.gif").write_bytes(b"gif")
    bundle.write_raw_data([{"ts": "1.000001"}])

    archive_path = ZipArchiver().pack(bundle.root)

    assert archive_path == bundle.root / "1741754154975769_archive.zip"
    with zipfile.ZipFile(archive_path) as z:
        assert sorted(z.namelist()) == [
            "conversation.md",
            "images/image_1.png",
            "images/image_2.gif",
        ]
        assert z.read("images/image_1.png") == b"png"
        assert z.getinfo("conversation.md").compress_type == zipfile.ZIP_DEFLATED


def test_pack_without_images_contains_only_document(bundle):
    bundle.write_document("# thread\n")

    archive_path = ZipArchiver().pack(bundle.root)

    with zipfile.ZipFile(archive_path) as z:
        assert z.namelist() == ["conversation.md"]


def test_pack_with_nothing_is_an_empty_archive(tmp_path):
    bundle_dir = tmp_path / "123456789"
    bundle_dir.mkdir()

    archive_path = ZipArchiver().pack(bundle_dir)

    with zipfile.ZipFile(archive_path) as z:
        assert z.namelist() == []


def test_pack_into_missing_directory_raises_archive_error(tmp_path):
    with pytest.raises(ArchiveError) as exc_info:
        ZipArchiver().pack(tmp_path / "does-not-exist")

    assert isinstance(exc_info.value.__cause__, OSError)
