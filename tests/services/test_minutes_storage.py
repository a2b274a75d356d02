"""Tests for minutes file storage."""

import re
from pathlib import Path

import pytest

from src.errors import BackendError, FileTooLargeError
from src.storage.minutes_storage import MinutesStorage, minutes_object_path


class TestObjectPath:
    """Tests for stored object naming."""

    def test_path_uses_meeting_and_extension(self):
        """Paths are meeting id, epoch millis and the original extension."""
        path = minutes_object_path("m-1", "Minit Mesyuarat.PDF")
        assert re.fullmatch(r"m-1/\d{13}\.pdf", path)

    def test_missing_extension(self):
        """Files without an extension are stored as .bin."""
        assert minutes_object_path("m-1", None).endswith(".bin")
        assert minutes_object_path("m-1", "minit").endswith(".bin")


class TestMinutesStorage:
    """Tests for MinutesStorage."""

    @pytest.mark.asyncio
    async def test_upload_writes_file(self, tmp_path: Path):
        """Uploads land under the bucket directory."""
        storage = MinutesStorage(root=tmp_path, public_base_url="/storage/")
        await storage.upload("m-1/1.pdf", b"%PDF-1.4")

        assert (tmp_path / "meeting-minutes" / "m-1" / "1.pdf").read_bytes() == (
            b"%PDF-1.4"
        )
        assert storage.public_url("m-1/1.pdf") == "/storage/meeting-minutes/m-1/1.pdf"

    @pytest.mark.asyncio
    async def test_size_ceiling(self, tmp_path: Path):
        """Content over the ceiling is refused and nothing is written."""
        storage = MinutesStorage(root=tmp_path, max_bytes=4)
        with pytest.raises(FileTooLargeError):
            await storage.upload("m-1/1.pdf", b"12345")
        assert not storage.bucket_dir.exists()

    def test_size_check_before_read(self, tmp_path: Path):
        """The declared size can be checked without the content."""
        storage = MinutesStorage(root=tmp_path, max_bytes=10 * 1024 * 1024)
        storage.check_size(10 * 1024 * 1024)
        with pytest.raises(FileTooLargeError) as exc_info:
            storage.check_size(10 * 1024 * 1024 + 1)
        assert "10MB" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_existing_file_not_overwritten(self, tmp_path: Path):
        """Writing the same path twice is refused."""
        storage = MinutesStorage(root=tmp_path)
        await storage.upload("m-1/1.pdf", b"first")
        with pytest.raises(BackendError):
            await storage.upload("m-1/1.pdf", b"second")
        assert (storage.bucket_dir / "m-1" / "1.pdf").read_bytes() == b"first"

    @pytest.mark.asyncio
    async def test_path_cannot_escape_bucket(self, tmp_path: Path):
        """Relative paths leading outside the bucket are refused."""
        storage = MinutesStorage(root=tmp_path)
        with pytest.raises(BackendError):
            await storage.upload("../../escape.txt", b"x")
        assert not (tmp_path.parent / "escape.txt").exists()
