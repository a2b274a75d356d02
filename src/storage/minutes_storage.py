"""Local file storage for meeting minutes.

Files live under ``<storage_dir>/<bucket>/<path>`` and are served read-only
by the app under ``<storage_public_base_url>/<bucket>/<path>``. Stored
files are never overwritten or removed through this class.
"""

import asyncio
import logging
from pathlib import Path, PurePosixPath

from src.config import settings
from src.errors import BackendError, BackendUnavailableError, FileTooLargeError
from src.models.base import utc_now

logger = logging.getLogger(__name__)

MINUTES_BUCKET = "meeting-minutes"


def minutes_object_path(meeting_id: str, filename: str | None) -> str:
    """Build ``{meeting_id}/{epoch_millis}.{ext}`` for an uploaded file."""
    suffix = PurePosixPath(filename or "").suffix.lower()
    ext = suffix.lstrip(".") or "bin"
    millis = int(utc_now().timestamp() * 1000)
    return f"{meeting_id}/{millis}.{ext}"


class MinutesStorage:
    """Bucket-style storage backed by a local directory."""

    def __init__(
        self,
        root: str | Path | None = None,
        public_base_url: str | None = None,
        bucket: str = MINUTES_BUCKET,
        max_bytes: int | None = None,
    ):
        self.root = Path(root or settings.storage_dir)
        self.public_base_url = (
            public_base_url or settings.storage_public_base_url
        ).rstrip("/")
        self.bucket = bucket
        self.max_bytes = max_bytes or settings.max_minutes_bytes

    @property
    def bucket_dir(self) -> Path:
        """Directory holding this bucket's files."""
        return self.root / self.bucket

    def check_size(self, size: int) -> None:
        """Reject uploads above the size ceiling before anything is written.

        Raises:
            FileTooLargeError: ``size`` exceeds ``max_bytes``
        """
        if size > self.max_bytes:
            max_mb = self.max_bytes // (1024 * 1024)
            msg = f"File too large. Maximum size: {max_mb}MB"
            raise FileTooLargeError(msg)

    def _resolve(self, path: str) -> Path:
        target = (self.bucket_dir / path).resolve()
        if not target.is_relative_to(self.bucket_dir.resolve()):
            msg = f"Invalid storage path: {path}"
            raise BackendError(msg)
        return target

    def _write(self, target: Path, content: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "xb") as f:
            f.write(content)

    async def upload(self, path: str, content: bytes) -> str:
        """Store ``content`` at ``path`` inside the bucket.

        Returns:
            The bucket-relative path that was written

        Raises:
            FileTooLargeError: Content exceeds the size ceiling
            BackendError: Path escapes the bucket or already exists
            BackendUnavailableError: The filesystem could not be written
        """
        self.check_size(len(content))
        target = self._resolve(path)
        try:
            await asyncio.to_thread(self._write, target, content)
        except FileExistsError as e:
            raise BackendError(f"The resource already exists: {path}") from e
        except OSError as e:
            logger.error(f"Failed to store {path}: {e}")
            raise BackendUnavailableError(str(e)) from e
        logger.info(f"Stored {len(content)} bytes at {self.bucket}/{path}")
        return path

    def public_url(self, path: str) -> str:
        """Public URL a stored file is served from."""
        return f"{self.public_base_url}/{self.bucket}/{path}"
