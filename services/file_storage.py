"""
Filesystem handling for uploaded profile files.

Uploads land in a transient directory and are deleted once registration
finishes, whatever the outcome. A retained copy is kept in a separate
directory for audit and re-processing.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from auth.exceptions import InternalError, ValidationError
from config import Config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadedFile:
    """A file received from the client, stored at a transient location."""

    path: Path
    original_filename: str


@dataclass(frozen=True)
class RetainedFile:
    """A durable copy of an uploaded file."""

    path: Path


def _safe_name(filename: str | None) -> str:
    # Strip any directory components a client may send
    name = Path(filename or "").name
    return name or "upload.json"


class FileStorage:
    def __init__(
        self,
        upload_dir: str | Path,
        retained_dir: str | Path,
        max_upload_bytes: int | None = None,
    ) -> None:
        self._upload_dir = Path(upload_dir)
        self._retained_dir = Path(retained_dir)
        self._max_upload_bytes = max_upload_bytes or Config.MAX_UPLOAD_BYTES

    @classmethod
    def from_config(cls) -> "FileStorage":
        return cls(Config.UPLOAD_DIR, Config.RETAINED_DIR, Config.MAX_UPLOAD_BYTES)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    @property
    def retained_dir(self) -> Path:
        return self._retained_dir

    async def receive(self, filename: str | None, content: bytes) -> UploadedFile:
        """Write uploaded bytes to the transient upload directory."""
        if len(content) > self._max_upload_bytes:
            raise ValidationError(
                f"File exceeds the maximum upload size of {self._max_upload_bytes} bytes."
            )
        original = _safe_name(filename)
        path = self._upload_dir / f"{int(time.time() * 1000)}-{uuid4().hex[:8]}-{original}"
        try:
            await asyncio.to_thread(self._write, path, content)
        except OSError as exc:
            logger.exception("Could not write upload %s", path)
            raise InternalError("Error saving uploaded file.") from exc
        logger.info("Received upload %s (%d bytes)", path, len(content))
        return UploadedFile(path=path, original_filename=original)

    async def read(self, upload: UploadedFile) -> bytes:
        return await asyncio.to_thread(upload.path.read_bytes)

    async def retain(self, upload: UploadedFile) -> RetainedFile:
        """Copy an upload into the retained directory. The original is left in place."""
        target = self._retained_dir / f"copy-{uuid4().hex[:12]}-{upload.path.name}"
        await asyncio.to_thread(self._copy, upload.path, target)
        logger.info("Retained %s as %s", upload.path, target)
        return RetainedFile(path=target)

    async def discard(self, path: str | Path) -> None:
        """
        Delete a file, best effort.

        A missing file is not an error. Other OS errors are logged and swallowed
        so cleanup never masks the failure that triggered it.
        """
        path = Path(path)
        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            logger.warning("File already removed: %s", path)
        except OSError:
            logger.exception("Error deleting file: %s", path)
        else:
            logger.info("File removed: %s", path)

    @staticmethod
    def _write(path: Path, content: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        try:
            path.write_bytes(content)
        except OSError:
            # Never leave a partially written upload behind
            path.unlink(missing_ok=True)
            raise

    @staticmethod
    def _copy(source: Path, target: Path) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
