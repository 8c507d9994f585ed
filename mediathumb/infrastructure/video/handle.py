"""Transient decode handle backed by a temporary file."""

import asyncio
import mimetypes
import os
import tempfile
from pathlib import Path
from types import TracebackType

from mediathumb.commons.telemetry import get_logger
from mediathumb.domain.exceptions import LoadError

logger = get_logger(__name__)


class VideoDecodeHandle:
    """Scoped ownership of a video payload written to a private temp file.

    The file is the locator the decoder reads from. It is created on
    ``acquire`` and deleted exactly once by ``release``, whichever way the
    owning ``async with`` block exits.
    """

    def __init__(
        self,
        data: bytes,
        mime_type: str | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        self._data = data
        self._suffix = (mimetypes.guess_extension(mime_type) if mime_type else None) or ".bin"
        self._temp_dir = temp_dir
        self._path: Path | None = None
        self._released = False

    @property
    def path(self) -> Path:
        if self._path is None or self._released:
            raise RuntimeError("Decode handle is not acquired")
        return self._path

    @property
    def released(self) -> bool:
        return self._released

    async def acquire(self) -> Path:
        """Write the payload to a fresh temporary file.

        Raises:
            LoadError: If the payload cannot be staged for decoding.
        """
        if self._path is not None or self._released:
            raise RuntimeError("Decode handle cannot be reused")

        try:
            fd, name = tempfile.mkstemp(
                prefix="mediathumb-", suffix=self._suffix, dir=self._temp_dir
            )
        except OSError as e:
            self._released = True
            raise LoadError("load", f"Failed to stage video: {e}") from e

        # Owned from here on, so a cancelled write still removes the file.
        self._path = Path(name)
        loop = asyncio.get_event_loop()
        try:
            await loop.run_in_executor(None, self._write, fd)
        except OSError as e:
            await self.release()
            raise LoadError("load", f"Failed to stage video: {e}") from e
        except BaseException:
            await self.release()
            raise

        logger.debug("Acquired video handle", extra={"locator": str(self._path)})
        return self._path

    async def release(self) -> None:
        """Delete the backing file. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        if self._path is None:
            return
        self._path.unlink(missing_ok=True)
        logger.debug("Released video handle", extra={"locator": str(self._path)})

    def _write(self, fd: int) -> None:
        """Write the payload through an open descriptor and close it.

        Args:
            fd: Descriptor of the freshly created temp file.
        """
        with os.fdopen(fd, "wb") as f:
            f.write(self._data)

    async def __aenter__(self) -> "VideoDecodeHandle":
        await self.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.release()
