"""Abstract base class for video decoding."""

from abc import ABC, abstractmethod
from pathlib import Path

from PIL import Image

from mediathumb.domain.models import VideoProbe
from mediathumb.infrastructure.video.handle import VideoDecodeHandle


class VideoDecoderBase(ABC):
    """Load just enough of a video to capture one still frame.

    Implementations should handle:
    - FFmpeg / FFprobe executables
    """

    def __init__(self, temp_dir: Path | None = None) -> None:
        self._temp_dir = temp_dir

    def open(self, data: bytes, mime_type: str | None = None) -> VideoDecodeHandle:
        """Create a fresh, unacquired decode handle for a payload.

        Use it as ``async with decoder.open(data) as handle``.
        """
        return VideoDecodeHandle(data, mime_type=mime_type, temp_dir=self._temp_dir)

    @abstractmethod
    async def probe(self, handle: VideoDecodeHandle) -> VideoProbe:
        """Load stream metadata without decoding frames.

        Args:
            handle: Acquired decode handle.

        Returns:
            Duration and native frame size.

        Raises:
            LoadError: If the container or codec cannot be read, or the
                video has no positive duration.
        """

    @abstractmethod
    async def capture_frame(
        self,
        handle: VideoDecodeHandle,
        timestamp: float,
    ) -> Image.Image:
        """Seek to ``timestamp`` and render that frame at native size.

        Args:
            handle: Acquired decode handle.
            timestamp: Time in seconds.

        Returns:
            RGB surface holding the captured frame.

        Raises:
            LoadError: If seeking or rendering fails.
        """
