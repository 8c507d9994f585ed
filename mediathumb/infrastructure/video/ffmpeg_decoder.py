"""FFmpeg implementation of single-frame video decoding."""

import asyncio
import io
import json
import math
import subprocess
from pathlib import Path
from typing import Any

from PIL import Image

from mediathumb.commons.telemetry import get_logger
from mediathumb.domain.exceptions import LoadError
from mediathumb.domain.models import VideoProbe
from mediathumb.infrastructure.video.base import VideoDecoderBase
from mediathumb.infrastructure.video.handle import VideoDecodeHandle

logger = get_logger(__name__)


class FFmpegVideoDecoder(VideoDecoderBase):
    """FFmpeg-based metadata probing and frame capture.

    Requires ffmpeg and ffprobe to be installed and available in PATH,
    or configured explicitly.
    """

    def __init__(
        self,
        ffmpeg_path: str = "ffmpeg",
        ffprobe_path: str = "ffprobe",
        temp_dir: Path | None = None,
    ) -> None:
        """Initialize FFmpeg video decoder.

        Args:
            ffmpeg_path: Path to ffmpeg executable.
            ffprobe_path: Path to ffprobe executable.
            temp_dir: Directory for decode handle files, None for system default.
        """
        super().__init__(temp_dir=temp_dir)
        self._ffmpeg = ffmpeg_path
        self._ffprobe = ffprobe_path

    async def probe(self, handle: VideoDecodeHandle) -> VideoProbe:
        """Read container and stream metadata with ffprobe."""
        cmd = [
            self._ffprobe,
            "-v",
            "error",
            "-print_format",
            "json",
            "-show_format",
            "-show_streams",
            str(handle.path),
        ]

        result = await self._run(cmd, stage="metadata")

        try:
            data = json.loads(result.stdout)
        except (json.JSONDecodeError, TypeError) as e:
            raise LoadError("metadata", f"Unreadable probe output: {e}") from e

        video_stream = next(
            (
                stream
                for stream in data.get("streams", [])
                if stream.get("codec_type") == "video"
            ),
            None,
        )
        if video_stream is None:
            raise LoadError("metadata", "No video stream found")

        duration = _parse_duration(data.get("format", {}), video_stream)
        if duration is None:
            raise LoadError("metadata", "Video has no playable duration")

        probe = VideoProbe(
            duration_seconds=duration,
            width=int(video_stream.get("width", 0)),
            height=int(video_stream.get("height", 0)),
            codec=video_stream.get("codec_name", "unknown"),
        )
        logger.debug(
            "Loaded video metadata",
            extra={
                "duration_seconds": probe.duration_seconds,
                "width": probe.width,
                "height": probe.height,
                "codec": probe.codec,
            },
        )
        return probe

    async def capture_frame(
        self,
        handle: VideoDecodeHandle,
        timestamp: float,
    ) -> Image.Image:
        """Seek and render one frame as a native-size RGB surface."""
        cmd = [
            self._ffmpeg,
            "-v",
            "error",
            "-ss",
            f"{timestamp:.3f}",
            "-i",
            str(handle.path),
            "-an",
            "-frames:v",
            "1",
            "-f",
            "image2pipe",
            "-c:v",
            "png",
            "-",
        ]

        result = await self._run(cmd, stage="seek")
        if not result.stdout:
            raise LoadError("seek", f"No frame available at {timestamp:.3f}s")

        loop = asyncio.get_event_loop()
        surface = await loop.run_in_executor(None, _load_frame, result.stdout)
        logger.debug(
            "Captured video frame",
            extra={"timestamp": timestamp, "width": surface.width, "height": surface.height},
        )
        return surface

    async def _run(
        self,
        cmd: list[str],
        stage: str,
    ) -> subprocess.CompletedProcess[bytes]:
        """Run an ffmpeg/ffprobe command off the event loop."""
        loop = asyncio.get_event_loop()
        try:
            return await loop.run_in_executor(
                None,
                lambda: subprocess.run(cmd, capture_output=True, check=True),
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            raise LoadError(stage, stderr or f"exit status {e.returncode}") from e
        except OSError as e:
            raise LoadError(stage, f"Could not run {cmd[0]}: {e}") from e


def _parse_duration(format_info: dict[str, Any], stream: dict[str, Any]) -> float | None:
    """Container duration, falling back to the stream's own duration."""
    for raw in (format_info.get("duration"), stream.get("duration")):
        try:
            duration = float(raw)
        except (TypeError, ValueError):
            continue
        if math.isfinite(duration) and duration > 0:
            return duration
    return None


def _load_frame(data: bytes) -> Image.Image:
    try:
        with Image.open(io.BytesIO(data)) as frame:
            return frame.convert("RGB")
    except (OSError, ValueError) as e:
        raise LoadError("capture", f"Could not render captured frame: {e}") from e
