"""Video thumbnail sampling service."""

import math
from typing import Self

from mediathumb.application.services.frame_encoder import FrameEncoder
from mediathumb.commons.settings.models import Settings, VideoSettings
from mediathumb.commons.telemetry import LogContext, get_logger, timed
from mediathumb.domain.models import CompressedResult, MediaBuffer
from mediathumb.infrastructure.factory import InfrastructureFactory
from mediathumb.infrastructure.video import FFmpegVideoDecoder, VideoDecoderBase


class VideoFrameSampler:
    """Capture one frame from a video and compress it into a thumbnail.

    Per call the stages run strictly in order: load metadata, seek,
    capture at native size, then a first-pass encode handed to the
    ``FrameEncoder`` for the bounded recompress.
    """

    def __init__(
        self,
        decoder: VideoDecoderBase | None = None,
        encoder: FrameEncoder | None = None,
        settings: VideoSettings | None = None,
    ) -> None:
        """Initialize the sampler.

        Args:
            decoder: Video decoder. Defaults to FFmpeg on PATH.
            encoder: Frame encoder used for both encode passes.
            settings: Offsets, bounds and qualities.
        """
        self._settings = settings or VideoSettings()
        self._decoder = decoder or FFmpegVideoDecoder(
            ffmpeg_path=self._settings.ffmpeg_path,
            ffprobe_path=self._settings.ffprobe_path,
            temp_dir=self._settings.temp_dir,
        )
        self._encoder = encoder or FrameEncoder()
        self._logger = get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        factory = InfrastructureFactory(settings)
        return cls(
            decoder=factory.get_video_decoder(),
            encoder=FrameEncoder.from_settings(settings),
            settings=settings.video,
        )

    @timed
    async def create_video_thumbnail(
        self,
        buffer: MediaBuffer | bytes,
        time_offset: float | None = None,
    ) -> CompressedResult:
        """Create a JPEG thumbnail from a frame of a video.

        The capture time is ``min(time_offset, duration / 2)``, floored at 0.

        Args:
            buffer: Encoded video.
            time_offset: Requested capture time in seconds.

        Returns:
            The compressed thumbnail.

        Raises:
            ValueError: If ``time_offset`` is NaN.
            LoadError: If the video cannot be loaded, seeked or captured.
            DecodeError: If the captured frame cannot be re-decoded.
            EncodeError: If either encode pass fails.
        """
        if time_offset is None:
            time_offset = self._settings.time_offset_seconds
        if math.isnan(time_offset):
            raise ValueError("Time offset must be a number, got NaN")

        if isinstance(buffer, MediaBuffer):
            data, mime_type = buffer.data, buffer.mime_type
        else:
            data, mime_type = bytes(buffer), None

        with LogContext(operation="create_video_thumbnail"):
            async with self._decoder.open(data, mime_type) as handle:
                probe = await self._decoder.probe(handle)
                seek_target = probe.seek_target(time_offset)
                self._logger.debug(
                    "Seeking video",
                    extra={
                        "requested_offset": time_offset,
                        "seek_target": seek_target,
                        "duration_seconds": probe.duration_seconds,
                    },
                )
                surface = await self._decoder.capture_frame(handle, seek_target)

            capture = await self._encoder.encode_surface(
                surface, self._settings.capture_quality
            )
            return await self._encoder.compress_image(
                capture,
                self._settings.thumbnail_max_width,
                self._settings.thumbnail_max_height,
                self._settings.thumbnail_quality,
            )
