"""Infrastructure factory for creating codec instances from configuration."""

from typing import Any, cast

from mediathumb.commons.settings.models import Settings
from mediathumb.infrastructure.imaging import ImageCodecBase, PillowImageCodec
from mediathumb.infrastructure.video import FFmpegVideoDecoder, VideoDecoderBase


class InfrastructureFactory:
    """Factory for creating infrastructure service instances.

    Instances are cached per factory. They hold configuration only, never
    per-call state, so one instance may serve concurrent calls.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize factory with settings.

        Args:
            settings: Application settings.
        """
        self._settings = settings
        self._instances: dict[str, Any] = {}

    def get_image_codec(self) -> ImageCodecBase:
        """Get the still-image codec."""
        if "image_codec" not in self._instances:
            self._instances["image_codec"] = PillowImageCodec()
        return cast("ImageCodecBase", self._instances["image_codec"])

    def get_video_decoder(self) -> VideoDecoderBase:
        """Get the video decoder configured from video settings."""
        if "video_decoder" not in self._instances:
            video_settings = self._settings.video
            self._instances["video_decoder"] = FFmpegVideoDecoder(
                ffmpeg_path=video_settings.ffmpeg_path,
                ffprobe_path=video_settings.ffprobe_path,
                temp_dir=video_settings.temp_dir,
            )
        return cast("VideoDecoderBase", self._instances["video_decoder"])

    def clear_cache(self) -> None:
        """Drop cached instances so the next getter rebuilds them."""
        self._instances.clear()
