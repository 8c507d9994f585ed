"""Infrastructure layer - Pillow and FFmpeg backed implementations."""

from mediathumb.infrastructure.factory import InfrastructureFactory
from mediathumb.infrastructure.imaging import ImageCodecBase, PillowImageCodec
from mediathumb.infrastructure.video import (
    FFmpegVideoDecoder,
    VideoDecodeHandle,
    VideoDecoderBase,
)

__all__ = [
    "InfrastructureFactory",
    # Imaging
    "ImageCodecBase",
    "PillowImageCodec",
    # Video
    "VideoDecoderBase",
    "VideoDecodeHandle",
    "FFmpegVideoDecoder",
]
