"""Video decoding services."""

from mediathumb.infrastructure.video.base import VideoDecoderBase
from mediathumb.infrastructure.video.ffmpeg_decoder import FFmpegVideoDecoder
from mediathumb.infrastructure.video.handle import VideoDecodeHandle

__all__ = [
    # Base classes
    "VideoDecoderBase",
    "VideoDecodeHandle",
    # Implementations
    "FFmpegVideoDecoder",
]
