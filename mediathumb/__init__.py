"""Bounded JPEG thumbnails from image and video buffers."""

from mediathumb.application import (
    FrameEncoder,
    VideoFrameSampler,
    compress_image,
    create_thumbnail,
    create_video_thumbnail,
)
from mediathumb.domain import (
    CompressedResult,
    DecodeError,
    DerivedDimensions,
    EncodeError,
    LoadError,
    MediaBuffer,
    MediaPipelineException,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "compress_image",
    "create_video_thumbnail",
    "create_thumbnail",
    "FrameEncoder",
    "VideoFrameSampler",
    # Models
    "MediaBuffer",
    "CompressedResult",
    "DerivedDimensions",
    # Errors
    "MediaPipelineException",
    "DecodeError",
    "LoadError",
    "EncodeError",
]
