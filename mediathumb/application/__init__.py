"""Application layer - pipeline orchestration.

This layer contains:
- FrameEncoder: still-image decode, fit and re-encode
- VideoFrameSampler: timed frame capture handed to the FrameEncoder
"""

from mediathumb.application.services import (
    FrameEncoder,
    VideoFrameSampler,
    compress_image,
    create_thumbnail,
    create_video_thumbnail,
)

__all__ = [
    "FrameEncoder",
    "VideoFrameSampler",
    "compress_image",
    "create_thumbnail",
    "create_video_thumbnail",
]
