"""Application services for thumbnail derivation."""

from mediathumb.application.services.frame_encoder import FrameEncoder
from mediathumb.application.services.thumbnails import (
    compress_image,
    create_thumbnail,
    create_video_thumbnail,
)
from mediathumb.application.services.video_sampler import VideoFrameSampler

__all__ = [
    "FrameEncoder",
    "VideoFrameSampler",
    "compress_image",
    "create_thumbnail",
    "create_video_thumbnail",
]
