"""Domain models."""

from mediathumb.domain.models.media import (
    JPEG_MIME_TYPE,
    CompressedResult,
    MediaBuffer,
    VideoProbe,
)

__all__ = [
    "JPEG_MIME_TYPE",
    "CompressedResult",
    "MediaBuffer",
    "VideoProbe",
]
