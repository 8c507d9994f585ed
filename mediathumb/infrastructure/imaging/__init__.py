"""Still-image codec services."""

from mediathumb.infrastructure.imaging.base import ImageCodecBase
from mediathumb.infrastructure.imaging.pillow_codec import PillowImageCodec, to_jpeg_quality

__all__ = [
    # Base classes
    "ImageCodecBase",
    # Implementations
    "PillowImageCodec",
    "to_jpeg_quality",
]
