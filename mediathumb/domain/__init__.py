"""Domain layer - media models, value objects and exceptions."""

from mediathumb.domain.exceptions import (
    DecodeError,
    EncodeError,
    LoadError,
    MediaPipelineException,
)
from mediathumb.domain.models import (
    JPEG_MIME_TYPE,
    CompressedResult,
    MediaBuffer,
    VideoProbe,
)
from mediathumb.domain.value_objects import DerivedDimensions

__all__ = [
    # Exceptions
    "MediaPipelineException",
    "DecodeError",
    "LoadError",
    "EncodeError",
    # Models
    "JPEG_MIME_TYPE",
    "MediaBuffer",
    "VideoProbe",
    "CompressedResult",
    # Value objects
    "DerivedDimensions",
]
