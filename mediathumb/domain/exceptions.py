"""Domain exceptions for the thumbnail pipeline."""

from __future__ import annotations


class MediaPipelineException(Exception):
    """Base exception for pipeline failures.

    Every failure is terminal for the call that raised it; no partial
    result is ever returned alongside one.
    """

    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"{stage} failed: {reason}")


class DecodeError(MediaPipelineException):
    """Raised when a buffer cannot be decoded as a still image."""

    def __init__(self, reason: str = "Failed to load image") -> None:
        super().__init__("decode", reason)


class LoadError(MediaPipelineException):
    """Raised when a video cannot be loaded, probed, seeked or captured."""

    def __init__(self, stage: str, reason: str = "Failed to load video") -> None:
        super().__init__(stage, reason)


class EncodeError(MediaPipelineException):
    """Raised when no raster surface can be produced or encoding yields nothing."""

    def __init__(self, stage: str, reason: str = "Failed to compress image") -> None:
        super().__init__(stage, reason)
