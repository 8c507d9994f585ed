"""Media buffer and derivative domain models."""

import base64

from pydantic import BaseModel, ConfigDict, Field

JPEG_MIME_TYPE = "image/jpeg"


class MediaBuffer(BaseModel):
    """Caller-owned binary payload plus its MIME type tag.

    The pipeline only borrows the payload for the duration of one call.
    The type tag is trusted as-is; no content sniffing is performed.
    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(description="Encoded media payload")
    mime_type: str = Field(
        default="application/octet-stream",
        description="MIME-like type tag supplied by the caller",
    )

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    @property
    def is_video(self) -> bool:
        return self.mime_type.lower().startswith("video/")

    @property
    def is_image(self) -> bool:
        return self.mime_type.lower().startswith("image/")


class VideoProbe(BaseModel):
    """Stream metadata loaded before any frame is decoded."""

    model_config = ConfigDict(frozen=True)

    duration_seconds: float = Field(gt=0, description="Container duration")
    width: int = Field(ge=0, description="Native frame width")
    height: int = Field(ge=0, description="Native frame height")
    codec: str = Field(default="unknown", description="Video codec name")

    def seek_target(self, time_offset: float) -> float:
        """Timestamp to capture for a requested offset.

        The offset is always clamped to the clip's midpoint, even when it
        lies inside the clip. Negative offsets seek to the first frame.

        Args:
            time_offset: Requested capture time in seconds.

        Returns:
            ``min(time_offset, duration / 2)``, never below zero.
        """
        return max(0.0, min(time_offset, self.duration_seconds / 2))


class CompressedResult(BaseModel):
    """Encoded JPEG derivative handed back to the caller.

    Only pixel dimensions and quality are controlled; the byte size of
    ``data`` is whatever the encoder produced.
    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(min_length=1, description="Encoded image bytes")
    width: int = Field(ge=1)
    height: int = Field(ge=1)
    quality: float = Field(ge=0, le=1, description="Encoder quality in [0, 1]")
    mime_type: str = Field(default=JPEG_MIME_TYPE)

    @property
    def size_bytes(self) -> int:
        return len(self.data)

    def to_data_url(self) -> str:
        """Render the result as a base64 ``data:`` URL."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"
