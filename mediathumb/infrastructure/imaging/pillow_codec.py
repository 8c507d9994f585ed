"""Pillow implementation of the still-image codec."""

import asyncio
import io

from PIL import Image, ImageOps

from mediathumb.commons.telemetry import get_logger
from mediathumb.domain.exceptions import DecodeError, EncodeError
from mediathumb.domain.value_objects import DerivedDimensions
from mediathumb.infrastructure.imaging.base import ImageCodecBase

logger = get_logger(__name__)

_DECODE_ERRORS = (OSError, ValueError, SyntaxError, Image.DecompressionBombError)


def to_jpeg_quality(quality: float) -> int:
    """Map a [0, 1] quality onto Pillow's 1-100 JPEG scale."""
    return max(1, min(100, round(quality * 100)))


class PillowImageCodec(ImageCodecBase):
    """Pillow-backed decode, resample and JPEG encode.

    All Pillow work runs in the default executor so callers never block
    the event loop.
    """

    def __init__(
        self,
        resample: Image.Resampling = Image.Resampling.LANCZOS,
    ) -> None:
        """Initialize the codec.

        Args:
            resample: Resampling filter used when shrinking surfaces.
        """
        self._resample = resample

    async def decode(self, data: bytes) -> Image.Image:
        """Decode an encoded image into an RGB surface."""
        if not data:
            raise DecodeError("Empty image buffer")

        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._decode_sync, data)

    async def rasterize(
        self,
        surface: Image.Image,
        dimensions: DerivedDimensions,
    ) -> Image.Image:
        """Resample the whole surface into ``dimensions``."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(
            None, self._rasterize_sync, surface, dimensions
        )

    async def encode(self, surface: Image.Image, quality: float) -> bytes:
        """Encode the surface as a JPEG buffer."""
        loop = asyncio.get_event_loop()
        return await loop.run_in_executor(None, self._encode_sync, surface, quality)

    def _decode_sync(self, data: bytes) -> Image.Image:
        """Decode the first frame into an upright RGB surface.

        Args:
            data: Encoded image bytes.

        Returns:
            Loaded RGB image, detached from the input stream.

        Raises:
            DecodeError: If Pillow cannot identify or load the payload.
        """
        try:
            with Image.open(io.BytesIO(data)) as handle:
                handle.load()
                oriented = ImageOps.exif_transpose(handle)
                surface = _flatten(oriented)
        except _DECODE_ERRORS as e:
            raise DecodeError(f"Failed to load image: {e}") from e

        logger.debug(
            "Decoded image",
            extra={"width": surface.width, "height": surface.height},
        )
        return surface

    def _rasterize_sync(
        self,
        surface: Image.Image,
        dimensions: DerivedDimensions,
    ) -> Image.Image:
        """Resample the surface to the derived size.

        Args:
            surface: Decoded RGB surface.
            dimensions: Target size.

        Returns:
            A new image of exactly ``dimensions.size``.
        """
        try:
            if surface.size == dimensions.size:
                return surface.copy()
            return surface.resize(dimensions.size, self._resample)
        except (OSError, ValueError, MemoryError) as e:
            raise EncodeError("rasterize", f"Could not create raster surface: {e}") from e

    def _encode_sync(self, surface: Image.Image, quality: float) -> bytes:
        """Save the surface as baseline JPEG into memory.

        Args:
            surface: RGB surface to encode.
            quality: Quality in [0, 1].

        Returns:
            Non-empty JPEG bytes.
        """
        buffer = io.BytesIO()
        try:
            surface.save(buffer, format="JPEG", quality=to_jpeg_quality(quality))
        except (OSError, ValueError) as e:
            raise EncodeError("encode", f"Failed to compress image: {e}") from e

        data = buffer.getvalue()
        if not data:
            raise EncodeError("encode", "Encoder produced no output")
        return data


def _flatten(image: Image.Image) -> Image.Image:
    """Convert to RGB, compositing transparency onto black."""
    has_alpha = image.mode in ("RGBA", "LA", "PA") or (
        image.mode == "P" and "transparency" in image.info
    )
    if not has_alpha:
        return image.convert("RGB")

    rgba = image.convert("RGBA")
    background = Image.new("RGB", rgba.size, (0, 0, 0))
    background.paste(rgba, mask=rgba.getchannel("A"))
    return background
