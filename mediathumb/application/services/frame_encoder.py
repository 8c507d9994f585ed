"""Still-image compression service."""

from typing import Self

from PIL import Image

from mediathumb.commons.settings.models import ImageSettings, Settings
from mediathumb.commons.telemetry import LogContext, get_logger, timed
from mediathumb.domain.models import CompressedResult, MediaBuffer
from mediathumb.domain.value_objects import DerivedDimensions
from mediathumb.infrastructure.factory import InfrastructureFactory
from mediathumb.infrastructure.imaging import ImageCodecBase, PillowImageCodec


def validate_bounds(max_width: int, max_height: int, quality: float) -> None:
    """Reject bounds and quality outside their domains.

    Raises:
        ValueError: If a bound is not positive or quality is outside [0, 1].
    """
    if max_width <= 0 or max_height <= 0:
        raise ValueError(f"Bounds must be positive, got {max_width}x{max_height}")
    if not 0 <= quality <= 1:
        raise ValueError(f"Quality must be within [0, 1], got {quality}")


def payload_of(buffer: MediaBuffer | bytes) -> bytes:
    """Return the raw payload of a buffer."""
    if isinstance(buffer, MediaBuffer):
        return buffer.data
    return bytes(buffer)


class FrameEncoder:
    """Decode, downscale and re-encode still images as JPEG.

    Each call decodes into its own surface and keeps no reference to it
    once the result is returned, so one encoder can serve concurrent
    calls.
    """

    def __init__(
        self,
        codec: ImageCodecBase | None = None,
        settings: ImageSettings | None = None,
    ) -> None:
        """Initialize the frame encoder.

        Args:
            codec: Image codec. Defaults to Pillow.
            settings: Default bounds and quality.
        """
        self._codec = codec or PillowImageCodec()
        self._settings = settings or ImageSettings()
        self._logger = get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        factory = InfrastructureFactory(settings)
        return cls(codec=factory.get_image_codec(), settings=settings.image)

    @timed
    async def compress_image(
        self,
        buffer: MediaBuffer | bytes,
        max_width: int | None = None,
        max_height: int | None = None,
        quality: float | None = None,
    ) -> CompressedResult:
        """Compress an image so it fits within the given bounds.

        Args:
            buffer: Encoded still image.
            max_width: Width bound in pixels.
            max_height: Height bound in pixels.
            quality: JPEG quality in [0, 1].

        Returns:
            The encoded JPEG derivative.

        Raises:
            ValueError: If bounds or quality are out of range.
            DecodeError: If the buffer is not a decodable image.
            EncodeError: If rasterizing or encoding fails.
        """
        max_width = self._settings.max_width if max_width is None else max_width
        max_height = self._settings.max_height if max_height is None else max_height
        quality = self._settings.quality if quality is None else quality
        validate_bounds(max_width, max_height, quality)

        with LogContext(operation="compress_image"):
            surface = await self._codec.decode(payload_of(buffer))
            return await self.rasterize_and_encode(
                surface, max_width, max_height, quality
            )

    async def rasterize_and_encode(
        self,
        surface: Image.Image,
        max_width: int,
        max_height: int,
        quality: float,
    ) -> CompressedResult:
        """Fit a decoded surface into the bounds and encode it."""
        dimensions = DerivedDimensions.fit(
            surface.width, surface.height, max_width, max_height
        )
        raster = await self._codec.rasterize(surface, dimensions)
        data = await self._codec.encode(raster, quality)

        self._logger.debug(
            "Compressed image",
            extra={
                "source_size": f"{surface.width}x{surface.height}",
                "output_size": f"{dimensions.width}x{dimensions.height}",
                "scaled": dimensions.scaled,
                "bytes": len(data),
            },
        )
        return CompressedResult(
            data=data,
            width=dimensions.width,
            height=dimensions.height,
            quality=quality,
        )

    async def encode_surface(self, surface: Image.Image, quality: float) -> bytes:
        """Encode a surface at its native size."""
        return await self._codec.encode(surface, quality)
