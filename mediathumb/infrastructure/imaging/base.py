"""Abstract base class for still-image codecs."""

from abc import ABC, abstractmethod

from PIL import Image

from mediathumb.domain.value_objects import DerivedDimensions


class ImageCodecBase(ABC):
    """Decode, rasterize and encode still images.

    Surfaces are ``PIL.Image.Image`` instances in RGB mode. Implementations
    must not keep references to surfaces or buffers between calls.
    """

    @abstractmethod
    async def decode(self, data: bytes) -> Image.Image:
        """Decode an encoded image into a pixel surface.

        Args:
            data: Encoded image payload.

        Returns:
            Fully loaded RGB surface at native size.

        Raises:
            DecodeError: If the payload is not a decodable image.
        """

    @abstractmethod
    async def rasterize(
        self,
        surface: Image.Image,
        dimensions: DerivedDimensions,
    ) -> Image.Image:
        """Resample a surface to the given dimensions.

        Args:
            surface: Source surface.
            dimensions: Target size.

        Returns:
            New surface of exactly ``dimensions.size``.

        Raises:
            EncodeError: If no target surface can be produced.
        """

    @abstractmethod
    async def encode(self, surface: Image.Image, quality: float) -> bytes:
        """Encode a surface as JPEG.

        Args:
            surface: Surface to encode.
            quality: Encoder quality in [0, 1].

        Returns:
            Encoded bytes.

        Raises:
            EncodeError: If the encoder produces no output.
        """
