"""Derived dimensions value object."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class DerivedDimensions(BaseModel):
    """Target raster size computed from a source size and a bounding box.

    The source is scaled uniformly so that it fits the box. Sources that
    already fit are kept at native size; nothing is ever upscaled.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(ge=1, description="Output width in pixels")
    height: int = Field(ge=1, description="Output height in pixels")
    scaled: bool = Field(
        default=False,
        description="Whether the source had to be shrunk to fit the bounds",
    )

    @classmethod
    def fit(
        cls,
        source_width: int,
        source_height: int,
        max_width: int,
        max_height: int,
    ) -> Self:
        """Fit a source size into ``max_width`` x ``max_height``.

        Args:
            source_width: Native width of the source in pixels.
            source_height: Native height of the source in pixels.
            max_width: Width bound in pixels.
            max_height: Height bound in pixels.

        Returns:
            The derived dimensions.

        Raises:
            ValueError: If any argument is not a positive size.
        """
        if source_width <= 0 or source_height <= 0:
            raise ValueError(
                f"Source size must be positive, got {source_width}x{source_height}"
            )
        if max_width <= 0 or max_height <= 0:
            raise ValueError(f"Bounds must be positive, got {max_width}x{max_height}")

        if source_width <= max_width and source_height <= max_height:
            return cls(width=source_width, height=source_height)

        width_ratio = max_width / source_width
        height_ratio = max_height / source_height
        ratio = min(width_ratio, height_ratio)

        # The limiting side is pinned to its bound to avoid float drift.
        if width_ratio <= height_ratio:
            width = max_width
            height = min(max_height, round(source_height * ratio))
        else:
            width = min(max_width, round(source_width * ratio))
            height = max_height

        return cls(width=max(1, width), height=max(1, height), scaled=True)

    @property
    def size(self) -> tuple[int, int]:
        """Return ``(width, height)`` as Pillow expects it."""
        return (self.width, self.height)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height
