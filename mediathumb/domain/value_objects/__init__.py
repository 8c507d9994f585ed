"""Domain value objects."""

from mediathumb.domain.value_objects.dimensions import DerivedDimensions

__all__ = ["DerivedDimensions"]
