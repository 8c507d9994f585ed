"""Shared fixtures for building in-memory media."""

import io
import random

import pytest
from PIL import Image


def _encode_image(
    size: tuple[int, int],
    format: str = "JPEG",
    mode: str = "RGB",
    color: tuple[int, ...] = (200, 80, 40),
    **save_kwargs,
) -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=format, **save_kwargs)
    return buffer.getvalue()


def _noise_image(size: tuple[int, int], seed: int = 0) -> bytes:
    rng = random.Random(seed)
    raw = rng.randbytes(size[0] * size[1] * 3)
    buffer = io.BytesIO()
    Image.frombytes("RGB", size, raw).save(buffer, format="PNG")
    return buffer.getvalue()


def _image_size(data: bytes) -> tuple[int, int]:
    with Image.open(io.BytesIO(data)) as img:
        return img.size


@pytest.fixture
def make_image():
    """Encode a solid-color image of a given size and format."""
    return _encode_image


@pytest.fixture
def make_noise_image():
    """Encode an RGB noise image as PNG so JPEG quality matters."""
    return _noise_image


@pytest.fixture
def read_size():
    """Read the pixel size of an encoded image."""
    return _image_size


@pytest.fixture
def jpeg_800x600() -> bytes:
    return _encode_image((800, 600))


@pytest.fixture
def png_frame_1280x720() -> bytes:
    return _encode_image((1280, 720), format="PNG", color=(10, 120, 220))
