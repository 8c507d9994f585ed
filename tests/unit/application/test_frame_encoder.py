"""Unit tests for FrameEncoder."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from mediathumb.application.services.frame_encoder import FrameEncoder
from mediathumb.commons.settings.models import ImageSettings, Settings
from mediathumb.domain.exceptions import DecodeError, EncodeError
from mediathumb.domain.models import MediaBuffer


@pytest.fixture
def encoder():
    return FrameEncoder()


class TestDimensions:
    """Output pixel dimensions."""

    async def test_800x600_hits_both_bounds(self, encoder, jpeg_800x600, read_size):
        result = await encoder.compress_image(jpeg_800x600, 400, 300, 0.8)

        assert (result.width, result.height) == (400, 300)
        assert read_size(result.data) == (400, 300)
        assert result.mime_type == "image/jpeg"
        assert result.quality == 0.8

    async def test_no_upscaling(self, encoder, make_image, read_size):
        result = await encoder.compress_image(make_image((120, 90)), 400, 300)
        assert read_size(result.data) == (120, 90)

    async def test_wide_image_is_width_limited(self, encoder, make_image, read_size):
        result = await encoder.compress_image(make_image((1920, 1080), format="PNG"))
        assert read_size(result.data) == (400, 225)

    async def test_recompress_keeps_dimensions(self, encoder, make_image, read_size):
        first = await encoder.compress_image(make_image((1001, 333)), 400, 300)
        second = await encoder.compress_image(first.data, 400, 300)

        assert read_size(second.data) == read_size(first.data)
        assert (second.width, second.height) == (first.width, first.height)

    async def test_accepts_media_buffer(self, encoder, jpeg_800x600):
        buffer = MediaBuffer(data=jpeg_800x600, mime_type="image/jpeg")
        result = await encoder.compress_image(buffer, 200, 200)
        assert (result.width, result.height) == (200, 150)

    async def test_defaults_from_settings(self, jpeg_800x600):
        encoder = FrameEncoder(settings=ImageSettings(max_width=100, max_height=100))
        result = await encoder.compress_image(jpeg_800x600)
        assert (result.width, result.height) == (100, 75)

    async def test_from_settings(self, jpeg_800x600):
        settings = Settings(image=ImageSettings(max_width=80, max_height=80, quality=0.5))
        result = await FrameEncoder.from_settings(settings).compress_image(jpeg_800x600)
        assert (result.width, result.height) == (80, 60)
        assert result.quality == 0.5


class TestQuality:
    """Quality controls encoded size."""

    async def test_size_non_decreasing_with_quality(self, encoder, make_noise_image):
        source = make_noise_image((320, 240))
        sizes = [
            (await encoder.compress_image(source, 400, 300, q)).size_bytes
            for q in (0.1, 0.5, 0.8, 1.0)
        ]
        assert sizes == sorted(sizes)

    async def test_no_output_size_ceiling(self, encoder, make_noise_image):
        source = make_noise_image((400, 300), seed=7)
        result = await encoder.compress_image(source, 400, 300, 1.0)
        assert result.size_bytes > 50_000


class TestFailures:
    """Failure taxonomy."""

    async def test_garbage_bytes(self, encoder):
        with pytest.raises(DecodeError):
            await encoder.compress_image(b"\x00\x01garbage\xff" * 50)

    async def test_truncated_png(self, encoder, make_image):
        data = make_image((200, 200), format="PNG")
        with pytest.raises(DecodeError):
            await encoder.compress_image(data[:40])

    @pytest.mark.parametrize(
        ("max_width", "max_height", "quality"),
        [(0, 300, 0.8), (400, -1, 0.8), (400, 300, 1.5), (400, 300, -0.1)],
    )
    async def test_invalid_arguments(self, max_width, max_height, quality):
        codec = MagicMock()
        codec.decode = AsyncMock()
        encoder = FrameEncoder(codec=codec)

        with pytest.raises(ValueError):
            await encoder.compress_image(b"data", max_width, max_height, quality)
        codec.decode.assert_not_called()

    async def test_encode_error_propagates(self):
        codec = MagicMock()
        codec.decode = AsyncMock(return_value=Image.new("RGB", (800, 600)))
        codec.rasterize = AsyncMock(return_value=Image.new("RGB", (400, 300)))
        codec.encode = AsyncMock(side_effect=EncodeError("encode", "no output"))
        encoder = FrameEncoder(codec=codec)

        with pytest.raises(EncodeError):
            await encoder.compress_image(b"data")

    async def test_rasterize_error_propagates(self):
        codec = MagicMock()
        codec.decode = AsyncMock(return_value=Image.new("RGB", (800, 600)))
        codec.rasterize = AsyncMock(side_effect=EncodeError("rasterize", "no surface"))
        codec.encode = AsyncMock()
        encoder = FrameEncoder(codec=codec)

        with pytest.raises(EncodeError):
            await encoder.compress_image(b"data")
        codec.encode.assert_not_called()


class TestStageOrder:
    """Stages run strictly in sequence."""

    async def test_decode_rasterize_encode(self):
        calls = []
        surface = Image.new("RGB", (800, 600))
        raster = Image.new("RGB", (400, 300))

        async def decode(data):
            calls.append("decode")
            return surface

        async def rasterize(src, dims):
            calls.append("rasterize")
            assert src is surface
            assert dims.size == (400, 300)
            return raster

        async def encode(src, quality):
            calls.append("encode")
            assert src is raster
            return b"jpeg"

        codec = MagicMock(decode=decode, rasterize=rasterize, encode=encode)
        result = await FrameEncoder(codec=codec).compress_image(b"data")

        assert calls == ["decode", "rasterize", "encode"]
        assert result.data == b"jpeg"
