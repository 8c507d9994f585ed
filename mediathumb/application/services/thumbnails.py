"""Module-level entry points for one-off derivative creation.

Each call builds its own encoder and sampler, so nothing is shared
between concurrent invocations.
"""

from mediathumb.application.services.frame_encoder import FrameEncoder
from mediathumb.application.services.video_sampler import VideoFrameSampler
from mediathumb.domain.models import CompressedResult, MediaBuffer


async def compress_image(
    buffer: MediaBuffer | bytes,
    max_width: int = 400,
    max_height: int = 300,
    quality: float = 0.8,
) -> CompressedResult:
    """Compress a still image into a bounded JPEG.

    See ``FrameEncoder.compress_image``.
    """
    return await FrameEncoder().compress_image(buffer, max_width, max_height, quality)


async def create_video_thumbnail(
    buffer: MediaBuffer | bytes,
    time_offset: float = 1,
) -> CompressedResult:
    """Capture and compress a thumbnail from a video.

    See ``VideoFrameSampler.create_video_thumbnail``.
    """
    return await VideoFrameSampler().create_video_thumbnail(buffer, time_offset)


async def create_thumbnail(
    media: MediaBuffer,
    encoder: FrameEncoder | None = None,
    sampler: VideoFrameSampler | None = None,
) -> CompressedResult:
    """Route a buffer to the video or image pipeline by its MIME tag.

    The tag is trusted as given: ``video/*`` goes to the sampler,
    everything else to the image encoder.
    """
    if media.is_video:
        return await (sampler or VideoFrameSampler()).create_video_thumbnail(media)
    return await (encoder or FrameEncoder()).compress_image(media)
