"""
Image processing: thumbnail resizer.
"""
from __future__ import annotations

from pixelproc.exceptions import InvalidArgument
from pixelproc.image import transforms
from pixelproc.image.constants import Resample
from pixelproc.image.models import ImageEnvelope, PixelBuffer
from pixelproc.image.validator import validate


def resize(
    source: ImageEnvelope,
    new_width: int,
    new_height: int,
    resample: Resample = Resample.BOX,
) -> PixelBuffer:
    """Validate the source, check the target size, and resample.

    The source envelope is always validated first; an inconsistent buffer is
    never resized. Targets must be at least 1x1 and no larger than the source
    in either dimension.
    """
    buffer = validate(source)

    if new_width < 1 or new_height < 1:
        raise InvalidArgument(
            f"target dimensions must be at least 1x1: {new_width}x{new_height}"
        )
    if new_width > buffer.width or new_height > buffer.height:
        raise InvalidArgument(
            "target dimensions exceed source dimensions: "
            f"{new_width}x{new_height} > {buffer.width}x{buffer.height}"
        )

    return transforms.resize(buffer, new_width, new_height, resample)
