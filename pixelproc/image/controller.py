"""
Image processing: controller layer.

Receives validated schemas from the router, converts them to domain objects,
runs the CPU-bound service call off the event loop, and composes the response.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from pixelproc.exceptions import InvalidArgument
from pixelproc.image import service
from pixelproc.image.schemas import ImageOut, ImageParameters, ThumbnailIn

if TYPE_CHECKING:
    from pixelproc.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _run_sync(func: Callable[[], T]) -> T:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func)


async def process_image(request: ImageParameters) -> ImageOut:
    """Apply the requested operations and return the processed image."""
    envelope = request.image.to_envelope()
    operations = request.operations()
    try:
        result = await _run_sync(lambda: service.process_image(envelope, operations))
    except InvalidArgument as exc:
        logger.info("Process request rejected (%s): %s", exc.code, exc.message)
        raise
    return ImageOut.from_envelope(result)


async def create_thumbnail(request: ThumbnailIn, settings: Settings) -> ImageOut:
    """Resize the source image to the requested dimensions."""
    thumbnail_request = request.to_request()
    try:
        result = await _run_sync(
            lambda: service.create_thumbnail(thumbnail_request, settings.thumbnail_resample),
        )
    except InvalidArgument as exc:
        logger.info("Thumbnail request rejected (%s): %s", exc.code, exc.message)
        raise
    return ImageOut.from_envelope(result)
