"""
Image processing: pure business logic.

No FastAPI routing here. Receives domain objects, returns domain objects and
raises pixelproc.exceptions on invalid input. Synchronous and CPU-bound; the
controller decides where it runs.
"""
from __future__ import annotations

from collections.abc import Iterable

from pixelproc.image import operations, thumbnail
from pixelproc.image.constants import Resample
from pixelproc.image.models import ImageEnvelope, Operation, ThumbnailRequest
from pixelproc.image.validator import validate


def process_image(
    envelope: ImageEnvelope,
    requests: Iterable[Operation] = (),
) -> ImageEnvelope:
    """Validate, apply the requested operations, and return the result.

    The output keeps the input geometry and format. Any failure raises and no
    partial image is returned.
    """
    buffer = validate(envelope)
    operations.dispatch(buffer, requests)
    return buffer.to_envelope()


def create_thumbnail(
    request: ThumbnailRequest,
    resample: Resample = Resample.BOX,
) -> ImageEnvelope:
    """Resize the source image; the output carries the new geometry."""
    resized = thumbnail.resize(
        request.image, request.new_width, request.new_height, resample,
    )
    return resized.to_envelope()
