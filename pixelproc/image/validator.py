"""
Image processing: envelope validation.

Runs before any pixel interpretation: the channel count decides how bytes are
grouped into pixels, so a buffer is only built once the declared geometry and
the data length agree.
"""
from __future__ import annotations

from pixelproc.exceptions import EmptyData, GeometryMismatch, InvalidFormat
from pixelproc.image.constants import PixelFormat
from pixelproc.image.models import ImageEnvelope, PixelBuffer


def validate(envelope: ImageEnvelope) -> PixelBuffer:
    """Check an envelope and build a PixelBuffer owning a copy of its bytes.

    Checks run in order and stop at the first failure:
    empty data, unknown format, then geometry/length disagreement.
    """
    if not envelope.data:
        raise EmptyData()

    pixel_format = PixelFormat.decode(envelope.format)
    if pixel_format is None:
        raise InvalidFormat(envelope.format)

    channels = pixel_format.channel_count
    expected = envelope.width * envelope.height * channels
    if envelope.width < 0 or envelope.height < 0 or expected != len(envelope.data):
        raise GeometryMismatch(
            envelope.width, envelope.height, channels, len(envelope.data),
        )

    return PixelBuffer(
        width=envelope.width,
        height=envelope.height,
        format=pixel_format,
        data=bytearray(envelope.data),
    )
