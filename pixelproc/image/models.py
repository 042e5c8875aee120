"""
Image processing: domain objects.

Plain dataclasses, independent of the wire schemas. An ImageEnvelope is the
untrusted input; a PixelBuffer only exists after validation and is owned by a
single request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Union

import numpy as np

from pixelproc.image.constants import OperationKind, PixelFormat


@dataclass(frozen=True)
class ImageEnvelope:
    """Wire-level image before validation. `format` is the raw, undecoded code."""

    width: int
    height: int
    format: int | str
    data: bytes


@dataclass
class PixelBuffer:
    """Validated image with an exclusively owned, mutable byte buffer."""

    width: int
    height: int
    format: PixelFormat
    data: bytearray = field(repr=False)

    @property
    def channel_count(self) -> int:
        return self.format.channel_count

    @property
    def pixels(self) -> np.ndarray:
        """Writable (height, width, channels) uint8 view over `data`."""
        return np.frombuffer(self.data, dtype=np.uint8).reshape(
            self.height, self.width, self.channel_count,
        )

    def replace_pixels(self, pixels: np.ndarray) -> None:
        """Overwrite the buffer contents with an array of the same shape."""
        self.pixels[...] = pixels

    def to_envelope(self) -> ImageEnvelope:
        return ImageEnvelope(
            width=self.width,
            height=self.height,
            format=self.format.value,
            data=bytes(self.data),
        )


# ── Operation requests ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class Invert:
    kind: ClassVar[OperationKind] = OperationKind.INVERT


@dataclass(frozen=True)
class EdgeDetect:
    threshold: int
    kind: ClassVar[OperationKind] = OperationKind.EDGE_DETECT


@dataclass(frozen=True)
class BoxBlur:
    kernel_width: int
    kind: ClassVar[OperationKind] = OperationKind.BOX_BLUR


Operation = Union[Invert, EdgeDetect, BoxBlur]


@dataclass(frozen=True)
class ThumbnailRequest:
    image: ImageEnvelope
    new_width: int
    new_height: int
