"""
Image processing: Pydantic V2 request/response schemas.

Pixel data travels base64-encoded. The schemas only check structure; pixel
format decoding, geometry and operation parameters are validated by the
service layer so the caller gets a specific error code for each.
"""
from __future__ import annotations

import base64

from pydantic import Base64Bytes, BaseModel, ConfigDict, Field, StrictInt, StrictStr

from pixelproc.image.constants import MAX_DIMENSION, PixelFormat
from pixelproc.image.models import (
    BoxBlur,
    EdgeDetect,
    ImageEnvelope,
    Invert,
    Operation,
    ThumbnailRequest,
)


# ── Base ─────────────────────────────────────────────────────────────────────

class _Base(BaseModel):
    model_config = ConfigDict(extra="forbid")


# ── Requests ─────────────────────────────────────────────────────────────────

class ImageIn(_Base):
    """Uncompressed image envelope."""
    width: int = Field(ge=0, le=MAX_DIMENSION)
    height: int = Field(ge=0, le=MAX_DIMENSION)
    format: StrictInt | StrictStr = Field(
        description="Pixel layout: RGBA (0), RGB (1), GRAY (2), GRAY_ALPHA (3), by name or code",
    )
    data: Base64Bytes = Field(description="Raw pixel bytes, row-major, base64-encoded")

    def to_envelope(self) -> ImageEnvelope:
        return ImageEnvelope(
            width=self.width,
            height=self.height,
            format=self.format,
            data=self.data,
        )


class InvertParams(_Base):
    """Invert colour channels. No parameters."""


class EdgeDetectParams(_Base):
    threshold: int = Field(description="Gradient magnitude threshold, 0..255")


class BoxBlurParams(_Base):
    kernel_width: int = Field(description="Odd, positive mean filter width")


class ImageParameters(_Base):
    """Image plus the operations to apply. Omitted operations are skipped."""
    image: ImageIn
    invert: InvertParams | None = None
    edge_detect: EdgeDetectParams | None = None
    box_blur: BoxBlurParams | None = None

    def operations(self) -> list[Operation]:
        requested: list[Operation] = []
        if self.invert is not None:
            requested.append(Invert())
        if self.edge_detect is not None:
            requested.append(EdgeDetect(threshold=self.edge_detect.threshold))
        if self.box_blur is not None:
            requested.append(BoxBlur(kernel_width=self.box_blur.kernel_width))
        return requested


class ThumbnailIn(_Base):
    image: ImageIn
    new_width: int = Field(ge=0, le=MAX_DIMENSION)
    new_height: int = Field(ge=0, le=MAX_DIMENSION)

    def to_request(self) -> ThumbnailRequest:
        return ThumbnailRequest(
            image=self.image.to_envelope(),
            new_width=self.new_width,
            new_height=self.new_height,
        )


# ── Responses ────────────────────────────────────────────────────────────────

class ImageOut(_Base):
    """Processed image."""
    width: int
    height: int
    format: PixelFormat
    data: str = Field(description="Raw pixel bytes, base64-encoded")

    @classmethod
    def from_envelope(cls, envelope: ImageEnvelope) -> ImageOut:
        return cls(
            width=envelope.width,
            height=envelope.height,
            format=envelope.format,
            data=base64.b64encode(envelope.data).decode("ascii"),
        )
