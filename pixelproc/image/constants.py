"""
Image processing: static constants and enum types.
"""
from __future__ import annotations

import enum


class PixelFormat(str, enum.Enum):
    RGBA = "RGBA"
    RGB = "RGB"
    GRAY = "GRAY"
    GRAY_ALPHA = "GRAY_ALPHA"

    @property
    def channel_count(self) -> int:
        return CHANNEL_COUNTS[self]

    @property
    def code(self) -> int:
        return FORMAT_CODES[self]

    @property
    def has_alpha(self) -> bool:
        return self in (PixelFormat.RGBA, PixelFormat.GRAY_ALPHA)

    @classmethod
    def decode(cls, raw: int | str) -> PixelFormat | None:
        """Decode a wire format code or name. Returns None for unknown values."""
        if isinstance(raw, bool):
            return None
        if isinstance(raw, int):
            return _FORMATS_BY_CODE.get(raw)
        if isinstance(raw, str):
            name = raw.strip().upper()
            # ASCII only: str.isdigit() also accepts "²" and "٣"
            if name.isascii() and name.isdigit():
                return _FORMATS_BY_CODE.get(int(name))
            try:
                return cls(name)
            except ValueError:
                return None
        return None


class OperationKind(str, enum.Enum):
    INVERT = "invert"
    BOX_BLUR = "box_blur"
    EDGE_DETECT = "edge_detect"


class Resample(str, enum.Enum):
    """Thumbnail resampling filters."""
    BOX = "box"          # area average
    NEAREST = "nearest"


# Bytes per pixel for each layout
CHANNEL_COUNTS: dict[PixelFormat, int] = {
    PixelFormat.RGBA: 4,
    PixelFormat.RGB: 3,
    PixelFormat.GRAY: 1,
    PixelFormat.GRAY_ALPHA: 2,
}

# Numeric wire codes
FORMAT_CODES: dict[PixelFormat, int] = {
    PixelFormat.RGBA: 0,
    PixelFormat.RGB: 1,
    PixelFormat.GRAY: 2,
    PixelFormat.GRAY_ALPHA: 3,
}

_FORMATS_BY_CODE: dict[int, PixelFormat] = {v: k for k, v in FORMAT_CODES.items()}

# Pillow mode per layout (used for resampling)
PIL_MODES: dict[PixelFormat, str] = {
    PixelFormat.RGBA: "RGBA",
    PixelFormat.RGB: "RGB",
    PixelFormat.GRAY: "L",
    PixelFormat.GRAY_ALPHA: "LA",
}

# Canonical application order; operations do not commute.
OPERATION_ORDER: tuple[OperationKind, ...] = (
    OperationKind.INVERT,
    OperationKind.BOX_BLUR,
    OperationKind.EDGE_DETECT,
)

MAX_THRESHOLD = 255
MAX_DIMENSION = 2**32 - 1

# ITU-R 601-2 luma weights, per mille (as Pillow "L" conversion)
LUMA_WEIGHTS = (299, 587, 114)
