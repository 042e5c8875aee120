"""
Pixel processing service: domain-specific HTTP exceptions.

Every validation and operation failure is caused by malformed input, so all of
them map to 400 with a machine-readable `code`. The handlers registered in
pixelproc.middleware.error_handler wrap them in the standard error envelope.
"""
from fastapi import HTTPException, status

from pixelproc.image.constants import PixelFormat

_KNOWN_FORMATS = ", ".join(f"{fmt.value} ({fmt.code})" for fmt in PixelFormat)


class InvalidArgument(HTTPException):
    code = "invalid_argument"

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )

    @property
    def message(self) -> str:
        return self.detail


# ── Envelope validation ─────────────────────────────────────────────────────

class EmptyData(InvalidArgument):
    code = "empty_data"

    def __init__(self) -> None:
        super().__init__("Image data is empty.")


class InvalidFormat(InvalidArgument):
    code = "invalid_format"

    def __init__(self, raw_code: object) -> None:
        self.raw_code = raw_code
        super().__init__(
            f"Unknown pixel format: {raw_code!r}. "
            f"Expected one of {_KNOWN_FORMATS}."
        )


class GeometryMismatch(InvalidArgument):
    code = "geometry_mismatch"

    def __init__(self, width: int, height: int, channel_count: int, actual_len: int) -> None:
        self.width = width
        self.height = height
        self.channel_count = channel_count
        self.actual_len = actual_len
        super().__init__(
            f"Width, height or format does not match the data length: "
            f"width={width}, height={height}, channel_count={channel_count}, "
            f"data length={actual_len}. width * height * channel_count "
            f"({width * height * channel_count}) must equal the data length."
        )
