"""
Pixel transforms: pure functions over a validated PixelBuffer.

invert, edge_detect and box_blur mutate the buffer in place; resize returns a
new buffer. Callers validate parameters first; nothing here raises on a
validated buffer with validated arguments.
"""
from __future__ import annotations

import numpy as np
from PIL import Image

from pixelproc.image.constants import LUMA_WEIGHTS, PIL_MODES, PixelFormat, Resample
from pixelproc.image.models import PixelBuffer

_PIL_FILTERS = {
    Resample.BOX: Image.Resampling.BOX,
    Resample.NEAREST: Image.Resampling.NEAREST,
}


def _colour_channels(pixel_format: PixelFormat) -> int:
    """Number of leading non-alpha channels."""
    return pixel_format.channel_count - (1 if pixel_format.has_alpha else 0)


def _intensity(pixels: np.ndarray, pixel_format: PixelFormat) -> np.ndarray:
    """Single-channel intensity as int64 (h, w)."""
    if _colour_channels(pixel_format) == 1:
        return pixels[..., 0].astype(np.int64)
    wr, wg, wb = LUMA_WEIGHTS
    rgb = pixels[..., :3].astype(np.int64)
    return (wr * rgb[..., 0] + wg * rgb[..., 1] + wb * rgb[..., 2] + 500) // 1000


def invert(buffer: PixelBuffer) -> None:
    """Invert colour channels in place. Alpha is left untouched."""
    colour = buffer.pixels[..., :_colour_channels(buffer.format)]
    np.invert(colour, out=colour)


def edge_detect(buffer: PixelBuffer, threshold: int) -> None:
    """Sobel gradient-magnitude thresholding via an intensity round trip.

    Pixels whose gradient magnitude is strictly greater than `threshold`
    become 255 in every colour channel, all others 0. Alpha is kept.
    """
    pixels = buffer.pixels
    p = np.pad(_intensity(pixels, buffer.format), 1, mode="edge")

    gx = (
        (p[:-2, 2:] + 2 * p[1:-1, 2:] + p[2:, 2:])
        - (p[:-2, :-2] + 2 * p[1:-1, :-2] + p[2:, :-2])
    )
    gy = (
        (p[2:, :-2] + 2 * p[2:, 1:-1] + p[2:, 2:])
        - (p[:-2, :-2] + 2 * p[:-2, 1:-1] + p[:-2, 2:])
    )
    magnitude = np.hypot(gx, gy)
    edges = np.where(magnitude > threshold, 255, 0).astype(np.uint8)

    pixels[..., :_colour_channels(buffer.format)] = edges[..., np.newaxis]


def _window_sums(values: np.ndarray, radius: int, axis: int) -> np.ndarray:
    """Sum over [i - radius, i + radius] along `axis` with clamped indices.

    Out-of-range positions repeat the first or last element, so they are
    counted rather than materialised: memory stays proportional to `values`.
    """
    a = np.moveaxis(values, axis, 0)
    n = a.shape[0]
    reach = min(radius, n)
    idx = np.arange(n)
    lo = np.maximum(idx - reach, 0)
    hi = np.minimum(idx + reach, n - 1) + 1

    prefix = np.zeros((n + 1,) + a.shape[1:], dtype=a.dtype)
    prefix[1:] = a.cumsum(axis=0)
    total = prefix[hi] - prefix[lo]

    shape = (n,) + (1,) * (a.ndim - 1)
    before = np.array([max(radius - i, 0) for i in range(n)], dtype=a.dtype)
    after = np.array([max(i + radius - (n - 1), 0) for i in range(n)], dtype=a.dtype)
    total = total + before.reshape(shape) * a[:1] + after.reshape(shape) * a[-1:]
    return np.moveaxis(total, 0, axis)


def box_blur(buffer: PixelBuffer, kernel_width: int) -> None:
    """Mean filter over a kernel_width x kernel_width window, per channel.

    Borders replicate the edge pixels; means are rounded half up. The window
    sum is separable, so rows and columns are summed in two passes.
    """
    if kernel_width == 1:
        return
    k = kernel_width
    r = k // 2
    area = k * k
    # Python ints once k * k * 255 no longer fits in int64
    dtype = np.int64 if area * 255 <= np.iinfo(np.int64).max else object

    sums = _window_sums(buffer.pixels.astype(dtype), r, axis=1)
    sums = _window_sums(sums, r, axis=0)
    buffer.replace_pixels(((sums + area // 2) // area).astype(np.uint8))


def resize(
    buffer: PixelBuffer,
    new_width: int,
    new_height: int,
    resample: Resample = Resample.BOX,
) -> PixelBuffer:
    """Resample to new dimensions, keeping the pixel format."""
    mode = PIL_MODES[buffer.format]
    image = Image.frombytes(mode, (buffer.width, buffer.height), bytes(buffer.data))
    resized = image.resize((new_width, new_height), _PIL_FILTERS[resample])
    return PixelBuffer(
        width=new_width,
        height=new_height,
        format=buffer.format,
        data=bytearray(resized.tobytes()),
    )
