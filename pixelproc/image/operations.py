"""
Image processing: operation registry and dispatcher.

Requested operations run in a fixed canonical order (Invert, BoxBlur,
EdgeDetect) regardless of how the caller listed them. Each operation's
parameters are checked immediately before it runs; the first failure stops
dispatch and already applied operations are not rolled back.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pixelproc.exceptions import InvalidArgument
from pixelproc.image import transforms
from pixelproc.image.constants import MAX_THRESHOLD, OPERATION_ORDER, OperationKind
from pixelproc.image.models import BoxBlur, EdgeDetect, Invert, Operation, PixelBuffer

logger = logging.getLogger(__name__)


def _apply_invert(buffer: PixelBuffer, operation: Invert) -> None:
    transforms.invert(buffer)


def _apply_edge_detect(buffer: PixelBuffer, operation: EdgeDetect) -> None:
    threshold = operation.threshold
    if not 0 <= threshold <= MAX_THRESHOLD:
        raise InvalidArgument(
            f"threshold out of range: {threshold} (expected 0..{MAX_THRESHOLD})"
        )
    transforms.edge_detect(buffer, threshold)


def _apply_box_blur(buffer: PixelBuffer, operation: BoxBlur) -> None:
    kernel_width = operation.kernel_width
    if kernel_width % 2 == 0:
        raise InvalidArgument(f"kernel width must be odd: {kernel_width}")
    if kernel_width < 1:
        raise InvalidArgument(f"kernel width must be positive: {kernel_width}")
    transforms.box_blur(buffer, kernel_width)


_HANDLERS: dict[OperationKind, Callable[[PixelBuffer, Operation], None]] = {
    OperationKind.INVERT: _apply_invert,
    OperationKind.EDGE_DETECT: _apply_edge_detect,
    OperationKind.BOX_BLUR: _apply_box_blur,
}


def build_operations(requests: Iterable[Operation]) -> list[Operation]:
    """Order requested operations canonically. Each kind may appear once."""
    by_kind: dict[OperationKind, Operation] = {}
    for operation in requests:
        if operation.kind in by_kind:
            raise InvalidArgument(
                f"operation requested more than once: {operation.kind.value}"
            )
        by_kind[operation.kind] = operation
    return [by_kind[kind] for kind in OPERATION_ORDER if kind in by_kind]


def apply(buffer: PixelBuffer, operation: Operation) -> None:
    """Validate and apply a single operation to the buffer in place."""
    _HANDLERS[operation.kind](buffer, operation)


def dispatch(buffer: PixelBuffer, requests: Iterable[Operation]) -> None:
    for operation in build_operations(requests):
        apply(buffer, operation)
        logger.debug(
            "Applied %s to %dx%d %s buffer",
            operation.kind.value, buffer.width, buffer.height, buffer.format.value,
        )
