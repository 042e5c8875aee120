import pytest

from pixelproc.exceptions import EmptyData, GeometryMismatch, InvalidArgument, InvalidFormat
from pixelproc.image import service
from pixelproc.image.models import (
    BoxBlur,
    EdgeDetect,
    ImageEnvelope,
    Invert,
    ThumbnailRequest,
)


def test_process_without_operations_returns_same_image(sample_envelope: ImageEnvelope) -> None:
    result = service.process_image(sample_envelope)
    assert result == sample_envelope


def test_process_invert(sample_envelope: ImageEnvelope) -> None:
    result = service.process_image(sample_envelope, [Invert()])
    assert (result.width, result.height, result.format) == (2, 1, "RGBA")
    assert list(result.data) == [230, 166, 56, 255, 255, 0, 216, 255]


def test_process_box_blur(sample_envelope: ImageEnvelope) -> None:
    result = service.process_image(sample_envelope, [BoxBlur(3)])
    assert list(result.data) == [17, 144, 146, 255, 8, 200, 92, 255]


def test_process_all_operations(sample_envelope: ImageEnvelope) -> None:
    # Invert, then blur to [238,111,109] and [247,55,163]; intensities 149 and 125
    # give a gradient magnitude of exactly 96
    result = service.process_image(sample_envelope, [EdgeDetect(95), BoxBlur(3), Invert()])
    assert list(result.data) == [255] * 8

    result = service.process_image(sample_envelope, [EdgeDetect(96), BoxBlur(3), Invert()])
    assert list(result.data) == [0, 0, 0, 255, 0, 0, 0, 255]


def test_process_numeric_format_is_reported_by_name() -> None:
    result = service.process_image(ImageEnvelope(1, 1, 1, bytes([1, 2, 3])), [Invert()])
    assert result.format == "RGB"
    assert list(result.data) == [254, 253, 252]


def test_process_empty_data(sample_envelope: ImageEnvelope) -> None:
    with pytest.raises(EmptyData):
        service.process_image(ImageEnvelope(2, 1, "RGBA", b""), [Invert()])


def test_process_invalid_format() -> None:
    with pytest.raises(InvalidFormat):
        service.process_image(ImageEnvelope(1, 1, "YUV", bytes(3)))


def test_process_geometry_mismatch_skips_operations() -> None:
    with pytest.raises(GeometryMismatch):
        service.process_image(ImageEnvelope(3, 1, "RGBA", bytes(8)), [BoxBlur(2)])


def test_process_operation_failure() -> None:
    with pytest.raises(InvalidArgument, match="threshold out of range"):
        service.process_image(ImageEnvelope(1, 1, "GRAY", bytes(1)), [EdgeDetect(256)])


def test_thumbnail_uses_new_geometry(sample_envelope: ImageEnvelope) -> None:
    result = service.create_thumbnail(ThumbnailRequest(sample_envelope, 1, 1))
    assert (result.width, result.height, result.format) == (1, 1, "RGBA")
    assert len(result.data) == 4
    assert result.data[3] == 255


def test_thumbnail_wider_than_source(sample_envelope: ImageEnvelope) -> None:
    with pytest.raises(InvalidArgument, match="exceed source dimensions"):
        service.create_thumbnail(ThumbnailRequest(sample_envelope, 3, 1))
