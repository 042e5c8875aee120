import pytest
from fastapi.testclient import TestClient

from pixelproc.client import ImageProcessingClient, ImageProcessingError
from pixelproc.image.models import ImageEnvelope


def test_process_image(client: TestClient, sample_envelope: ImageEnvelope) -> None:
    api = ImageProcessingClient(http=client)
    result = api.process_image(sample_envelope, invert=True)
    assert result == ImageEnvelope(
        width=2, height=1, format="RGBA",
        data=bytes([230, 166, 56, 255, 255, 0, 216, 255]),
    )


def test_process_image_blur_and_edges(client: TestClient, sample_envelope: ImageEnvelope) -> None:
    api = ImageProcessingClient(http=client)
    result = api.process_image(sample_envelope, edge_detect=100, box_blur=3)
    assert list(result.data) == [0, 0, 0, 255, 0, 0, 0, 255]


def test_create_thumbnail(client: TestClient) -> None:
    api = ImageProcessingClient(http=client)
    image = ImageEnvelope(width=2, height=2, format="GRAY", data=bytes([10, 20, 30, 40]))
    result = api.create_thumbnail(image, 1, 1)
    assert (result.width, result.height, result.format) == (1, 1, "GRAY")
    assert result.data == bytes([25])


def test_error_response_raises(client: TestClient, sample_envelope: ImageEnvelope) -> None:
    api = ImageProcessingClient(http=client)
    with pytest.raises(ImageProcessingError) as exc_info:
        api.create_thumbnail(sample_envelope, 3, 1)
    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "invalid_argument"
    assert "exceed source dimensions" in exc_info.value.message


def test_empty_image_raises(client: TestClient) -> None:
    api = ImageProcessingClient(http=client)
    with pytest.raises(ImageProcessingError) as exc_info:
        api.process_image(ImageEnvelope(0, 0, "RGBA", b""), invert=True)
    assert exc_info.value.code == "empty_data"


def test_injected_http_client_is_not_closed(client: TestClient) -> None:
    with ImageProcessingClient(http=client):
        pass
    assert client.get("/health").status_code == 200
