import base64
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from pixelproc.image.models import ImageEnvelope
from pixelproc.main import app

# 2x1 RGBA image used throughout
SAMPLE_RGBA = bytes([25, 89, 199, 255, 0, 255, 39, 255])


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def image_json(
    data: bytes = SAMPLE_RGBA,
    width: int = 2,
    height: int = 1,
    format: int | str = "RGBA",
) -> dict:
    return {"width": width, "height": height, "format": format, "data": b64(data)}


@pytest.fixture
def sample_envelope() -> ImageEnvelope:
    return ImageEnvelope(width=2, height=1, format="RGBA", data=SAMPLE_RGBA)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def image_payload():
    """Build a JSON image envelope; defaults to the 2x1 RGBA sample."""
    return image_json
