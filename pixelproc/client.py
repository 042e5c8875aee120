"""
HTTP client for the pixel processing service.

    with ImageProcessingClient("http://127.0.0.1:8000") as client:
        image = ImageEnvelope(width=1, height=1, format="RGBA", data=bytes(4))
        inverted = client.process_image(image, invert=True)
"""
from __future__ import annotations

import base64
import logging
from typing import Any

import httpx

from pixelproc.image.models import ImageEnvelope

logger = logging.getLogger(__name__)

_PROCESS_PATH = "/api/v1/images/process"
_THUMBNAIL_PATH = "/api/v1/images/thumbnail"


class ImageProcessingError(Exception):
    """Error response returned by the service."""

    def __init__(self, status_code: int, code: str, message: str) -> None:
        super().__init__(f"{status_code} {code}: {message}")
        self.status_code = status_code
        self.code = code
        self.message = message


def _image_payload(image: ImageEnvelope) -> dict[str, Any]:
    return {
        "width": image.width,
        "height": image.height,
        "format": image.format,
        "data": base64.b64encode(image.data).decode("ascii"),
    }


def _image_from_payload(payload: dict[str, Any]) -> ImageEnvelope:
    return ImageEnvelope(
        width=payload["width"],
        height=payload["height"],
        format=payload["format"],
        data=base64.b64decode(payload["data"]),
    )


class ImageProcessingClient:
    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        *,
        timeout: float = 10.0,
        http: httpx.Client | None = None,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> ImageProcessingClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def process_image(
        self,
        image: ImageEnvelope,
        *,
        invert: bool = False,
        edge_detect: int | None = None,
        box_blur: int | None = None,
    ) -> ImageEnvelope:
        """Apply operations server-side. `edge_detect` is the threshold, `box_blur` the kernel width."""
        payload: dict[str, Any] = {"image": _image_payload(image)}
        if invert:
            payload["invert"] = {}
        if edge_detect is not None:
            payload["edge_detect"] = {"threshold": edge_detect}
        if box_blur is not None:
            payload["box_blur"] = {"kernel_width": box_blur}
        return _image_from_payload(self._post(_PROCESS_PATH, payload))

    def create_thumbnail(
        self,
        image: ImageEnvelope,
        new_width: int,
        new_height: int,
    ) -> ImageEnvelope:
        payload = {
            "image": _image_payload(image),
            "new_width": new_width,
            "new_height": new_height,
        }
        return _image_from_payload(self._post(_THUMBNAIL_PATH, payload))

    def _post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        response = self._http.post(path, json=payload)
        if response.is_success:
            return response.json()

        try:
            error = response.json()["error"]
            code, message = error["code"], error["message"]
        except (ValueError, KeyError, TypeError):
            code, message = "http_error", response.text
        logger.debug("Request to %s failed: %s %s", path, response.status_code, code)
        raise ImageProcessingError(response.status_code, code, message)
