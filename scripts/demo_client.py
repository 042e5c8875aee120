#!/usr/bin/env python3
"""
Send a tiny image through a running pixel processing service.

Reads the service address from the environment:
    PIXELPROC_URL    base URL (optional, defaults to http://127.0.0.1:8000)

Usage:
    python -m pixelproc &
    python scripts/demo_client.py
"""
from __future__ import annotations

import os
import sys

from pixelproc.client import ImageProcessingClient, ImageProcessingError
from pixelproc.image.models import ImageEnvelope


def main() -> None:
    base_url = os.getenv("PIXELPROC_URL", "http://127.0.0.1:8000")
    image = ImageEnvelope(
        width=2,
        height=1,
        format="RGBA",
        data=bytes([25, 89, 199, 255, 0, 255, 39, 255]),
    )

    with ImageProcessingClient(base_url) as client:
        try:
            inverted = client.process_image(image, invert=True)
            blurred = client.process_image(image, box_blur=3)
            thumb = client.create_thumbnail(image, 1, 1)
        except ImageProcessingError as exc:
            print(f"Error: {exc}")
            sys.exit(1)

    print(f"inverted:  {list(inverted.data)}")
    print(f"blurred:   {list(blurred.data)}")
    print(f"thumbnail: {thumb.width}x{thumb.height} {list(thumb.data)}")


if __name__ == "__main__":
    main()
