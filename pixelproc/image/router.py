"""
Image processing: HTTP routes.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from pixelproc.config import Settings
from pixelproc.image import controller
from pixelproc.image.schemas import ImageOut, ImageParameters, ThumbnailIn

router = APIRouter(prefix="/images", tags=["images"])


def get_settings() -> Settings:
    return Settings()


@router.post(
    "/process",
    response_model=ImageOut,
    summary="Apply pixel operations",
    description=(
        "Validates the image envelope and applies the requested operations "
        "in the fixed order invert, box_blur, edge_detect. Returns an image "
        "with the same geometry and format."
    ),
)
async def process_image(request: ImageParameters) -> ImageOut:
    return await controller.process_image(request)


@router.post(
    "/thumbnail",
    response_model=ImageOut,
    summary="Create a thumbnail",
    description=(
        "Resizes the image to new_width x new_height. Neither dimension may "
        "exceed the source."
    ),
)
async def create_thumbnail(
    request: ThumbnailIn,
    settings: Settings = Depends(get_settings),
) -> ImageOut:
    return await controller.create_thumbnail(request, settings)
