import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from pixelproc.config import Settings
from pixelproc.image.router import router as image_router
from pixelproc.middleware import (
    error_envelope_middleware,
    register_error_handlers,
    request_id_middleware,
)

# Configure application logging so request handling logs are visible
logging.basicConfig(
    level=Settings().log_level.upper(),
    format="%(levelname)s:%(name)s: %(message)s",
)


# ── OpenAPI metadata ──────────────────────────────────────────────────────────

_DESCRIPTION = """
## Pixel Processing Service

Server-side pixel operations on uncompressed images.

* **Process**: invert, box blur and Sobel edge detection, applied in a fixed
  order (invert, box_blur, edge_detect) in one round trip.
* **Thumbnail**: area or nearest-neighbour downscaling.

Images travel as `{width, height, format, data}` where `data` is the raw,
row-major pixel buffer, base64-encoded, and `format` is one of
`RGBA`, `RGB`, `GRAY`, `GRAY_ALPHA` (or codes 0 to 3).

### Error shape
All errors return a consistent JSON envelope:
```json
{ "error": {"code": "geometry_mismatch", "message": "..."}, "request_id": "..." }
```
"""

_TAGS_METADATA = [
    {
        "name": "images",
        "description": "Validate pixel buffers, apply operations, create thumbnails.",
    },
]


# ── Health schema ─────────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    status: str
    service: str


# ── App factory ───────────────────────────────────────────────────────────────

def get_settings() -> Settings:
    return Settings()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Pixel Processing Service",
        version="1.0.0",
        description=_DESCRIPTION,
        openapi_tags=_TAGS_METADATA,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    register_error_handlers(app)

    # Middleware (applied in reverse-registration order: last added = outermost)
    app.middleware("http")(request_id_middleware)
    app.middleware("http")(error_envelope_middleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,
    )

    app.include_router(image_router, prefix="/api/v1")

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="pixelproc")

    return app


app = create_app()
