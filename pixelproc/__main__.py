"""Serve the API with uvicorn: ``python -m pixelproc``."""
import uvicorn

from pixelproc.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "pixelproc.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
