from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from pixelproc.image.constants import Resample


def _env_files() -> list[str]:
    """Load .env from the project root, then a local .env."""
    base = Path(__file__).resolve().parent.parent  # project root
    return [str(base / ".env"), ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_env_files(),
        env_file_encoding="utf-8",
        env_prefix="PIXELPROC_",
        extra="ignore",
    )

    # ── Server ───────────────────────────────────────────────────────────────
    env_name: str = "development"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    # ── Processing ───────────────────────────────────────────────────────────
    thumbnail_resample: Resample = Resample.BOX

    # ── CORS ─────────────────────────────────────────────────────────────────
    cors_origins: str = "http://localhost:3000"

    @property
    def cors_origins_list(self) -> list[str]:
        return [x.strip() for x in self.cors_origins.split(",") if x.strip()]
