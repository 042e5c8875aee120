import pytest

from pixelproc.config import Settings
from pixelproc.image.constants import Resample


def test_defaults() -> None:
    settings = Settings()
    assert (settings.host, settings.port) == ("127.0.0.1", 8000)
    assert settings.thumbnail_resample is Resample.BOX


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIXELPROC_THUMBNAIL_RESAMPLE", "nearest")
    monkeypatch.setenv("PIXELPROC_PORT", "9001")
    settings = Settings()
    assert settings.thumbnail_resample is Resample.NEAREST
    assert settings.port == 9001


def test_cors_origins_list() -> None:
    settings = Settings(cors_origins="http://a.test, http://b.test,")
    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]


def test_unknown_resample_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(thumbnail_resample="bicubic")
