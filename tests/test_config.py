"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from music_library.config import Settings


def test_defaults() -> None:
    """Test default settings."""
    settings = Settings(_env_file=None)

    assert settings.app_name == "Music Library API"
    assert settings.port == 8787
    assert settings.audio_base_url == "https://example.com/audio"


def test_trailing_slashes_stripped() -> None:
    """Test base URLs are normalized."""
    settings = Settings(_env_file=None, audio_base_url="https://cdn.example.com/audio/")

    assert settings.audio_base_url == "https://cdn.example.com/audio"


def test_invalid_port() -> None:
    """Test an out-of-range port is rejected."""
    with pytest.raises(ValidationError):
        Settings(_env_file=None, port=70000)


def test_runtime_warnings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test runtime config warnings."""
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    restricted = Settings(_env_file=None, cors_origins=["https://app.example.com"])
    assert restricted.validate_runtime_config() == []

    warnings = Settings(_env_file=None, debug=True).validate_runtime_config()
    assert len(warnings) == 2
    assert any("DEBUG" in w for w in warnings)
    assert any("CORS_ORIGINS" in w for w in warnings)
