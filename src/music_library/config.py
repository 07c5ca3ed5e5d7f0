"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Music Library API"
    debug: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8787
    cors_origins: list[str] = ["*"]

    # Audio uploads are never stored, only given a synthesized URL
    audio_base_url: str = "https://example.com/audio"

    # OpenAPI document servers
    local_server_url: str = "http://localhost:8787"
    public_server_url: str = ""

    favicon_emoji: str = "🎵"

    @field_validator("audio_base_url", "local_server_url", "public_server_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs so paths can be appended with a single slash."""
        return v.rstrip("/")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is a usable TCP port."""
        if not 1 <= v <= 65535:
            msg = "Port must be between 1 and 65535"
            raise ValueError(msg)
        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if "*" in self.cors_origins:
            warnings.append("CORS_ORIGINS allows any origin - restrict it outside of demos")

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
