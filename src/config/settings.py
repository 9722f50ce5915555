"""
Application settings.

Centralizes configuration using Pydantic BaseSettings. This keeps defaults
in one place and allows overriding via environment variables.
"""
from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Storage
    public_dir: Path = Path("./public")
    upload_dir: Path = Path("./public/uploads")
    upload_chunk_size: int = 1024 * 1024

    # Accepted uploads
    accepted_content_type: str = "video/mp4"
    video_extension: str = ".mp4"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="VIDSTASH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    def get_index_page(self) -> Path:
        """Return landing page path inside the public directory."""
        return self.public_dir / "index.html"


# Singleton instance
settings = Settings()
