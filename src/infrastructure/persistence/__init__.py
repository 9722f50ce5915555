"""Persistence infrastructure."""
from src.infrastructure.persistence.video_repository import (
    VideoRepository,
    create_video_repository,
)

__all__ = [
    "VideoRepository",
    "create_video_repository",
]
