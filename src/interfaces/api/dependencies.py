"""Request dependencies."""
from fastapi import Request

from src.infrastructure.persistence import VideoRepository


def get_video_repository(request: Request) -> VideoRepository:
    """Return the repository bound to the running app."""
    return request.app.state.video_repository
