"""Domain models."""
from src.domain.models.video import StoredVideo, UploadResult

__all__ = [
    "StoredVideo",
    "UploadResult",
]
