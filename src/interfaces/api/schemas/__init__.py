"""API schemas."""
from src.interfaces.api.schemas.video import (
    HealthResponse,
    OperationResponse,
    UploadResponse,
    VideoInfoResponse,
)

__all__ = [
    "HealthResponse",
    "OperationResponse",
    "UploadResponse",
    "VideoInfoResponse",
]
