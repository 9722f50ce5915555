"""Video API schemas."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class OperationResponse(BaseModel):
    """Success/failure envelope for mutating operations."""
    success: bool
    message: Optional[str] = None


class UploadResponse(OperationResponse):
    """Upload response."""
    filename: Optional[str] = None


class VideoInfoResponse(BaseModel):
    """Stored video details."""
    filename: str
    original_filename: str
    uploaded_at: Optional[datetime] = None
    size_bytes: int


class HealthResponse(BaseModel):
    """Health probe response."""
    status: str
    storage_writable: bool
