"""Stored video domain models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class StoredVideo(BaseModel):
    """Video file persisted in the upload directory."""

    filename: str
    original_filename: str
    uploaded_at: Optional[datetime] = None
    size_bytes: int = 0


class UploadResult(BaseModel):
    """Outcome of an accepted upload."""

    filename: str
    original_filename: str
    size_bytes: int
