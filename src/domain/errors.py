"""Video store error taxonomy."""
from typing import Optional


class VideoStoreError(Exception):
    """Base exception for video store operations."""

    status_code: int = 500
    default_message: str = "Video store error."

    def __init__(self, message: Optional[str] = None, filename: Optional[str] = None):
        self.message = message or self.default_message
        self.filename = filename
        super().__init__(self.message)


class InvalidFormatError(VideoStoreError):
    """Declared content type is not the accepted video type."""

    status_code = 400
    default_message = "No file uploaded or invalid format."


class InvalidFilenameError(VideoStoreError):
    """Original filename cannot be stored safely."""

    status_code = 400
    default_message = "Invalid filename."


class WriteFailureError(VideoStoreError):
    """Upload could not be written to disk."""

    status_code = 500
    default_message = "Failed to store uploaded file."


class VideoNotFoundError(VideoStoreError):
    """No stored video with the requested name."""

    status_code = 404
    default_message = "File not found."


class DeletionFailureError(VideoStoreError):
    """Stored video exists but could not be removed."""

    status_code = 500
    default_message = "Failed to delete file."
