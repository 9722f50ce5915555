"""Video repository - files in a single upload directory."""
import logging
from pathlib import Path
from typing import BinaryIO, Callable, List, Optional

from src.config import Settings, settings
from src.domain.errors import (
    DeletionFailureError,
    InvalidFormatError,
    VideoNotFoundError,
    WriteFailureError,
)
from src.domain.models.video import StoredVideo, UploadResult
from src.domain.services.naming import (
    build_stored_name,
    current_millis,
    newest_first_key,
    reduce_to_basename,
    split_stored_name,
    uploaded_at,
    validate_original_filename,
)
from src.infrastructure.filesystem import dir_exists, ensure_dir, write_stream_exclusive

logger = logging.getLogger(__name__)

MAX_NAME_ATTEMPTS = 1000


class VideoRepository:
    """Video storage repository."""

    def __init__(
        self,
        upload_dir: Path,
        accepted_content_type: str = "video/mp4",
        video_extension: str = ".mp4",
        chunk_size: int = 1024 * 1024,
        clock: Callable[[], int] = current_millis,
    ):
        self.upload_dir = Path(upload_dir).resolve()
        self.accepted_content_type = accepted_content_type
        self.video_extension = video_extension
        self.chunk_size = chunk_size
        self._clock = clock
        self.initialize()

    def initialize(self) -> None:
        """Ensure the upload directory exists. OSError propagates."""
        ensure_dir(self.upload_dir)

    def accept_upload(
        self,
        original_filename: Optional[str],
        content_type: Optional[str],
        stream: BinaryIO,
    ) -> UploadResult:
        """Persist an uploaded video under a timestamp-prefixed name."""
        if content_type != self.accepted_content_type:
            logger.info("Rejected upload %r with content type %r", original_filename, content_type)
            raise InvalidFormatError(filename=original_filename)

        name = validate_original_filename(original_filename)
        millis = self._clock()

        for _ in range(MAX_NAME_ATTEMPTS):
            stored_name = build_stored_name(name, millis)
            destination = self.upload_dir / stored_name
            try:
                size = write_stream_exclusive(stream, destination, self.chunk_size)
            except FileExistsError:
                millis += 1
                continue
            except OSError as exc:
                logger.exception("Failed to write upload %s", destination)
                raise WriteFailureError(filename=name) from exc

            logger.info("Stored upload %s (%d bytes)", stored_name, size)
            return UploadResult(filename=stored_name, original_filename=name, size_bytes=size)

        raise WriteFailureError(f"Failed to allocate unique filename for {name}", filename=name)

    def list_videos(self) -> List[str]:
        """List stored video names, newest first. Never raises."""
        if not dir_exists(self.upload_dir):
            return []

        try:
            names = [
                entry.name
                for entry in self.upload_dir.iterdir()
                if entry.name.endswith(self.video_extension)
            ]
        except OSError:
            logger.warning("Could not read upload directory %s", self.upload_dir, exc_info=True)
            return []

        names.sort(key=newest_first_key, reverse=True)
        return names

    def get_video(self, requested_name: str) -> StoredVideo:
        """Get metadata of a stored video."""
        path = self._resolve(requested_name)
        if not path.is_file():
            raise VideoNotFoundError(filename=requested_name)
        stat = path.stat()

        _, original = split_stored_name(path.name)
        return StoredVideo(
            filename=path.name,
            original_filename=original,
            uploaded_at=uploaded_at(path.name),
            size_bytes=stat.st_size,
        )

    def delete_video(self, requested_name: str) -> str:
        """Delete a stored video; returns the name that was removed."""
        path = self._resolve(requested_name)
        if not path.is_file():
            raise VideoNotFoundError(filename=requested_name)

        try:
            path.unlink()
        except FileNotFoundError:
            raise VideoNotFoundError(filename=requested_name)
        except OSError as exc:
            logger.exception("Failed to delete %s", path)
            raise DeletionFailureError(filename=path.name) from exc

        logger.info("Deleted %s", path.name)
        return path.name

    def _resolve(self, requested_name: str) -> Path:
        """Map an untrusted name to a path directly inside the upload directory."""
        name = reduce_to_basename(requested_name)
        if not name:
            raise VideoNotFoundError(filename=requested_name)
        path = self.upload_dir / name
        if path.parent != self.upload_dir:
            raise VideoNotFoundError(filename=requested_name)
        return path


def create_video_repository(
    config: Optional[Settings] = None,
    clock: Callable[[], int] = current_millis,
) -> VideoRepository:
    """Build a repository from application settings."""
    config = config or settings
    return VideoRepository(
        upload_dir=config.upload_dir,
        accepted_content_type=config.accepted_content_type,
        video_extension=config.video_extension,
        chunk_size=config.upload_chunk_size,
        clock=clock,
    )
