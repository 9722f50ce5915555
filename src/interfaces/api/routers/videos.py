"""Videos API router."""
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from src.domain.errors import InvalidFormatError
from src.infrastructure.persistence import VideoRepository
from src.interfaces.api.dependencies import get_video_repository
from src.interfaces.api.schemas.video import (
    OperationResponse,
    UploadResponse,
    VideoInfoResponse,
)


router = APIRouter(tags=["videos"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": OperationResponse}, 500: {"model": OperationResponse}},
)
def upload_video(
    video_file: Optional[UploadFile] = File(None, alias="videoFile"),
    repository: VideoRepository = Depends(get_video_repository),
) -> UploadResponse:
    """Upload a single video file."""
    if not video_file or not video_file.filename:
        raise InvalidFormatError()

    try:
        result = repository.accept_upload(video_file.filename, video_file.content_type, video_file.file)
    finally:
        video_file.file.close()

    return UploadResponse(success=True, message="File uploaded successfully!", filename=result.filename)


@router.get("/videos", response_model=List[str])
def list_videos(repository: VideoRepository = Depends(get_video_repository)) -> List[str]:
    """List stored videos, newest first."""
    return repository.list_videos()


@router.get(
    "/videos/{filename}/info",
    response_model=VideoInfoResponse,
    responses={404: {"model": OperationResponse}},
)
def get_video_info(
    filename: str,
    repository: VideoRepository = Depends(get_video_repository),
) -> VideoInfoResponse:
    """Get stored video details."""
    video = repository.get_video(filename)
    return VideoInfoResponse(**video.model_dump())


@router.delete(
    "/delete/{filename:path}",
    response_model=OperationResponse,
    responses={404: {"model": OperationResponse}, 500: {"model": OperationResponse}},
)
def delete_video(
    filename: str,
    repository: VideoRepository = Depends(get_video_repository),
) -> OperationResponse:
    """Delete a stored video."""
    deleted = repository.delete_video(filename)
    return OperationResponse(success=True, message=f"Deleted {deleted}")
