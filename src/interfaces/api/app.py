"""FastAPI application setup."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.config import Settings, settings
from src.domain.errors import InvalidFormatError, VideoStoreError
from src.infrastructure.filesystem import dir_writable
from src.infrastructure.persistence import VideoRepository, create_video_repository
from src.interfaces.api.routers import pages_router, videos_router
from src.interfaces.api.schemas.video import HealthResponse, OperationResponse

logger = logging.getLogger(__name__)


async def video_store_error_handler(request: Request, exc: VideoStoreError) -> JSONResponse:
    """Render store errors as a success/message envelope."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    body = OperationResponse(success=False, message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed requests (e.g. a non-file upload field) as invalid format."""
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    body = OperationResponse(success=False, message=InvalidFormatError.default_message)
    return JSONResponse(status_code=InvalidFormatError.status_code, content=body.model_dump())


def create_app(
    config: Optional[Settings] = None,
    repository: Optional[VideoRepository] = None,
) -> FastAPI:
    """Build the app; raises if the upload directory cannot be created."""
    config = config or settings
    repository = repository or create_video_repository(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage app startup/shutdown."""
        logger.info("Server running at http://%s:%d", config.host, config.port)
        logger.info("Videos are stored in: %s", repository.upload_dir)
        yield

    app = FastAPI(
        title="vidstash",
        description="Upload, list and delete MP4 videos stored on local disk",
        version="0.1.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.video_repository = repository

    app.add_exception_handler(VideoStoreError, video_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(pages_router)
    app.include_router(videos_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health probe."""
        writable = dir_writable(repository.upload_dir)
        return HealthResponse(status="healthy" if writable else "degraded", storage_writable=writable)

    return app
