"""API routers."""
from src.interfaces.api.routers.pages import router as pages_router
from src.interfaces.api.routers.videos import router as videos_router

__all__ = [
    "pages_router",
    "videos_router",
]
