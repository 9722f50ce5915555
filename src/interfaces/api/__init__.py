"""API interfaces."""
from src.interfaces.api.routers import pages_router, videos_router

__all__ = [
    "pages_router",
    "videos_router",
]
