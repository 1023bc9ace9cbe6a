from .thumbnails import router as thumbnails_router
from .videos import router as videos_router

__all__ = ["thumbnails_router", "videos_router"]
