"""Directory Routers Package."""

from modules.directory.routers.directory import router as directory_router
from modules.directory.routers.explorer import router as explorer_router
from modules.directory.routers.leaders import router as leaders_router

__all__ = [
    "directory_router",
    "explorer_router",
    "leaders_router",
]
