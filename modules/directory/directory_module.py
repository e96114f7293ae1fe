"""
Leadership directory feature.

JSON endpoints (mounted under /api):
    GET /bodies      governmental bodies, parents first
    GET /officials   officials with positions and degrees
    GET /leaders     branch > body > group > leader aggregation

Pages:
    GET /explorer    searchable, filterable leadership hierarchy
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from fastapi import APIRouter

from core.interface import IAppModule
from modules.directory.core.config import get_directory_settings
from modules.directory.routers import directory_router, explorer_router, leaders_router

if TYPE_CHECKING:
    from core.app_context import AppContext


logger = logging.getLogger(__name__)


def _combine(*routers: APIRouter) -> APIRouter:
    combined = APIRouter()
    for router in routers:
        combined.include_router(router)
    return combined


class DirectoryModule(IAppModule):

    def __init__(self) -> None:
        self._api_router: Optional[APIRouter] = None
        self._page_router: Optional[APIRouter] = None

    def get_module_name(self) -> str:
        return "directory"

    def on_entry(self, context: "AppContext") -> None:
        self._api_router = _combine(directory_router, leaders_router)
        self._page_router = _combine(explorer_router)

        api_base_url = get_directory_settings().api_base_url or "the origin serving each request"
        context.log_event(f"Explorer will read directory data from {api_base_url}", "DIRECTORY")
        logger.info("Directory routes ready")

    def get_api_router(self) -> Optional[APIRouter]:
        return self._api_router

    def get_page_router(self) -> Optional[APIRouter]:
        return self._page_router

    def on_shutdown(self) -> None:
        logger.info("Directory module stopped")

    def get_status(self) -> Dict[str, Any]:
        settings = get_directory_settings()
        ready = self._api_router is not None
        return {
            "status": "active" if ready else "initializing",
            "details": {
                "app_name": settings.app_name,
                "api_base_url": settings.api_base_url,
            },
        }
