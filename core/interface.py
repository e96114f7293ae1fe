"""
Contract implemented by every feature package under ``modules/``.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from fastapi import APIRouter

    from core.app_context import AppContext


class IAppModule(ABC):
    """
    A pluggable feature: a name, a start hook and optional routers.

    The loader instantiates subclasses with no arguments, so any wiring
    belongs in ``on_entry``.
    """

    @abstractmethod
    def get_module_name(self) -> str:
        """Registry key, also shown in ``/api/status``."""

    @abstractmethod
    def on_entry(self, context: "AppContext") -> None:
        """Build routers and services once the shared context exists."""

    def get_api_router(self) -> Optional["APIRouter"]:
        """JSON endpoints; mounted under ``/api``."""
        return None

    def get_page_router(self) -> Optional["APIRouter"]:
        """HTML pages; mounted at the application root."""
        return None

    def on_shutdown(self) -> None:
        pass

    def get_status(self) -> dict[str, Any]:
        """
        Health summary for the status endpoint.

        Shape: ``{"status": "active" | "initializing" | "error", "details": {...}}``
        """
        return {"status": "active", "details": {}}
