"""
Operational endpoints: liveness, server state and loaded modules.
"""
from typing import TYPE_CHECKING, Any, Dict

from fastapi import APIRouter

if TYPE_CHECKING:
    from core.app_context import AppContext
    from core.registry import ModuleRegistry

RECENT_EVENT_COUNT = 20


def init_status_api(context: "AppContext", registry: "ModuleRegistry") -> APIRouter:
    """Build the ``/api`` status router bound to this context and registry."""
    router = APIRouter(prefix="/api", tags=["status"])

    @router.get("/health")
    async def health_check() -> Dict[str, str]:
        return {"status": "healthy"}

    @router.get("/status")
    async def get_status() -> Dict[str, Any]:
        running, port = context.get_server_status()
        return {
            "status": "running" if running else "stopped",
            "port": port,
            "modules_loaded": registry.get_module_names(),
            "recent_events": context.get_event_log()[-RECENT_EVENT_COUNT:],
        }

    @router.get("/modules")
    async def get_modules() -> Dict[str, list]:
        return {
            "modules": [
                {"name": module.get_module_name(), "status": module.get_status()}
                for module in registry.get_all_modules()
            ]
        }

    return router
