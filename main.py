"""
Leadership Directory ASGI entry point.

    uvicorn main:app --host 0.0.0.0 --port 8000

or ``python main.py`` to use SERVER_HOST / SERVER_PORT / APP_DEBUG.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI

from api.status_api import init_status_api
from core.app_context import AppContext
from core.database import close_db_connections, get_engine
from core.http_client import create_http_client_context
from core.logging_config import setup_logging
from core.registry import ModuleLoader, ModuleRegistry
from core.server import create_base_app
from modules.directory.views import EXPLORER_PATH

MODULES_DIR = Path(__file__).parent / "modules"
RELOAD_EXCLUDES = ["logs/*", "*.log", "**/__pycache__/*", "**/*.pyc", ".venv/*"]

logger = logging.getLogger(__name__)


def load_modules(context: AppContext) -> ModuleRegistry:
    """Discover the feature packages and activate them against ``context``."""
    registry = ModuleRegistry()
    registry.set_context(context)
    count = ModuleLoader(registry).load_from_directory(str(MODULES_DIR))
    context.log_event(f"{count} module(s) loaded from {MODULES_DIR.name}/", "LOADER")
    return registry


def mount_routers(app: FastAPI, context: AppContext, registry: ModuleRegistry) -> None:
    """Status endpoints first, then each module's JSON (/api) and page routers."""
    app.include_router(init_status_api(context, registry))

    api_routers = registry.get_api_routers()
    for router in api_routers:
        app.include_router(router, prefix="/api")
    page_routers = registry.get_page_routers()
    for router in page_routers:
        app.include_router(router)
    context.log_event(
        f"Mounted {len(api_routers)} API router(s) under /api and {len(page_routers)} page router(s)",
        "LOADER",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    context: AppContext = app.state.context
    registry: ModuleRegistry = app.state.registry
    port = context.config.get("server.port", 8000)

    logger.info("Leadership Directory starting")
    async with create_http_client_context(app):
        # Fails fast when DATABASE_URL is missing
        get_engine()
        context.set_server_status(True, port)
        context.log_event("Application started", "SUCCESS")
        try:
            yield
        finally:
            logger.info("Leadership Directory stopping")
            registry.shutdown_all()
            await close_db_connections()
            context.set_server_status(False, port)


def create_app() -> FastAPI:
    context = AppContext()
    setup_logging(context.config.get("app.log_level", "INFO"))

    registry = load_modules(context)
    application = create_base_app(context, registry, home_path=EXPLORER_PATH)
    mount_routers(application, context, registry)
    application.router.lifespan_context = lifespan
    return application


app = create_app()


def main() -> None:
    config = app.state.context.config
    debug = config.get("app.debug", False)

    options = {
        "host": config.get("server.host", "127.0.0.1"),
        "port": config.get("server.port", 8000),
        "reload": debug,
        "log_level": "warning",
        "access_log": False,
    }
    if debug:
        options["reload_excludes"] = RELOAD_EXCLUDES

    uvicorn.run("main:app", **options)


if __name__ == "__main__":
    main()
