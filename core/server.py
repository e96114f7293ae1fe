"""
Base FastAPI application.

Sets up CORS for the read-only API, response hardening headers and an
optional root redirect. Module routers are mounted afterwards by ``main.py``.
"""

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from core.app_context import AppContext

if TYPE_CHECKING:
    from core.registry import ModuleRegistry

_logger = logging.getLogger(__name__)

DEV_ORIGINS = ("http://localhost:3000", "http://localhost:8000", "http://127.0.0.1:8000")
SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def cors_origins(context: AppContext) -> list[str]:
    """BASE_URL, plus local dev servers when APP_DEBUG is on."""
    origins = []
    base_url = context.config.get("server.base_url", "")
    if base_url:
        origins.append(base_url)
    if context.config.get("app.debug", False):
        origins.extend(DEV_ORIGINS)
    return origins


def create_base_app(
    context: AppContext,
    registry: "ModuleRegistry | None" = None,
    title: str = "Leadership Directory API",
    description: str = "Read-only directory of government and party leadership",
    version: str = "1.0.0",
    home_path: str | None = None,
) -> FastAPI:
    """
    Build the FastAPI instance shared by all modules.

    ``context`` and ``registry`` are exposed on ``app.state`` for handlers
    that need them. When ``home_path`` is given, ``/`` redirects there.
    """
    app = FastAPI(title=title, description=description, version=version)
    app.state.context = context
    app.state.registry = registry

    origins = cors_origins(context)
    if origins:
        _logger.info(f"CORS origins: {origins}")
    else:
        _logger.warning("No BASE_URL and debug off: cross-origin requests will be refused")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response

    if home_path:
        @app.get("/", include_in_schema=False)
        async def root() -> RedirectResponse:
            return RedirectResponse(url=home_path)

    return app
