"""
Request-scoped dependencies shared across modules.

    @router.get("/explorer")
    async def explorer(client: HttpClientDep): ...

Database sessions come from ``core.database.DBSession``.
"""

from typing import Annotated

import httpx
from fastapi import Depends, Request

from core.http_client import get_http_client_from_app


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Hand the lifespan-managed client to a route."""
    return get_http_client_from_app(request.app)


HttpClientDep = Annotated[httpx.AsyncClient, Depends(get_http_client)]
