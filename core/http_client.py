"""
Shared outbound HTTP client.

The explorer page loads its data from the directory JSON API on every
render, so one pooled httpx.AsyncClient lives for the whole process. The
FastAPI lifespan opens it and parks it on ``app.state.http_client``;
routes pick it up through ``core.dependencies.HttpClientDep``.
"""

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncGenerator

import httpx

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

STATE_ATTR = "http_client"
DEFAULT_TIMEOUT = 30.0


def build_http_client(
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = 100,
    max_keepalive: int = 20,
) -> httpx.AsyncClient:
    """Construct a pooled client with the app-wide defaults."""
    return httpx.AsyncClient(
        timeout=timeout,
        limits=httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive,
        ),
        follow_redirects=True,
    )


@asynccontextmanager
async def create_http_client_context(
    app: "FastAPI",
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = 100,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Attach a shared client to ``app.state`` for the duration of the block.

    The client is closed and detached from the app on exit, even when the
    block raises.
    """
    client = build_http_client(timeout=timeout, max_connections=max_connections)
    setattr(app.state, STATE_ATTR, client)
    logger.info(f"Outbound HTTP client ready (timeout={timeout}s, pool={max_connections})")
    try:
        yield client
    finally:
        await client.aclose()
        if hasattr(app.state, STATE_ATTR):
            delattr(app.state, STATE_ATTR)
        logger.info("Outbound HTTP client closed")


def get_http_client_from_app(app: "FastAPI") -> httpx.AsyncClient:
    """
    Return the client opened by the lifespan.

    Raises:
        RuntimeError: If the app was started without the lifespan, or the
            client has already been closed.
    """
    client = getattr(app.state, STATE_ATTR, None)
    if client is None or client.is_closed:
        raise RuntimeError("Outbound HTTP client is not open; was the app lifespan run?")
    return client
