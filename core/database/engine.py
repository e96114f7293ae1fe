"""
Process-wide AsyncEngine for the directory database.

DATABASE_URL is mandatory. Any ``postgres``/``postgresql`` URL is pointed
at the asyncpg driver, and libpq's ``sslmode`` query option is removed
since asyncpg takes SSL through ``connect_args``.

DATABASE_SSL_MODE:
    require  TLS without certificate verification (default)
    prefer   treated like require
    disable  plain TCP, local development only
"""

import logging
import ssl

from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from core.app_context import ConfigLoader

_logger = logging.getLogger(__name__)

ASYNC_DRIVERNAME = "postgresql+asyncpg"
POOL_SIZE = 10
MAX_OVERFLOW = 20

_engine: AsyncEngine | None = None


class DatabaseConfigurationError(RuntimeError):
    """DATABASE_URL is missing or empty."""


def _loaded_config() -> ConfigLoader:
    config = ConfigLoader()
    config.load()
    return config


def _normalise_url(raw_url: str) -> URL:
    url = make_url(raw_url)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername=ASYNC_DRIVERNAME)
    libpq_only = [key for key in url.query if key.lower() == "sslmode"]
    return url.difference_update_query(libpq_only)


def get_database_url(config_loader: ConfigLoader | None = None) -> str:
    """
    Return DATABASE_URL rewritten for asyncpg.

    Raises:
        DatabaseConfigurationError: If DATABASE_URL is unset or blank.
    """
    config = config_loader or _loaded_config()
    raw_url = str(config.get("database.url", "") or "").strip()
    if not raw_url:
        raise DatabaseConfigurationError("DATABASE_URL environment variable is not set")
    return _normalise_url(raw_url).render_as_string(hide_password=False)


def _get_ssl_context(ssl_mode: str) -> ssl.SSLContext | None:
    if ssl_mode == "disable":
        _logger.warning("Database TLS disabled (DATABASE_SSL_MODE=disable)")
        return None
    if ssl_mode not in ("require", "prefer"):
        _logger.warning(f"Unrecognised DATABASE_SSL_MODE '{ssl_mode}', using require")

    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def get_engine() -> AsyncEngine:
    """
    Create the engine on first use and return the same one afterwards.

    Raises:
        DatabaseConfigurationError: If DATABASE_URL is unset or blank.
    """
    global _engine
    if _engine is not None:
        return _engine

    config = _loaded_config()
    database_url = get_database_url(config)

    connect_args = {}
    ssl_context = _get_ssl_context(config.get("database.ssl_mode", "require"))
    if ssl_context is not None:
        connect_args["ssl"] = ssl_context

    _engine = create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        pool_size=POOL_SIZE,
        max_overflow=MAX_OVERFLOW,
        connect_args=connect_args,
    )
    _logger.info(f"Database engine ready for {make_url(database_url).render_as_string()}")
    return _engine


async def close_engine() -> None:
    """Dispose of the pooled connections; the next get_engine() starts afresh."""
    global _engine
    if _engine is None:
        return
    await _engine.dispose()
    _engine = None
