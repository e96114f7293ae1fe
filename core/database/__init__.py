"""
Async PostgreSQL access for the directory tables.

Routes take a request-scoped session through ``DBSession``; scripts use
``get_standalone_session``.
"""

from core.database.base import Base
from core.database.engine import (
    DatabaseConfigurationError,
    close_engine,
    get_database_url,
    get_engine,
)
from core.database.session import (
    DBSession,
    close_db_connections,
    get_db_session,
    get_session_factory,
    get_standalone_session,
    init_database,
)

__all__ = [
    "Base",
    "DBSession",
    "DatabaseConfigurationError",
    "close_db_connections",
    "close_engine",
    "get_database_url",
    "get_db_session",
    "get_engine",
    "get_session_factory",
    "get_standalone_session",
    "init_database",
]
