"""
Directory Query Service.

Fixed read queries behind GET /api/bodies and GET /api/officials.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import DBSession
from modules.directory.models import Body, Official

logger = logging.getLogger(__name__)


class DirectoryService:
    """Reads bodies and officials for one request."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_bodies(self) -> list[Body]:
        """All bodies, top-level bodies first, then by parent and id."""
        result = await self._db.execute(
            select(Body).order_by(Body.parent.asc().nulls_first(), Body.id)
        )
        bodies = list(result.scalars().all())
        logger.info(f"Fetched {len(bodies)} bodies")
        return bodies

    async def list_officials(self) -> list[Official]:
        """All officials ordered by id."""
        result = await self._db.execute(select(Official).order_by(Official.id))
        officials = list(result.scalars().all())
        logger.info(f"Fetched {len(officials)} officials")
        return officials


def get_directory_service(db: DBSession) -> DirectoryService:
    """FastAPI dependency providing a request-scoped DirectoryService."""
    return DirectoryService(db)
