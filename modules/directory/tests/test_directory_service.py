"""
Unit Tests for DirectoryService queries.
"""

import pytest
from unittest.mock import MagicMock
from sqlalchemy.dialects import postgresql

from modules.directory.models import Body, Official
from modules.directory.services.directory import DirectoryService


def _compiled(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


def _result(rows) -> MagicMock:
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


class TestDirectoryService:

    @pytest.mark.asyncio
    async def test_list_bodies_roots_first(self, mock_db_session):
        bodies = [Body(id=1, name="Party", members=[], parent=None)]
        mock_db_session.execute.return_value = _result(bodies)

        result = await DirectoryService(mock_db_session).list_bodies()

        assert result == bodies
        sql = _compiled(mock_db_session.execute.call_args[0][0])
        assert "FROM bodies" in sql
        assert "ORDER BY bodies.parent ASC NULLS FIRST, bodies.id" in sql

    @pytest.mark.asyncio
    async def test_list_officials_by_id(self, mock_db_session):
        officials = [Official(id=1, name_en="Xi Jinping", positions=[], degrees=[])]
        mock_db_session.execute.return_value = _result(officials)

        result = await DirectoryService(mock_db_session).list_officials()

        assert result == officials
        sql = _compiled(mock_db_session.execute.call_args[0][0])
        assert "FROM officials" in sql
        assert "ORDER BY officials.id" in sql

    @pytest.mark.asyncio
    async def test_does_not_commit(self, mock_db_session):
        mock_db_session.execute.return_value = _result([])

        await DirectoryService(mock_db_session).list_bodies()

        mock_db_session.commit.assert_not_called()
