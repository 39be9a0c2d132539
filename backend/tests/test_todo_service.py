"""
Todoolittle Backend: Todo Service Unit Tests
===============================================

What:  TodoService list/create against a mocked AsyncSession.

What we test:
    ✅ Empty store lists nothing
    ✅ Rows come back as TodoItems in the order the query returns them
    ✅ Create stores the description untouched and returns the assigned id
    ✅ None description is stored as ""
    ✅ SQLAlchemy failures surface as DatabaseError
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError, SQLAlchemyError

from todoolittle.exceptions import DatabaseError
from todoolittle.models.todo import Todo
from todoolittle.services.todo_service import TodoService


def _rows(*pairs):
    rows = []
    for todo_id, description in pairs:
        row = MagicMock()
        row.id = todo_id
        row.description = description
        rows.append(row)
    return rows


class TestTodoServiceList:
    """Tests for list_todos."""

    def setup_method(self):
        self.service = TodoService()

    @pytest.mark.asyncio
    async def test_list_todos_empty(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = []
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_todos(mock_db_session)

        assert result.todos == []
        assert result.count == 0

    @pytest.mark.asyncio
    async def test_list_todos_with_results(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = _rows(
            (1, "buy milk"), (2, "walk the dog"), (3, "")
        )
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_todos(mock_db_session)

        assert [t.id for t in result.todos] == [1, 2, 3]
        assert [t.description for t in result.todos] == ["buy milk", "walk the dog", ""]
        assert result.count == 3
        mock_db_session.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_list_todos_database_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("unable to open database file"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_todos(mock_db_session)

        assert exc_info.value.context["error_type"] == "OperationalError"


class TestTodoServiceCreate:
    """Tests for create_todo."""

    def setup_method(self):
        self.service = TodoService()

    def _assign_id_on_flush(self, session, todo_id):
        async def flush():
            added = session.add.call_args[0][0]
            added.id = todo_id
        session.flush = AsyncMock(side_effect=flush)

    @pytest.mark.asyncio
    async def test_create_todo_success(self, mock_db_session):
        self._assign_id_on_flush(mock_db_session, 7)

        result = await self.service.create_todo(mock_db_session, "buy milk")

        assert result.id == 7
        assert result.description == "buy milk"
        added = mock_db_session.add.call_args[0][0]
        assert isinstance(added, Todo)
        assert added.description == "buy milk"
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_todo_keeps_description_verbatim(self, mock_db_session):
        self._assign_id_on_flush(mock_db_session, 1)
        text = "  <b>spaces & markup</b>  " + "x" * 5000

        result = await self.service.create_todo(mock_db_session, text)

        assert result.description == text

    @pytest.mark.asyncio
    async def test_create_todo_none_description_stored_empty(self, mock_db_session):
        self._assign_id_on_flush(mock_db_session, 1)

        result = await self.service.create_todo(mock_db_session, None)

        assert result.description == ""
        assert mock_db_session.add.call_args[0][0].description == ""

    @pytest.mark.asyncio
    async def test_create_todo_database_failure(self, mock_db_session):
        mock_db_session.flush = AsyncMock(side_effect=SQLAlchemyError("disk I/O error"))

        with pytest.raises(DatabaseError):
            await self.service.create_todo(mock_db_session, "buy milk")

        mock_db_session.commit.assert_not_awaited()
