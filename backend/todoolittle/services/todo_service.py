"""
Todoolittle Backend: Todo Service (Store Accessor)
====================================================

What:  The two operations on the todo store: list everything, insert one.
Who:   Called by routes/todos.py with the request's AsyncSession.

Error Handling Strategy:
    SQLAlchemy errors are logged with their type and wrapped in DatabaseError
    (client sees a generic 500). Nothing is retried.

Query plan:
    list:   SELECT id, description FROM todos ORDER BY id ASC
    create: INSERT INTO todos (description) VALUES (:description)
"""

import logging
from typing import Optional

from sqlalchemy import asc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todoolittle.exceptions import DatabaseError
from todoolittle.models.todo import Todo
from todoolittle.schemas.todo import TodoItem, TodoListView

logger = logging.getLogger(__name__)


class TodoService:
    """
    Store accessor for Todo records.

    Responsibilities:
        - list_todos(): every todo, in insertion order
        - create_todo(): one new todo with a store-assigned id
    """

    async def list_todos(self, db: AsyncSession) -> TodoListView:
        """
        Fetch every todo, oldest first.

        Returns:
            TodoListView with one TodoItem per row

        Raises:
            DatabaseError: the query failed (→ 500)
        """
        try:
            result = await db.execute(select(Todo).order_by(asc(Todo.id)))
            todos = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing todos: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve todos. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        return TodoListView(
            todos=[
                TodoItem(id=todo.id, description=todo.description)
                for todo in todos
            ]
        )

    async def create_todo(
        self,
        db: AsyncSession,
        description: Optional[str],
    ) -> TodoItem:
        """
        Insert one todo and return it with its assigned id.

        The description is stored exactly as given; None becomes "".
        Every call inserts a new row, so repeating it with the same text
        yields distinct records.

        The insert is committed here rather than at the end of the request,
        so the row is visible to the GET that follows the redirect.

        Raises:
            DatabaseError: the insert or commit failed (→ 500)
        """
        todo = Todo(description=description if description is not None else "")
        db.add(todo)
        try:
            await db.flush()  # assigns the id
            await db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error creating todo: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the todo. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Todo %s created (%d chars)", todo.id, len(todo.description))
        return TodoItem(id=todo.id, description=todo.description)


todo_service = TodoService()
