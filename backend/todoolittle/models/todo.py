"""
Todoolittle Backend: Todo SQLAlchemy Model
============================================

What:  ORM model for the `todos` table.
Who:   Used by TodoService for reads/inserts and by Alembic for migrations.

Table Design:
    - INTEGER PRIMARY KEY AUTOINCREMENT: SQLite never hands out an id twice,
      even after the highest row is removed by hand, so ids only grow.
    - description: TEXT NOT NULL, no length limit, no uniqueness.

Rows are only ever inserted. Nothing in the application updates or deletes
them.
"""

from sqlalchemy import Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from todoolittle.database import Base


class Todo(Base):
    """A single to-do entry."""

    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default=text("''"),
    )

    def __repr__(self) -> str:
        return f"<Todo(id={self.id}, description={self.description!r})>"
