"""
Todoolittle Backend: FastAPI Dependencies
===========================================

What:  Bridges from a request to the AppContext, to a per-request session,
       and to the submitted form fields.
Who:   Injected into route handlers with Depends().
"""

import sys
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from todoolittle.context import AppContext

# Form fields are free text with no length limit. Starlette's default
# max_part_size (1 MiB) would answer 400 for longer values.
FORM_MAX_PART_SIZE = sys.maxsize


def get_context(request: Request) -> AppContext:
    """Return the AppContext of the application serving this request."""
    return request.app.state.context


async def get_db_session(
    context: AppContext = Depends(get_context),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Provide a database session for the duration of one request.

    Commits when the handler returns, rolls back when it raises. Database
    errors are not retried; they propagate to the global handlers.

    Example usage in a route:
        @router.get("/todos")
        async def list_todos(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with context.database.session() as session:
        yield session


async def read_form_field(request: Request, field: str) -> str:
    """
    Return one text field of the form body, or "" when it is absent.

    Accepts urlencoded and multipart bodies. A file upload under the same
    name counts as absent.
    """
    form = await request.form(max_part_size=FORM_MAX_PART_SIZE)
    value = form.get(field, "")
    return value if isinstance(value, str) else ""
