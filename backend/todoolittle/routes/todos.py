"""
Todoolittle Backend: Todo Route Handlers
==========================================

What:  GET /todos (rendered list) and POST /todos (create, then redirect).
How:   Builds a NewTodoForm from the form body, delegates to TodoService,
       answers with a rendered view or a 303 redirect.

Request Flow (POST):
    1. Browser submits the form on the list page
    2. description is read from the form ("" when absent)
    3. TodoService inserts one row
    4. 303 See Other → browser issues GET /todos
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from todoolittle.context import AppContext
from todoolittle.dependencies import get_context, get_db_session, read_form_field
from todoolittle.schemas.common import ErrorResponse
from todoolittle.schemas.todo import NewTodoForm
from todoolittle.services.todo_service import todo_service
from todoolittle.views import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Todos"])

TODOS_PATH = "/todos"


async def new_todo_form(request: Request) -> NewTodoForm:
    return NewTodoForm(description=await read_form_field(request, "description"))


@router.get(
    TODOS_PATH,
    response_class=HTMLResponse,
    responses={500: {"description": "Store unavailable", "model": ErrorResponse}},
    summary="List every todo",
)
async def list_todos(
    request: Request,
    context: AppContext = Depends(get_context),
    db: AsyncSession = Depends(get_db_session),
) -> HTMLResponse:
    view = await todo_service.list_todos(db)
    return render(request, context, "todos/index.html", view)


@router.post(
    TODOS_PATH,
    status_code=303,
    response_class=RedirectResponse,
    responses={500: {"description": "Store unavailable", "model": ErrorResponse}},
    summary="Create a todo and go back to the list",
)
async def create_todo(
    form: NewTodoForm = Depends(new_todo_form),
    db: AsyncSession = Depends(get_db_session),
) -> RedirectResponse:
    """
    Create one todo from the `description` form field.

    Always redirects, whatever the description holds (including nothing).
    Posting the same description twice stores two todos.
    """
    todo = await todo_service.create_todo(db, form.description)
    logger.debug("Redirecting to %s after creating todo %s", TODOS_PATH, todo.id)
    # 303 so the browser follows up with a GET, not a re-POST
    return RedirectResponse(url=TODOS_PATH, status_code=303)
