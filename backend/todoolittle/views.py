"""
Todoolittle Backend: View Rendering
=====================================

Templates never see handler locals. A handler builds a view model and
passes it here; the template reads it as `view`.
"""

from fastapi import Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from todoolittle.context import AppContext


def render(
    request: Request,
    context: AppContext,
    template_name: str,
    view: BaseModel,
) -> HTMLResponse:
    """Render `template_name` with `view` as its only variable."""
    return context.templates.TemplateResponse(request, template_name, {"view": view})
