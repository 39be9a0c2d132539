"""
Todoolittle Backend: Greeting Route Handlers
==============================================

What:  Static and interpolated greetings.
How:   Each route builds its request struct with an explicit extractor
       dependency, asks GreetingService for the text or view model, and
       answers with text/plain or a rendered greeting.html.

Plain-text responses echo path values verbatim. HTML responses escape them.
"""

from fastapi import APIRouter, Depends, Path, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from todoolittle.context import AppContext
from todoolittle.dependencies import get_context, read_form_field
from todoolittle.schemas.greeting import (
    CityGreetingParams,
    CustomGreetingForm,
    GreetingParams,
)
from todoolittle.services.greeting_service import greeting_service
from todoolittle.views import render

router = APIRouter(tags=["Greetings"])


# ── Request struct extractors ─────────────────────────────────────────────

def greeting_params(name: str = Path(...)) -> GreetingParams:
    return GreetingParams(name=name)


def city_greeting_params(
    city: str = Path(...),
    name: str = Path(...),
) -> CityGreetingParams:
    return CityGreetingParams(city=city, name=name)


async def custom_greeting_form(request: Request) -> CustomGreetingForm:
    return CustomGreetingForm(greeting=await read_form_field(request, "greeting"))


# ── Routes ────────────────────────────────────────────────────────────────

@router.get("/", response_class=PlainTextResponse, summary="Home page greeting")
async def home() -> PlainTextResponse:
    return PlainTextResponse(greeting_service.home())


@router.get("/about", response_class=PlainTextResponse, summary="About text")
async def about() -> PlainTextResponse:
    return PlainTextResponse(greeting_service.about())


@router.get(
    "/greetings/{name}",
    response_class=PlainTextResponse,
    summary="Greet someone by name",
)
async def greet(
    params: GreetingParams = Depends(greeting_params),
) -> PlainTextResponse:
    return PlainTextResponse(greeting_service.greet(params))


@router.get(
    "/cities/{city}/greetings/{name}",
    response_class=HTMLResponse,
    summary="Greeting page for someone in a city",
)
async def city_greeting(
    request: Request,
    params: CityGreetingParams = Depends(city_greeting_params),
    context: AppContext = Depends(get_context),
) -> HTMLResponse:
    view = greeting_service.city_greeting(params)
    return render(request, context, "greeting.html", view)


@router.post(
    "/custom_greetings",
    response_class=HTMLResponse,
    summary="Greeting page showing a submitted greeting",
)
async def custom_greeting(
    request: Request,
    form: CustomGreetingForm = Depends(custom_greeting_form),
    context: AppContext = Depends(get_context),
) -> HTMLResponse:
    """
    Render the greeting from the `greeting` form field.

    A missing field renders an empty heading rather than failing.
    """
    view = greeting_service.custom_greeting(form)
    return render(request, context, "greeting.html", view)
