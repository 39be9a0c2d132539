"""
Todoolittle Backend: Greeting Request Structs & View Models
=============================================================

One request struct per greeting route, built by explicit path/form
extraction in routes/greetings.py. Absent values default to "".
"""

from pydantic import BaseModel, Field


class GreetingParams(BaseModel):
    """Path parameters of GET /greetings/{name}."""
    name: str = ""


class CityGreetingParams(BaseModel):
    """
    Path parameters of GET /cities/{city}/greetings/{name}.

    `city` is extracted but not shown by the view.
    """
    city: str = ""
    name: str = ""


class CustomGreetingForm(BaseModel):
    """Form body of POST /custom_greetings."""
    greeting: str = ""


class GreetingView(BaseModel):
    """
    View model for greeting.html.

    `headline` is raw user-influenced text; the template relies on Jinja2
    autoescaping when it interpolates it.
    """
    headline: str = Field(description="Text shown as the page heading")
