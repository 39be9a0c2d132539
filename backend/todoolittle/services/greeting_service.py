"""
Todoolittle Backend: Greeting Service
=======================================

Pure string formatting for the greeting routes. Values are interpolated
as-is: plain-text responses return them verbatim, HTML views escape them
at render time.
"""

from todoolittle.schemas.greeting import (
    CityGreetingParams,
    CustomGreetingForm,
    GreetingParams,
    GreetingView,
)

HOME_TEXT = "Hello world!"
ABOUT_TEXT = "A little about me."


class GreetingService:
    """
    Greeting texts and view models.

    Responsibilities:
        - home() / about(): fixed texts, independent of the request
        - greet(): plain-text greeting for one name
        - city_greeting() / custom_greeting(): GreetingView for greeting.html

    Stateless and free of I/O, so it never raises.
    """

    def home(self) -> str:
        return HOME_TEXT

    def about(self) -> str:
        return ABOUT_TEXT

    def greet(self, params: GreetingParams) -> str:
        """Return "Hey {name}!" with the name exactly as given."""
        return f"Hey {params.name}!"

    def city_greeting(self, params: CityGreetingParams) -> GreetingView:
        # city is part of the route but the page greets by name only
        return GreetingView(headline=f"Hey {params.name}!")

    def custom_greeting(self, form: CustomGreetingForm) -> GreetingView:
        """
        Use the submitted greeting as the page heading.

        An empty greeting gives an empty heading.
        """
        return GreetingView(headline=form.greeting)


greeting_service = GreetingService()
