"""
Todoolittle Backend: Greeting Service Unit Tests
==================================================
"""

from todoolittle.schemas.greeting import (
    CityGreetingParams,
    CustomGreetingForm,
    GreetingParams,
)
from todoolittle.services.greeting_service import GreetingService


class TestGreetingService:

    def setup_method(self):
        self.service = GreetingService()

    def test_home_and_about_are_constant(self):
        assert self.service.home() == "Hello world!"
        assert self.service.about() == "A little about me."

    def test_greet_interpolates_name(self):
        assert self.service.greet(GreetingParams(name="Ada")) == "Hey Ada!"

    def test_greet_leaves_markup_alone(self):
        # Plain-text output; escaping only happens in HTML views
        assert self.service.greet(GreetingParams(name="<i>Ada</i>")) == "Hey <i>Ada</i>!"

    def test_city_greeting_uses_name_only(self):
        view = self.service.city_greeting(CityGreetingParams(city="Paris", name="Ada"))
        assert view.headline == "Hey Ada!"
        assert "Paris" not in view.headline

    def test_custom_greeting_passes_greeting_through(self):
        view = self.service.custom_greeting(CustomGreetingForm(greeting="Howdy, partner"))
        assert view.headline == "Howdy, partner"

    def test_custom_greeting_defaults_to_empty(self):
        view = self.service.custom_greeting(CustomGreetingForm())
        assert view.headline == ""
