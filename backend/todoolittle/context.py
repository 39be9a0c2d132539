"""
Todoolittle Backend: Application Context
==========================================

What:  The one object that carries everything a request handler may need
       beyond the request itself: settings, the database and the templates.
How:   create_app() builds it and stores it on `app.state.context`.
       Route handlers receive it through the get_context dependency.
"""

import time
from dataclasses import dataclass, field

from fastapi.templating import Jinja2Templates

from todoolittle.config import Settings
from todoolittle.database import Database


@dataclass
class AppContext:
    settings: Settings
    database: Database
    templates: Jinja2Templates
    started_at: float = field(default_factory=time.time)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        # Jinja2Templates turns autoescaping on, so interpolated user text
        # is HTML-escaped in every view
        return cls(
            settings=settings,
            database=Database.from_settings(settings),
            templates=Jinja2Templates(directory=settings.templates_dir),
        )
