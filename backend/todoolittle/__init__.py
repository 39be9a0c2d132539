"""
Todoolittle Backend: Application Package Initializer
====================================================

What: Greeting pages plus a small to-do list, served by FastAPI.
Who:  Imported by uvicorn (via the create_app factory), Alembic and pytest.

Architecture Note:
    The backend is layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │           Routes (HTTP Layer)       │  ← extract request structs, pick a response
    ├─────────────────────────────────────┤
    │         Services (Behavior)         │  ← greeting text, todo store access
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy over SQLite
    └─────────────────────────────────────┘

    Nothing in the package holds process-wide state. create_app() builds an
    AppContext (settings, database, templates) and hangs it off app.state;
    routes reach it through FastAPI dependencies.
"""

__version__ = "0.1.0"
