# Services package init
"""
Todoolittle Backend: Services Layer
=====================================

What:  Behavior that sits between routes (HTTP) and the database.

Service Inventory:
    - GreetingService: greeting text and greeting view models (no I/O)
    - TodoService: reads all todos / inserts one todo

Both are stateless; each module exposes a ready-made instance.
"""
