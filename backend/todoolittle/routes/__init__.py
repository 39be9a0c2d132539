# Routes package init
"""
Todoolittle Backend: Routes Package
=====================================

Route Inventory (mounted in this order by main.create_app):
    - greetings.py:  GET  /
                     GET  /about
                     GET  /greetings/{name}
                     GET  /cities/{city}/greetings/{name}
                     POST /custom_greetings
    - todos.py:      GET  /todos
                     POST /todos
    - health.py:     GET  /health

Routes stay thin: build the typed request struct, call a service, pick
the response type (plain text, rendered view, redirect).
"""
