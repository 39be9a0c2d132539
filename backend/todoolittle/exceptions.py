"""
Todoolittle Backend: Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions raised by services.
How:   Each exception carries a client-safe message and a context dict.
       Global handlers registered in main.py turn them into the JSON error
       envelope with the right status code.

Exception Hierarchy:
    TodoolittleError (base)     → 500 Internal Server Error
    └── DatabaseError           → 500 Internal Server Error

There is no retry anywhere: a DatabaseError reaches the client as a 500 on
the request that hit it.
"""

from typing import Any, Dict, Optional


class TodoolittleError(Exception):
    """
    Base exception for all Todoolittle application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class DatabaseError(TodoolittleError):
    """
    Raised when the todo store cannot be read or written.

    When:    SQLite file missing or unwritable, locked past the driver timeout,
             schema not created, constraint violation.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic. The driver error
    goes into `context` and the server log only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
