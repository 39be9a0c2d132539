"""
Todoolittle Backend: Todo Request Structs & View Models
=========================================================

What:  Pydantic models on either side of the todo handlers.
       - NewTodoForm: typed form body for POST /todos
       - TodoItem / TodoListView: what the todos/index.html template receives
Why:   Handlers never read a loose parameter dict and templates never reach
       into handler locals. Every value crossing those seams is declared here.
"""

from typing import List

from pydantic import BaseModel, Field


class NewTodoForm(BaseModel):
    """
    Form body of POST /todos.

    No validation on purpose: an absent field and an empty string both
    become "", and any text of any length is accepted.
    """
    description: str = Field(default="", description="Free-text description of the todo")


class TodoItem(BaseModel):
    """One stored todo, as shown in the list view."""
    id: int = Field(description="Store-assigned identifier")
    description: str = Field(description="Text entered when the todo was created")

    model_config = {"from_attributes": True}


class TodoListView(BaseModel):
    """
    View model for GET /todos.

    `todos` is in insertion order (ascending id).
    """
    todos: List[TodoItem] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.todos)
