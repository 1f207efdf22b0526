"""Todo storage shared by the web server and the admin CLI."""

from .exceptions import TodoError, TodoNotFoundError, TodoPersistenceError
from .models import TodoItem, TodoParams
from .repository import TodoRepository

__all__ = [
    "TodoItem",
    "TodoParams",
    "TodoRepository",
    "TodoError",
    "TodoNotFoundError",
    "TodoPersistenceError",
]
