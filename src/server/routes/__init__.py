"""Route registration helpers."""

from .todos import register_todo_routes

__all__ = ["register_todo_routes"]
