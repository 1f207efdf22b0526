"""Rendering helpers: full pages and script fragments.

Every response that shows a todo goes through ``todos/_todo.html``; the
script fragments include it rather than building their own markup.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, Response

from src.todo import TodoItem, TodoParams

from .dependencies import get_templates

SCRIPT_MEDIA_TYPE = "text/javascript"
SCRIPT_ACCEPT_TYPES = (
    "text/javascript",
    "application/javascript",
    "application/x-javascript",
    "application/ecmascript",
)


def wants_script(request: Request) -> bool:
    """Return True when the client asked for the script representation."""
    if request.query_params.get("format") == "js":
        return True
    accept = request.headers.get("accept", "").lower()
    return any(media_type in accept for media_type in SCRIPT_ACCEPT_TYPES)


def render_index(
    request: Request,
    todos: Iterable[TodoItem],
    *,
    errors: Optional[List[str]] = None,
    params: Optional[TodoParams] = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render the full page: creation form plus every todo."""
    context: Dict[str, Any] = {
        "todos": list(todos),
        "errors": errors or [],
        "params": params or TodoParams(),
    }
    return get_templates().TemplateResponse(
        request, "todos/index.html", context, status_code=status_code
    )


def render_script(request: Request, name: str, todo: TodoItem) -> Response:
    """Render a script fragment that patches the list in place."""
    return get_templates().TemplateResponse(
        request, name, {"todo": todo}, media_type=SCRIPT_MEDIA_TYPE
    )


def render_not_found(request: Request, message: str) -> HTMLResponse:
    return get_templates().TemplateResponse(
        request, "errors/404.html", {"message": message}, status_code=404
    )
