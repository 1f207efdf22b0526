"""FastAPI application bootstrap."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from fastapi.staticfiles import StaticFiles

from src.todo import TodoNotFoundError

from .dependencies import STATIC_DIR, get_todo_repository
from .routes import register_todo_routes
from .views import render_not_found, wants_script

logger = logging.getLogger(__name__)

__all__ = ["app", "create_app", "get_todo_repository"]


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to HTTP error responses."""

    @app.exception_handler(TodoNotFoundError)
    async def todo_not_found(request: Request, exc: TodoNotFoundError) -> Response:
        logger.warning("Todo %s not found (%s %s)", exc.todo_id, request.method, request.url.path)
        if wants_script(request):
            return PlainTextResponse(str(exc), status_code=404)
        return render_not_found(request, str(exc))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Todo List", version="1.0.0")

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    register_todo_routes(app)
    register_error_handlers(app)

    return app


app = create_app()
