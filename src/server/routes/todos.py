"""Todo endpoints: page listing plus create/destroy with page or script responses."""

from __future__ import annotations

import asyncio
import logging
import re

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import ValidationError

from src.todo import TodoNotFoundError, TodoParams, TodoPersistenceError

from ..dependencies import get_todo_repository
from ..schemas import TodoCreateRequest
from ..views import render_index, render_script, wants_script

logger = logging.getLogger(__name__)

PARAM_MISSING = "param is missing or the value is empty: todo"
NESTED_TODO_KEY = re.compile(r"todo\[(\w+)\]")


async def read_todo_params(request: Request) -> TodoParams:
    """Extract the ``todo`` parameter group from a JSON or form-encoded body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = TodoCreateRequest.model_validate(await request.json())
        except (ValueError, ValidationError) as exc:
            raise HTTPException(status_code=400, detail=PARAM_MISSING) from exc
        if not payload.todo.model_fields_set:
            raise HTTPException(status_code=400, detail=PARAM_MISSING)
        return TodoParams.permit(payload.todo.model_dump())

    form = await request.form()
    raw = {}
    for key, value in form.multi_items():
        match = NESTED_TODO_KEY.fullmatch(key)
        if match:
            raw[match.group(1)] = value
    if not raw:
        raise HTTPException(status_code=400, detail=PARAM_MISSING)
    return TodoParams.permit(raw)


def parse_todo_id(raw_id: str) -> int:
    """Path ids that are not integers can never match a stored todo."""
    try:
        return int(raw_id)
    except ValueError:
        raise TodoNotFoundError(raw_id) from None


async def destroy(request: Request, raw_id: str) -> Response:
    todo_id = parse_todo_id(raw_id)
    repo = get_todo_repository()
    # TodoNotFoundError propagates to the app-level 404 handler
    todo = await asyncio.to_thread(repo.find, todo_id)
    await asyncio.to_thread(repo.delete, todo.id)
    logger.info("Deleted todo %s", todo.id)

    if wants_script(request):
        return render_script(request, "todos/destroy.js", todo)
    return RedirectResponse("/", status_code=303)


def register_todo_routes(app: FastAPI) -> None:
    """Register the todo page and its create/destroy endpoints."""

    @app.get("/", response_class=HTMLResponse)
    async def list_todos(request: Request) -> HTMLResponse:
        """Full page with the creation form and every todo."""
        repo = get_todo_repository()
        try:
            todos = await asyncio.to_thread(repo.list)
        except Exception as exc:
            logger.exception("Failed to list todos: %s", exc)
            raise HTTPException(status_code=500, detail="Failed to list todos") from exc
        return render_index(request, todos)

    @app.post("/todos")
    async def create_todo(request: Request) -> Response:
        """Create a todo; redirect for page requests, append fragment for script requests."""
        params = await read_todo_params(request)
        repo = get_todo_repository()
        try:
            todo = await asyncio.to_thread(repo.create, params.description, params.priority)
        except TodoPersistenceError as exc:
            logger.exception("Failed to create todo: %s", exc)
            todos = await asyncio.to_thread(repo.list)
            return render_index(
                request, todos, errors=[str(exc)], params=params, status_code=422
            )

        logger.info("Created todo %s", todo.id)
        if wants_script(request):
            return render_script(request, "todos/create.js", todo)
        return RedirectResponse("/", status_code=303)

    @app.delete("/todos/{todo_id}")
    async def destroy_todo(request: Request, todo_id: str) -> Response:
        """Delete a todo; redirect for page requests, removal fragment for script requests."""
        return await destroy(request, todo_id)

    @app.post("/todos/{todo_id}")
    async def override_todo(request: Request, todo_id: str) -> Response:
        """HTML forms submit DELETE as POST with ``_method=delete``."""
        form = await request.form()
        method = str(form.get("_method", "")).lower()
        if method != "delete":
            raise HTTPException(status_code=405, detail="Method Not Allowed")
        return await destroy(request, todo_id)
