"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

from src.todo import TodoRepository
from src.todo_app.config import Config
from src.todo_app.logger import setup_logger

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"

config = Config.from_yaml()
setup_logger(log_level=config.log_level, log_file=config.log_file)


@lru_cache(maxsize=1)
def get_todo_repository() -> TodoRepository:
    """Singleton TodoRepository."""
    return TodoRepository(db_path=config.database_path)


@lru_cache(maxsize=1)
def get_templates() -> Jinja2Templates:
    """Singleton Jinja2 environment for pages and script fragments."""
    return Jinja2Templates(directory=str(TEMPLATES_DIR))
