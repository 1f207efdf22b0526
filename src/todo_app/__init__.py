"""Application-wide settings and logging for the todo list."""

from .config import Config, ServerConfig
from .logger import setup_logger

__all__ = ["Config", "ServerConfig", "setup_logger"]
