"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TodoFields(BaseModel):
    """Fields accepted inside the ``todo`` parameter group."""

    model_config = ConfigDict(extra="ignore")

    description: Optional[str] = Field(default=None, description="What needs to be done")
    priority: Optional[str] = Field(default=None, description="Free-form priority label")


class TodoCreateRequest(BaseModel):
    """JSON request body for creating a todo: ``{"todo": {...}}``."""

    todo: TodoFields
