from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

PERMITTED_FIELDS = ("description", "priority")


@dataclass(slots=True)
class TodoItem:
    """永続化済みTodoアイテムの表現。"""

    id: int
    description: str
    priority: str
    created_at: str
    updated_at: str


@dataclass(slots=True)
class TodoParams:
    """作成リクエストで受け付ける入力値。未指定の項目は空文字になる。"""

    description: str = ""
    priority: str = ""

    @classmethod
    def permit(cls, raw: Mapping[str, Any]) -> "TodoParams":
        """許可された項目だけを取り出す（それ以外のキーは捨てる）。"""
        values = {}
        for name in PERMITTED_FIELDS:
            value = raw.get(name)
            values[name] = "" if value is None else str(value)
        return cls(**values)
