from __future__ import annotations

import os
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .exceptions import TodoNotFoundError, TodoPersistenceError
from .models import TodoItem

DB_PATH_ENV = "TODO_APP_DB_PATH"

# SQLite INTEGER PRIMARY KEY の範囲
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


class TodoRepository:
    """SQLiteベースのTODO管理。"""

    def __init__(self, db_path: Optional[Path] = None):
        root = Path(__file__).resolve().parents[2]
        default_path = root / "data" / "todos.db"
        env_path = os.getenv(DB_PATH_ENV)
        if db_path:
            self.db_path = Path(db_path)
        elif env_path:
            self.db_path = Path(env_path)
        else:
            self.db_path = default_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _initialize(self) -> None:
        """todosテーブルの初期化"""
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS todos (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    description TEXT NOT NULL DEFAULT '',
                    priority TEXT NOT NULL DEFAULT '',
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
                """
            )
            conn.commit()

    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _row_to_item(row: sqlite3.Row) -> TodoItem:
        return TodoItem(
            id=row["id"],
            description=row["description"],
            priority=row["priority"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def list(self) -> list[TodoItem]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM todos ORDER BY id ASC").fetchall()
        return [self._row_to_item(row) for row in rows]

    def count(self) -> int:
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM todos").fetchone()[0]

    def create(self, description: str = "", priority: str = "") -> TodoItem:
        now = self._now()
        try:
            with self._connect() as conn:
                cursor = conn.execute(
                    """
                    INSERT INTO todos (description, priority, created_at, updated_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    (description, priority, now, now),
                )
                conn.commit()
                row = conn.execute(
                    "SELECT * FROM todos WHERE id = ?", (cursor.lastrowid,)
                ).fetchone()
        except sqlite3.Error as exc:
            raise TodoPersistenceError(f"Todo could not be saved: {exc}") from exc
        return self._row_to_item(row)

    def get(self, todo_id: int) -> Optional[TodoItem]:
        if not MIN_ROW_ID <= todo_id <= MAX_ROW_ID:
            return None
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM todos WHERE id = ?", (todo_id,)).fetchone()
        return self._row_to_item(row) if row else None

    def find(self, todo_id: int) -> TodoItem:
        """getと同じだが、存在しない場合はTodoNotFoundErrorを送出する。"""
        item = self.get(todo_id)
        if item is None:
            raise TodoNotFoundError(todo_id)
        return item

    def delete(self, todo_id: int) -> bool:
        if not MIN_ROW_ID <= todo_id <= MAX_ROW_ID:
            return False
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM todos WHERE id = ?", (todo_id,))
            conn.commit()
            return cursor.rowcount > 0
