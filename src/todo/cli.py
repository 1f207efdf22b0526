#!/usr/bin/env python3
"""
TODO管理CLI - Webサーバーを起動せずにストアを確認・操作するためのコマンド

Usage:
    python -m src.todo.cli list [--format json|text]
    python -m src.todo.cli add [--description "内容"] [--priority "優先度"] [--format json|text]
    python -m src.todo.cli delete --id ID [--format json|text]
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

from .exceptions import TodoNotFoundError, TodoPersistenceError
from .models import TodoItem
from .repository import TodoRepository


def format_todo_text(todo: TodoItem) -> str:
    """Todoアイテムをテキスト形式で整形"""
    priority = todo.priority.strip() or "-"
    description = todo.description.strip() or "(no description)"
    return f"[{todo.id}] {priority} | {description}"


def format_todo_json(todo: TodoItem) -> Dict[str, Any]:
    """Todoアイテムを辞書形式に変換"""
    return {
        "id": todo.id,
        "description": todo.description,
        "priority": todo.priority,
        "created_at": todo.created_at,
        "updated_at": todo.updated_at,
    }


def cmd_list(repo: TodoRepository, output_format: str) -> int:
    """Todoリストを表示"""
    items = repo.list()
    if output_format == "json":
        print(json.dumps([format_todo_json(item) for item in items], ensure_ascii=False))
    else:
        if not items:
            print("No todos.")
        for item in items:
            print(format_todo_text(item))
    return 0


def cmd_add(repo: TodoRepository, description: str, priority: str, output_format: str) -> int:
    """新しいTodoを追加"""
    try:
        created = repo.create(description=description, priority=priority)
    except TodoPersistenceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if output_format == "json":
        print(json.dumps(format_todo_json(created), ensure_ascii=False))
    else:
        print(f"Added: {format_todo_text(created)}")
    return 0


def cmd_delete(repo: TodoRepository, todo_id: int, output_format: str) -> int:
    """Todoを削除"""
    try:
        todo = repo.find(todo_id)
    except TodoNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    repo.delete(todo.id)
    if output_format == "json":
        print(json.dumps({"deleted": True, "id": todo.id}, ensure_ascii=False))
    else:
        print(f"Deleted: ID {todo.id}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Todo list admin CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--db-path",
        type=str,
        help="SQLiteデータベースファイルのパス（デフォルト: $TODO_APP_DB_PATH または data/todos.db）",
    )

    subparsers = parser.add_subparsers(dest="command", help="実行するコマンド", required=True)

    parser_list = subparsers.add_parser("list", help="TODOリストを表示")
    parser_add = subparsers.add_parser("add", help="新しいTODOを追加")
    parser_add.add_argument("--description", default="", help="TODOの内容")
    parser_add.add_argument("--priority", default="", help="優先度（自由記述）")
    parser_delete = subparsers.add_parser("delete", help="TODOを削除")
    parser_delete.add_argument("--id", type=int, required=True, help="削除するTODOのID")

    for sub in (parser_list, parser_add, parser_delete):
        sub.add_argument(
            "--format",
            choices=["json", "text"],
            default="text",
            help="出力フォーマット（デフォルト: text）",
        )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)
    repo = TodoRepository(db_path=args.db_path if args.db_path else None)

    if args.command == "list":
        return cmd_list(repo, args.format)
    elif args.command == "add":
        return cmd_add(repo, args.description, args.priority, args.format)
    elif args.command == "delete":
        return cmd_delete(repo, args.id, args.format)
    else:
        print(f"Error: unknown command: {args.command}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
