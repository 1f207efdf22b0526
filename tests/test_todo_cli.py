"""TODO CLI の動作テスト"""

import json
import subprocess
import sys
from pathlib import Path


def run_cli(args: list[str], db_path: Path) -> subprocess.CompletedProcess:
    """CLI実行ヘルパー"""
    cmd = [
        sys.executable,
        "-m",
        "src.todo.cli",
        "--db-path",
        str(db_path),
    ] + args
    return subprocess.run(
        cmd,
        capture_output=True,
        text=True,
        cwd=Path(__file__).parent.parent,
    )


def test_cli_list_empty(tmp_path):
    """空のリスト取得"""
    db_path = tmp_path / "cli_test.db"
    result = run_cli(["list", "--format", "json"], db_path)
    assert result.returncode == 0
    assert json.loads(result.stdout) == []


def test_cli_add_and_list(tmp_path):
    """TODO追加とリスト取得"""
    db_path = tmp_path / "cli_test.db"

    result = run_cli(
        ["add", "--description", "会議準備", "--priority", "high", "--format", "json"],
        db_path,
    )
    assert result.returncode == 0
    added = json.loads(result.stdout)
    assert added["description"] == "会議準備"
    assert added["priority"] == "high"
    todo_id = added["id"]

    result = run_cli(["list", "--format", "json"], db_path)
    assert result.returncode == 0
    items = json.loads(result.stdout)
    assert len(items) == 1
    assert items[0]["id"] == todo_id


def test_cli_list_text(tmp_path):
    """テキスト形式のリスト表示"""
    db_path = tmp_path / "cli_test.db"
    run_cli(["add", "--description", "買い物"], db_path)

    result = run_cli(["list"], db_path)
    assert result.returncode == 0
    assert "[1] - | 買い物" in result.stdout


def test_cli_delete(tmp_path):
    """TODO削除"""
    db_path = tmp_path / "cli_test.db"
    result = run_cli(["add", "--description", "掃除", "--format", "json"], db_path)
    todo_id = json.loads(result.stdout)["id"]

    result = run_cli(["delete", "--id", str(todo_id), "--format", "json"], db_path)
    assert result.returncode == 0
    assert json.loads(result.stdout) == {"deleted": True, "id": todo_id}

    result = run_cli(["list", "--format", "json"], db_path)
    assert json.loads(result.stdout) == []


def test_cli_delete_missing(tmp_path):
    """存在しないIDの削除はエラー"""
    db_path = tmp_path / "cli_test.db"
    result = run_cli(["delete", "--id", "999"], db_path)
    assert result.returncode == 1
    assert "id=999" in result.stderr
