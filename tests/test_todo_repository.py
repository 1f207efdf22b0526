import sqlite3

import pytest

from src.todo.repository import TodoRepository
from src.todo.exceptions import TodoNotFoundError, TodoPersistenceError


@pytest.fixture
def repo(tmp_path):
    return TodoRepository(db_path=tmp_path / "todo.db")


def test_todo_repository_crud_cycle(repo):
    created = repo.create(description="Write report", priority="high")
    assert created.id is not None
    assert created.description == "Write report"
    assert created.priority == "high"
    assert created.created_at == created.updated_at

    items = repo.list()
    assert len(items) == 1
    assert items[0] == created

    assert repo.delete(created.id) is True
    assert repo.list() == []


def test_create_defaults_to_empty_fields(repo):
    created = repo.create()
    assert created.description == ""
    assert created.priority == ""


def test_list_is_ordered_by_creation(repo):
    first = repo.create(description="first")
    second = repo.create(description="second")
    third = repo.create(description="third")

    assert [item.id for item in repo.list()] == [first.id, second.id, third.id]


def test_delete_removes_only_that_entry(repo):
    keep_a = repo.create(description="a")
    doomed = repo.create(description="b")
    keep_c = repo.create(description="c")

    assert repo.delete(doomed.id) is True

    remaining = repo.list()
    assert [item.id for item in remaining] == [keep_a.id, keep_c.id]


def test_find_missing_raises_not_found(repo):
    repo.create(description="only one")

    with pytest.raises(TodoNotFoundError) as excinfo:
        repo.find(9999)

    assert excinfo.value.todo_id == 9999
    assert repo.count() == 1


def test_get_and_delete_missing(repo):
    assert repo.get(42) is None
    assert repo.delete(42) is False


@pytest.mark.parametrize("todo_id", [2**63, -(2**63) - 1, 10**20])
def test_ids_outside_sqlite_range_are_missing(repo, todo_id):
    repo.create(description="kept")

    assert repo.get(todo_id) is None
    assert repo.delete(todo_id) is False
    with pytest.raises(TodoNotFoundError):
        repo.find(todo_id)
    assert repo.count() == 1


@pytest.mark.parametrize("creates,deletes", [(1, 0), (3, 1), (5, 5)])
def test_count_after_creates_and_deletes(repo, creates, deletes):
    created = [repo.create(description=f"todo {i}") for i in range(creates)]
    for item in created[:deletes]:
        repo.delete(item.id)

    assert repo.count() == creates - deletes
    assert len(repo.list()) == creates - deletes


def test_db_path_from_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "nested" / "env.db"
    monkeypatch.setenv("TODO_APP_DB_PATH", str(db_path))

    repo = TodoRepository()

    assert repo.db_path == db_path
    assert db_path.exists()


def test_create_wraps_sqlite_errors(repo, monkeypatch):
    def broken_connect():
        raise sqlite3.OperationalError("database is locked")

    monkeypatch.setattr(repo, "_connect", broken_connect)

    with pytest.raises(TodoPersistenceError):
        repo.create(description="never stored")
