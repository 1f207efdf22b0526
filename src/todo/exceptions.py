"""Todoストアのカスタム例外定義"""


class TodoError(Exception):
    """Todo基底例外"""

    pass


class TodoNotFoundError(TodoError):
    """指定IDのTodoが存在しない"""

    def __init__(self, todo_id: int | str):
        self.todo_id = todo_id
        super().__init__(f"Couldn't find Todo with id={todo_id}")


class TodoPersistenceError(TodoError):
    """保存処理に失敗した"""

    pass
