"""SQL queries for the task table and the row types they return."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Protocol, Sequence

CREATE_TASK = """-- name: CreateTask :one
INSERT INTO task ( title, description, priority )
VALUES ( $1, $2, $3 )
RETURNING id, title, description, priority, created_at, updated_at
"""

DELETE_TASK = """-- name: DeleteTask :exec
DELETE FROM task WHERE id = $1
"""

GET_TASK_BY_ID = """-- name: GetTaskById :one
SELECT id, title, description, priority, created_at, updated_at FROM task WHERE id = $1
"""

LIST_TASKS = """-- name: ListTasks :many
SELECT id, title, description, priority, created_at, updated_at FROM task
ORDER BY created_at DESC
"""

UPDATE_TASK = """-- name: UpdateTask :one
UPDATE task 
SET title = $1, description = $2, priority = $3, updated_at = now() 
WHERE id = $4
RETURNING id, title, description, priority, created_at, updated_at
"""


class NoRowsError(LookupError):
    """Raised when a single-row query returns nothing."""


class DBTX(Protocol):
    """A connection, pool or transaction that runs positional-parameter SQL."""

    def exec(self, sql: str, *args: Any) -> Any:
        """Run a statement that returns no rows."""

    def query(self, sql: str, *args: Any) -> Iterable[Sequence[Any]]:
        """Run a query and return its rows."""

    def query_row(self, sql: str, *args: Any) -> Sequence[Any] | None:
        """Run a query and return its first row, or None."""


@dataclass
class TaskRow:
    """A row of the task table."""

    id: int
    title: str
    description: str
    priority: int
    created_at: datetime | None
    updated_at: datetime | None

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> TaskRow:
        task_id, title, description, priority, created_at, updated_at = row
        return cls(task_id, title, description, priority, created_at, updated_at)


@dataclass
class CreateTaskParams:
    title: str
    description: str
    priority: int


@dataclass
class UpdateTaskParams:
    title: str
    description: str
    priority: int
    id: int


class Queries:
    """Typed wrappers around the task SQL statements."""

    def __init__(self, db: DBTX) -> None:
        self.db = db

    def with_tx(self, tx: DBTX) -> Queries:
        """Return a Queries that runs inside the given transaction."""
        return Queries(tx)

    def _one(self, sql: str, *args: Any) -> TaskRow:
        row = self.db.query_row(sql, *args)
        if row is None:
            raise NoRowsError("no rows in result set")
        return TaskRow.from_row(row)

    def create_task(self, arg: CreateTaskParams) -> TaskRow:
        return self._one(CREATE_TASK, arg.title, arg.description, arg.priority)

    def delete_task(self, task_id: int) -> None:
        self.db.exec(DELETE_TASK, task_id)

    def get_task_by_id(self, task_id: int) -> TaskRow:
        return self._one(GET_TASK_BY_ID, task_id)

    def list_tasks(self) -> list[TaskRow]:
        return [TaskRow.from_row(row) for row in self.db.query(LIST_TASKS)]

    def update_task(self, arg: UpdateTaskParams) -> TaskRow:
        return self._one(UPDATE_TASK, arg.title, arg.description, arg.priority, arg.id)


def new_queries(db: DBTX) -> Queries:
    """Return Queries bound to the given database handle."""
    return Queries(db)