"""TaskStore backed by the task SQL queries."""

from __future__ import annotations

from typing import Any

from taskify.pgstore.queries import (
    CreateTaskParams,
    DBTX,
    Queries,
    TaskRow,
    UpdateTaskParams,
    new_queries,
)
from taskify.store import Task


def _to_task(row: TaskRow) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description,
        priority=row.priority,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PgTaskStore:
    """A TaskStore that runs its queries through a database pool."""

    def __init__(self, queries: Queries, pool: Any) -> None:
        self.queries = queries
        self.pool = pool

    def create_task(self, title: str, description: str, priority: int) -> Task:
        return _to_task(self.queries.create_task(CreateTaskParams(title, description, priority)))

    def get_task_by_id(self, task_id: int) -> Task:
        return _to_task(self.queries.get_task_by_id(task_id))

    def list_tasks(self) -> list[Task]:
        return [_to_task(row) for row in self.queries.list_tasks()]

    def update_task(self, task_id: int, title: str, description: str, priority: int) -> Task:
        """Update a task; a failed update yields an empty Task rather than an error."""
        try:
            row = self.queries.update_task(UpdateTaskParams(title, description, priority, task_id))
        except Exception:
            return Task()
        return _to_task(row)

    def delete_task(self, task_id: int) -> None:
        self.queries.delete_task(task_id)


def new_pg_task_store(pool: DBTX) -> PgTaskStore:
    """Return a PgTaskStore whose queries run on the given pool."""
    return PgTaskStore(new_queries(pool), pool)