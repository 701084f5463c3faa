"""Task model and the storage interface the service layer depends on."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, runtime_checkable


@dataclass
class Task:
    """A task as seen by the service layer."""

    id: int = 0
    title: str = ""
    description: str = ""
    priority: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping; empty id, title, description and priority are left out."""
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        if self.title:
            data["title"] = self.title
        if self.description:
            data["description"] = self.description
        if self.priority:
            data["priority"] = self.priority
        data["created_at"] = _isoformat(self.created_at)
        data["updated_at"] = _isoformat(self.updated_at)
        return data


def _isoformat(moment: datetime | None) -> str | None:
    return moment.isoformat() if moment is not None else None


@runtime_checkable
class TaskStore(Protocol):
    """Persistence operations for tasks. Failures are raised as exceptions."""

    def create_task(self, title: str, description: str, priority: int) -> Task:
        """Store a new task and return it."""

    def get_task_by_id(self, task_id: int) -> Task:
        """Return the task with the given id."""

    def list_tasks(self) -> list[Task]:
        """Return every stored task."""

    def update_task(self, task_id: int, title: str, description: str, priority: int) -> Task:
        """Replace a task's fields and return the updated task."""

    def delete_task(self, task_id: int) -> None:
        """Remove the task with the given id."""