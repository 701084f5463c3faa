"""Service layer that sits between handlers and a task store."""

from __future__ import annotations

from taskify.store import Task, TaskStore


class TaskService:
    """Task operations backed by a TaskStore."""

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def create_task(self, title: str, description: str, priority: int) -> Task:
        return self.store.create_task(title, description, priority)

    def get_task(self, task_id: int) -> Task:
        return self.store.get_task_by_id(task_id)

    def update_task(self, task_id: int, title: str, description: str, priority: int) -> Task:
        return self.store.update_task(task_id, title, description, priority)

    def list_tasks(self) -> list[Task]:
        return self.store.list_tasks()

    def delete_task(self, task_id: int) -> None:
        self.store.delete_task(task_id)


def new_task_service(store: TaskStore) -> TaskService:
    """Return a TaskService using the given store."""
    return TaskService(store)