from datetime import datetime, timezone

import pytest

from taskify.pgstore.pg_task_store import PgTaskStore, new_pg_task_store
from taskify.pgstore.queries import NoRowsError
from taskify.store import Task, TaskStore

MOMENT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FakePool:
    def __init__(self, row=None, rows=(), error=None):
        self.row = row
        self.rows = list(rows)
        self.error = error
        self.executed = []

    def exec(self, sql, *args):
        if self.error:
            raise self.error
        self.executed.append(args)

    def query(self, sql, *args):
        if self.error:
            raise self.error
        return list(self.rows)

    def query_row(self, sql, *args):
        if self.error:
            raise self.error
        return self.row


def test_new_store_wires_pool_and_queries():
    pool = FakePool()
    store = new_pg_task_store(pool)
    assert isinstance(store, PgTaskStore)
    assert store.pool is pool
    assert store.queries.db is pool
    assert isinstance(store, TaskStore)


def test_create_task_converts_row():
    pool = FakePool(row=(1, "Title", "Desc", 2, MOMENT, MOMENT))
    task = new_pg_task_store(pool).create_task("Title", "Desc", 2)
    assert task == Task(1, "Title", "Desc", 2, MOMENT, MOMENT)


def test_get_task_by_id_missing_raises():
    with pytest.raises(NoRowsError):
        new_pg_task_store(FakePool()).get_task_by_id(1)


def test_list_tasks_converts_every_row():
    rows = [(2, "b", "y", 3, MOMENT, MOMENT), (1, "a", "x", 1, MOMENT, MOMENT)]
    tasks = new_pg_task_store(FakePool(rows=rows)).list_tasks()
    assert [(t.id, t.title) for t in tasks] == [(2, "b"), (1, "a")]
    assert all(isinstance(t, Task) for t in tasks)


def test_update_task_returns_updated_values():
    pool = FakePool(row=(4, "New", "Changed", 7, MOMENT, MOMENT))
    task = new_pg_task_store(pool).update_task(4, "New", "Changed", 7)
    assert (task.id, task.title, task.priority) == (4, "New", 7)


def test_update_task_failure_yields_empty_task():
    store = new_pg_task_store(FakePool(error=ConnectionError("down")))
    assert store.update_task(4, "New", "Changed", 7) == Task()
    assert new_pg_task_store(FakePool()).update_task(4, "a", "b", 1) == Task()


def test_delete_task_runs_and_propagates_errors():
    pool = FakePool()
    new_pg_task_store(pool).delete_task(8)
    assert pool.executed == [(8,)]
    with pytest.raises(ConnectionError):
        new_pg_task_store(FakePool(error=ConnectionError("down"))).delete_task(8)