# taskify

The core of a small task manager: a `Task` record, a storage contract,
a service layer on top of it, a task store built from plain PostgreSQL
queries, and a command that applies database migrations with `tern`.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Building blocks

- `taskify.store.Task` – a dataclass with `id`, `title`, `description`,
  `priority`, `created_at` and `updated_at`. `Task.to_dict()` returns a
  JSON-ready mapping: `id`, `title`, `description` and `priority` are
  left out when empty or zero, and the timestamps are ISO 8601 strings
  (or `None`).
- `taskify.store.TaskStore` – the storage contract (a runtime-checkable
  protocol): `create_task`, `get_task_by_id`, `list_tasks`,
  `update_task` and `delete_task`.
- `taskify.services.TaskService` – the application layer, working
  against any `TaskStore`, with `create_task`, `get_task`,
  `update_task`, `list_tasks` and `delete_task`. Create one with
  `new_task_service(store)`. Errors raised by the store propagate to the
  caller unchanged.
- `taskify.pgstore.queries` – the SQL layer:
  - `Queries`, made with `new_queries(db)`; `with_tx(tx)` returns a
    `Queries` bound to another handle, such as a transaction;
  - the `TaskRow` record and the `CreateTaskParams` /
    `UpdateTaskParams` argument records;
  - `NoRowsError`, raised when a single-row query returns nothing;
  - `DBTX`, the protocol a database handle must satisfy.
- `taskify.pgstore.pg_task_store.PgTaskStore` – a `TaskStore` built on
  `Queries`, made with `new_pg_task_store(pool)`.

Tasks are listed newest first, ordered by their creation time.

## The database handle

The package does not open database connections itself. The object you
pass to `new_queries` or `new_pg_task_store` must provide three methods
that run SQL with PostgreSQL-style positional parameters (`$1`, `$2`, …):

- `exec(sql, *args)` – run a statement that returns no rows;
- `query(sql, *args)` – return an iterable of rows;
- `query_row(sql, *args)` – return the first row, or `None`.

Rows are sequences in the column order
`id, title, description, priority, created_at, updated_at`.

## Using the service

```python
from taskify.services import new_task_service
from taskify.pgstore.pg_task_store import new_pg_task_store

service = new_task_service(new_pg_task_store(db))

task = service.create_task("Learn TDD", "Get hands-on experience", 3)
same = service.get_task(task.id)
service.update_task(task.id, "Learn TDD", "Write the tests first", 5)
for item in service.list_tasks():
    print(item.id, item.title, item.priority)
service.delete_task(task.id)
```

With `PgTaskStore`:

- `get_task_by_id` and `create_task` raise `NoRowsError` when the
  database returns no row; other database errors propagate.
- `update_task` does not raise: if the update fails for any reason, it
  returns an empty `Task()` (id 0, empty title and description).

Any object that implements the `TaskStore` methods can be handed to
`new_task_service`, which makes the service easy to test with an
in-memory store.

## Database migrations

Schema migrations are applied with the external `tern` tool, which must
be installed and on your `PATH`. A `.env` file in the current directory
is loaded first; if it is missing, the command fails with
`FileNotFoundError`.

```
taskify-migrate
```

This runs `tern migrate` with the migrations in
`./internal/store/pgstore/migrations` and the configuration file
`./internal/store/pgstore/migrations/tern.conf`, relative to the current
directory, and prints the combined output of `tern`, prefixed with
`Executed with success: ` or `Command exec failed: `.
`taskify.migrate.build_command()` returns the command line it runs.

## What this package does not do

- It has no HTTP API or server; the service layer is meant to be called
  from your own code.
- It ships no database driver or connection pool; you supply the
  database handle described above.
- It ships no migration files or `tern` configuration; `taskify-migrate`
  only runs `tern` against the paths named above.