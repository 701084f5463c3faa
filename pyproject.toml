[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskify"
version = "0.1.0"
description = "Task management core: task model, service layer, SQL-backed task store and a migration runner"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["tasks", "todo", "postgresql", "sql", "migrations", "service-layer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskify-migrate = "taskify.migrate:main"

[tool.hatch.build.targets.wheel]
packages = ["taskify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
