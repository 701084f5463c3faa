"""Task management core: task model, service layer, SQL-backed store and migration runner."""

__version__ = "0.1.0"