"""Load .env and run the tern migrations for the task database."""

from __future__ import annotations

import argparse
import subprocess
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

MIGRATIONS_DIR = "./internal/store/pgstore/migrations"
TERN_CONFIG = "./internal/store/pgstore/migrations/tern.conf"


def build_command() -> list[str]:
    """Return the tern command line that applies the migrations."""
    return ["tern", "migrate", "--migrations", MIGRATIONS_DIR, "--config", TERN_CONFIG]


def _load_env(path: Path) -> None:
    if not path.is_file():
        raise FileNotFoundError(f"open {path}: no such file or directory")
    load_dotenv(dotenv_path=path)


def main(argv: Sequence[str] | None = None) -> None:
    """Load .env from the working directory, then run tern and report its output."""
    argparse.ArgumentParser(description="Run database migrations with tern.").parse_args(argv)
    _load_env(Path(".env"))

    try:
        result = subprocess.run(
            build_command(),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError as exc:
        print("Command exec failed: ", exc)
        print("output: ", "")
        return

    if result.returncode != 0:
        print("Command exec failed: ", f"exit status {result.returncode}")
        print("output: ", result.stdout)
        return

    print("Executed with success: ", result.stdout)


if __name__ == "__main__":
    main()