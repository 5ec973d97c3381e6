#!/usr/bin/env python3
"""
03_load_env_file.py - Load a .env file and bind it

Demonstrates: load_and_bind_file with a scratch store instead of os.environ
"""
import tempfile
from dataclasses import dataclass
from pathlib import Path

from envbind import MissingRequiredError, env, load_and_bind_file


@dataclass
class AppConfig:
    database_url: str = env("DATABASE_URL", required=True, default="")
    workers: int = env("WORKERS", default=1)
    verbose: bool = env("VERBOSE", default=False)


SOURCE = """\
# Application settings
DATABASE_URL = postgres://localhost/app?sslmode=disable
WORKERS=4
VERBOSE=on
"""


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / ".env"
        path.write_text(SOURCE, encoding="utf-8")

        config = load_and_bind_file(path, AppConfig(), environ={})
        print(config)

        path.write_text("WORKERS=2\n", encoding="utf-8")
        try:
            load_and_bind_file(path, AppConfig(), environ={})
        except MissingRequiredError as e:
            print(f"Missing: {e.key}")


if __name__ == "__main__":
    main()
