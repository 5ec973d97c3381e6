#!/usr/bin/env python3
"""
02_pydantic_model.py - Bind onto a pydantic model

Demonstrates: env_field() declarations and error reporting on bad input
"""
from pydantic import BaseModel

from envbind import CoercionError, Int8, StructBinder, env_field, mapping_provider


class WorkerConfig(BaseModel):
    name: str = env_field("WORKER_NAME", "worker")
    priority: Int8 = env_field("WORKER_PRIORITY", 0)


def main() -> None:
    binder = StructBinder()

    config = binder.bind(WorkerConfig(), mapping_provider({"WORKER_PRIORITY": "5"}))
    print(f"Bound: {config!r}")

    try:
        binder.bind(WorkerConfig(), mapping_provider({"WORKER_PRIORITY": "300"}))
    except CoercionError as e:
        print(f"Rejected: {e}")


if __name__ == "__main__":
    main()
