#!/usr/bin/env python3
"""
01_bind_dataclass.py - Bind an in-memory mapping onto a dataclass

Demonstrates: env() field declarations, width aliases and required fields
"""
from dataclasses import dataclass

from envbind import Float32, Uint16, bind_struct, env, mapping_provider


@dataclass
class ServerConfig:
    host: str = env("HOST", default="127.0.0.1")
    port: Uint16 = env("PORT", required=True, default=0)
    load_factor: Float32 = env("LOAD_FACTOR", default=0.75)
    debug: bool = env("DEBUG", default=False)


def main() -> None:
    values = {"PORT": "8080", "DEBUG": "yes"}
    config = bind_struct(ServerConfig(), mapping_provider(values))
    print(config)


if __name__ == "__main__":
    main()
