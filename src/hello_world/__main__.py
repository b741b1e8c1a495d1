"""
Serve the Hello World sample with uvicorn.

Usage:
    python -m hello_world [--host HOST] [--port PORT]

Reads HOST, PORT and LOG_LEVEL from the environment for its defaults.
"""
from __future__ import annotations

import argparse
import logging
import os
from typing import Optional, Sequence

import uvicorn

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _default_port() -> int:
    try:
        return int(os.getenv("PORT") or "5000")
    except ValueError:
        return 5000


def _log_level() -> str:
    level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    return level if level in _LOG_LEVELS else "INFO"


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser(prog="hello-world", description="Hello World sample server")
    ap.add_argument("--host", default=os.getenv("HOST") or "127.0.0.1")
    ap.add_argument("--port", type=int, default=_default_port())
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    uvicorn.run("hello_world.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
