"""
Serve the Todo backend with uvicorn.

Usage:
    python -m todo_backend [--host HOST] [--port PORT]

Run http://todobackend.com/specs/index.html?http://localhost:5000/ against it
to check conformance.
"""
from __future__ import annotations

import argparse
from typing import Optional, Sequence

import uvicorn

from .logging_config import setup_logging
from .settings import get_settings


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = get_settings()

    ap = argparse.ArgumentParser(prog="todo-backend", description="TodoBackend API server")
    ap.add_argument("--host", default=settings.host)
    ap.add_argument("--port", type=int, default=settings.port)
    args = ap.parse_args(argv)

    setup_logging(settings.log_level)
    uvicorn.run("todo_backend.main:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
