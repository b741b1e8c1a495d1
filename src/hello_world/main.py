from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Response, status
from fastapi.responses import PlainTextResponse

_METHODS = "GET, HEAD, OPTIONS"

app = FastAPI(
    title="Hello World",
    description="The classic greeting, with an optional name.",
    version="0.1.0",
)


def greeting(name: Optional[str] = None) -> str:
    """Greet `name`, or the World when no name was supplied."""
    return f"Hello, {name or 'World'}!"


# PUBLIC_INTERFACE
@app.api_route("/hello", methods=["GET", "HEAD"], response_class=PlainTextResponse, summary="Greet the World")
async def hello() -> str:
    return greeting()


# PUBLIC_INTERFACE
@app.api_route("/hello/{name}", methods=["GET", "HEAD"], response_class=PlainTextResponse, summary="Greet by name")
async def hello_name(name: str) -> str:
    return greeting(name)


@app.options("/hello", include_in_schema=False)
@app.options("/hello/{name}", include_in_schema=False)
async def hello_options() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": _METHODS})
