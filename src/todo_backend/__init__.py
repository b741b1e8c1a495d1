"""
FastAPI Todo Backend package.

Implements the TodoBackend API on top of an in-memory store that serializes
every read and write through a single worker. The ASGI application lives in
`todo_backend.main:app`.
"""
