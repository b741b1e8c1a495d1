from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from .models import Todo
from .schemas import TodoCreate, TodoUpdate
from .store import TodoStore


# PUBLIC_INTERFACE
class TodoService:
    """
    CRUD facade over a running TodoStore.

    Every method is exactly one store request; results and failures are passed
    through unchanged.
    """

    def __init__(self, store: TodoStore) -> None:
        self._store = store

    async def add(self, data: TodoCreate) -> Todo:
        """Create and return a new Todo."""
        return await self._store.call(("create", data))

    async def clear(self) -> None:
        """Remove every Todo."""
        await self._store.call(("clear",))

    async def delete(self, todo_id: UUID) -> None:
        """Remove a Todo if it exists."""
        await self._store.call(("delete", todo_id))

    async def get(self, todo_id: UUID) -> Optional[Todo]:
        """Return a Todo by id, or None if not found."""
        return await self._store.call(("get", todo_id))

    async def list(self) -> List[Todo]:
        return await self._store.call(("list",))

    async def update(self, todo_id: UUID, data: TodoUpdate) -> Todo:
        """Patch a Todo. Raises TodoNotFound if it does not exist."""
        return await self._store.call(("update", todo_id, data))
