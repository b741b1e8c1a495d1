"""
In-memory Todo store.

The store is a GenServer: the map of todos lives inside the server loop and
every read or write goes through its mailbox, one request at a time.

Requests:
  ("create", TodoCreate)           -> Todo
  ("clear",)                       -> None
  ("delete", UUID)                 -> None
  ("get", UUID)                    -> Optional[Todo]
  ("list",)                        -> List[Todo]
  ("update", UUID, TodoUpdate)     -> Todo, or TodoNotFound
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, Tuple
from uuid import UUID, uuid4

from .actor import GenServer
from .models import Todo, todo_url
from .schemas import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)

TodoMap = Dict[UUID, Todo]


class TodoNotFound(LookupError):
    """Raised when updating a todo that is not in the store."""

    def __init__(self, todo_id: UUID):
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


# PUBLIC_INTERFACE
class TodoStore(GenServer[TodoMap]):
    """Owns the todo collection for the lifetime of the process."""

    def __init__(self, base_url: str):
        super().__init__()
        self._base_url = base_url

    async def init(self) -> TodoMap:
        return {}

    async def handle_call(self, request: Any, state: TodoMap) -> Tuple[Any, TodoMap]:
        logger.debug("handling %r", request)
        match request:
            case ("create", TodoCreate() as data):
                todo = self._new_todo(data)
                state[todo.id] = todo
                return (todo, state)

            case ("clear",):
                return (None, {})

            case ("delete", UUID() as todo_id):
                state.pop(todo_id, None)
                return (None, state)

            case ("get", UUID() as todo_id):
                return (state.get(todo_id), state)

            case ("list",):
                return (list(state.values()), state)

            case ("update", UUID() as todo_id, TodoUpdate() as data):
                existing = state.get(todo_id)
                if existing is None:
                    raise TodoNotFound(todo_id)
                updated = _apply_patch(existing, data)
                state[todo_id] = updated
                return (updated, state)

            case _:
                raise ValueError(f"unknown store request: {request!r}")

    def _new_todo(self, data: TodoCreate) -> Todo:
        todo_id = uuid4()
        return Todo(
            id=todo_id,
            url=todo_url(self._base_url, todo_id),
            title=data.title,
            completed=False,
            order=data.order,
        )


def _apply_patch(todo: Todo, data: TodoUpdate) -> Todo:
    """Overwrite the fields present in `data`; everything else is kept."""
    changes: Dict[str, Any] = {}
    if data.title is not None:
        changes["title"] = data.title
    if data.completed is not None:
        changes["completed"] = data.completed
    if "order" in data.model_fields_set:
        # Respect explicit nulling of order
        changes["order"] = data.order
    return dataclasses.replace(todo, **changes)
