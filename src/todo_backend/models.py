from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class Todo:
    """
    Domain record for a single Todo item, as held by the store.

    Fields:
    - id: Unique identifier, assigned once at creation
    - url: Absolute url of the item, derived from the id
    - title: Short title
    - completed: Boolean completion flag
    - order: Optional client-chosen sort position
    """

    id: UUID
    url: str
    title: str
    completed: bool = False
    order: Optional[int] = None


def todo_url(base_url: str, todo_id: UUID) -> str:
    """Build the public url of a todo from its identifier."""
    return f"{base_url.rstrip('/')}/{todo_id}"
