from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from ..schemas import TodoCreate, TodoOut, TodoUpdate
from ..service import TodoService
from ..store import TodoNotFound

router = APIRouter(tags=["todos"])

_COLLECTION_METHODS = "DELETE, GET, OPTIONS, POST"
_ITEM_METHODS = "DELETE, GET, OPTIONS, PATCH"


def get_service(request: Request) -> TodoService:
    """
    Dependency returning the TodoService started by the application lifespan.
    """
    return request.app.state.todo_service


def _parse_id(todo_id: str) -> Optional[UUID]:
    """Return the UUID named by a path segment, or None if it is not one."""
    try:
        return UUID(todo_id)
    except ValueError:
        return None


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item and return the created resource.",
    responses={
        201: {"description": "Todo created successfully"},
        400: {"description": "Validation error"},
    },
)
async def create_todo(payload: TodoCreate, service: TodoService = Depends(get_service)) -> TodoOut:
    """
    Create a new Todo.
    """
    created = await service.add(payload)
    return TodoOut.model_validate(created)


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[TodoOut],
    summary="List Todos",
    description="List every Todo item.",
)
async def list_todos(service: TodoService = Depends(get_service)) -> List[TodoOut]:
    items = await service.list()
    return [TodoOut.model_validate(it) for it in items]


# PUBLIC_INTERFACE
@router.delete(
    "/",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear Todos",
    description="Delete every Todo item.",
)
async def clear_todos(service: TodoService = Depends(get_service)) -> None:
    await service.clear()
    return None


@router.options("/", include_in_schema=False)
async def todos_options() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": _COLLECTION_METHODS})


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
async def get_todo(todo_id: str, service: TodoService = Depends(get_service)) -> TodoOut:
    """
    Retrieve a single Todo item by its ID.
    """
    parsed = _parse_id(todo_id)
    item = await service.get(parsed) if parsed is not None else None
    if item is None:
        raise _not_found()
    return TodoOut.model_validate(item)


# PUBLIC_INTERFACE
@router.patch(
    "/{todo_id}",
    response_model=TodoOut,
    summary="Update Todo",
    description="Partially update fields of a Todo item.",
    responses={
        200: {"description": "Todo updated"},
        404: {"description": "Todo not found"},
    },
)
async def patch_todo(
    todo_id: str,
    payload: TodoUpdate,
    service: TodoService = Depends(get_service),
) -> TodoOut:
    """
    Partial update of a Todo item.
    """
    parsed = _parse_id(todo_id)
    if parsed is None:
        raise _not_found()
    try:
        updated = await service.update(parsed, payload)
    except TodoNotFound:
        raise _not_found()
    return TodoOut.model_validate(updated)


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Todo",
    description="Delete a Todo item by ID. Deleting a missing item also succeeds.",
)
async def delete_todo(todo_id: str, service: TodoService = Depends(get_service)) -> None:
    parsed = _parse_id(todo_id)
    if parsed is not None:
        await service.delete(parsed)
    return None


@router.options("/{todo_id}", include_in_schema=False)
async def todo_options(todo_id: str) -> Response:
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": _ITEM_METHODS})
