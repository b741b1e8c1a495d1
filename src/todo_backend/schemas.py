from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    New items always start incomplete; a `completed` key in the payload is ignored.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "order": 1,
            }
        }
    )

    title: str = Field(..., description="Short title for the todo item")
    order: Optional[int] = Field(default=None, description="Optional sort position")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for patching an existing Todo item.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries and supplies",
                "completed": True,
            }
        }
    )

    title: Optional[str] = Field(default=None, description="Short title for the todo item")
    order: Optional[int] = Field(default=None, description="Sort position; an explicit null clears it")
    completed: Optional[bool] = Field(default=None, description="Completion status flag")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0d9cbbd3-5b5a-4a5e-9d3c-2f7c1f1a4b7e",
                "url": "http://localhost:5000/0d9cbbd3-5b5a-4a5e-9d3c-2f7c1f1a4b7e",
                "order": 1,
                "title": "Buy groceries",
                "completed": False,
            }
        },
    )

    id: UUID = Field(..., description="Unique identifier of the todo item")
    url: str = Field(..., description="Absolute url of the todo item")
    order: Optional[int] = Field(default=None, description="Optional sort position")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(..., description="Completion status flag")
