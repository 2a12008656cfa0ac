from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    The title is optional at the schema level so that a missing, null or blank
    title all reach the store and fail its validation the same way.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"title": "Buy milk"}},
    )

    title: Optional[StrictStr] = Field(default=None, description="Short title for the todo item")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional; only provided fields will be updated.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"title": "Buy milk and bread", "completed": True}},
    )

    title: Optional[StrictStr] = Field(default=None, description="New title; trimmed, must not be blank")
    completed: Optional[StrictBool] = Field(default=None, description="Completion status flag")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item. Serialized with camelCase keys.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 3,
                "title": "Buy milk",
                "completed": False,
                "createdAt": "2025-01-25T10:15:30.123456Z",
                "updatedAt": "2025-01-26T09:00:00.000001Z",
            }
        },
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: Optional[datetime] = Field(
        default=None, alias="updatedAt", description="Last update timestamp, absent until updated"
    )


class TodoEnvelope(BaseModel):
    """Envelope wrapping a single todo."""

    success: bool = True
    data: TodoOut
    message: Optional[str] = None


class TodoListEnvelope(BaseModel):
    """Envelope wrapping every todo plus their count."""

    success: bool = True
    data: List[TodoOut]
    count: int


class ErrorEnvelope(BaseModel):
    """Envelope returned for every failed request."""

    success: bool = False
    error: str


class HealthOut(BaseModel):
    status: str = Field("OK", description="Always 'OK' while the process is serving")
    timestamp: str = Field(..., description="Current time as an ISO-8601 UTC string")
    uptime: float = Field(..., ge=0, description="Seconds since the application started")
