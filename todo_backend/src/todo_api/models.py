from __future__ import annotations

from datetime import datetime
from typing import Optional, TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a Todo item held by the store.

    Fields:
    - id: Unique integer identifier, assigned in increasing order and never reused
    - title: Short title, trimmed and never empty
    - completed: Boolean completion flag
    - created_at: UTC creation timestamp
    - updated_at: UTC timestamp of the last update, None until the first update
    """

    id: int
    title: str
    completed: bool
    created_at: datetime
    updated_at: Optional[datetime]
