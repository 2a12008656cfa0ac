from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from threading import RLock
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .models import TodoEntity

logger = logging.getLogger(__name__)

T = TypeVar("T")

SAMPLE_TITLES = ("Aprender CI/CD", "Configurar pipeline")


class ErrorKind(str, Enum):
    """Expected failure kinds of store operations."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """
    Outcome of a store operation: either a value or an error kind, never both.
    """
    value: Optional[T] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> "StoreResult[T]":
        return cls(error=error)


def normalize_title(title: Any) -> Optional[str]:
    """Return the trimmed title, or None if it is missing, not a string, or blank."""
    if not isinstance(title, str):
        return None
    stripped = title.strip()
    return stripped or None


# PUBLIC_INTERFACE
class TodoStore(ABC):
    """Abstract contract for todo storage."""

    @abstractmethod
    def list(self) -> List[TodoEntity]:
        """Return every todo in insertion order."""

    @abstractmethod
    def get(self, todo_id: Optional[int]) -> StoreResult[TodoEntity]:
        """Return the todo with the given id, or a NOT_FOUND result."""

    @abstractmethod
    def create(self, title: Optional[str]) -> StoreResult[TodoEntity]:
        """Create a todo from a title. Blank or missing titles give a VALIDATION result."""

    @abstractmethod
    def update(self, todo_id: Optional[int], fields: Dict[str, Any]) -> StoreResult[TodoEntity]:
        """
        Apply the provided fields ('title', 'completed') to an existing todo.
        Fields that are absent or None are left unchanged.
        """

    @abstractmethod
    def delete(self, todo_id: Optional[int]) -> StoreResult[TodoEntity]:
        """Remove a todo and return the removed record, or a NOT_FOUND result."""


class InMemoryTodoStore(TodoStore):
    """
    Thread-safe in-memory store. FastAPI runs sync endpoints on a thread pool,
    so every operation holds the lock for its whole duration.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[int, TodoEntity] = {}
        self._next_id = 1

    def _now(self) -> datetime:
        return datetime.now(timezone.utc)

    def _allocate_id(self) -> int:
        with self._lock:
            i = self._next_id
            self._next_id += 1
            return i

    def list(self) -> List[TodoEntity]:
        with self._lock:
            # Return copies to avoid external mutation
            return [t.copy() for t in self._items.values()]

    def get(self, todo_id: Optional[int]) -> StoreResult[TodoEntity]:
        with self._lock:
            item = self._items.get(todo_id) if todo_id is not None else None
            if item is None:
                return StoreResult.failure(ErrorKind.NOT_FOUND)
            return StoreResult.success(item.copy())

    def create(self, title: Optional[str]) -> StoreResult[TodoEntity]:
        clean_title = normalize_title(title)
        if clean_title is None:
            return StoreResult.failure(ErrorKind.VALIDATION)

        with self._lock:
            entity: TodoEntity = {
                "id": self._allocate_id(),
                "title": clean_title,
                "completed": False,
                "created_at": self._now(),
                "updated_at": None,
            }
            self._items[entity["id"]] = entity
        logger.debug("Created todo %d", entity["id"])
        return StoreResult.success(entity.copy())

    def update(self, todo_id: Optional[int], fields: Dict[str, Any]) -> StoreResult[TodoEntity]:
        with self._lock:
            existing = self._items.get(todo_id) if todo_id is not None else None
            if existing is None:
                return StoreResult.failure(ErrorKind.NOT_FOUND)

            # Update only provided fields
            updated = existing.copy()
            if fields.get("title") is not None:
                clean_title = normalize_title(fields["title"])
                if clean_title is None:
                    return StoreResult.failure(ErrorKind.VALIDATION)
                updated["title"] = clean_title
            if fields.get("completed") is not None:
                updated["completed"] = bool(fields["completed"])
            updated["updated_at"] = self._now()

            self._items[existing["id"]] = updated
        logger.debug("Updated todo %d", updated["id"])
        return StoreResult.success(updated.copy())

    def delete(self, todo_id: Optional[int]) -> StoreResult[TodoEntity]:
        with self._lock:
            removed = self._items.pop(todo_id, None) if todo_id is not None else None
        if removed is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND)
        logger.debug("Deleted todo %d", removed["id"])
        return StoreResult.success(removed)


def seed_sample_todos(store: TodoStore) -> None:
    """Fill a fresh store with the sample todos the demo service starts with."""
    for title in SAMPLE_TITLES:
        store.create(title)


# PUBLIC_INTERFACE
def build_store(seed: bool = False) -> TodoStore:
    """
    Factory returning a new in-memory store, optionally seeded with sample todos.
    """
    store = InMemoryTodoStore()
    if seed:
        seed_sample_todos(store)
    return store
