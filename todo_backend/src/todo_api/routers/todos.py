from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from ..exceptions import TODO_DELETED, ApiError
from ..models import TodoEntity
from ..repositories import StoreResult, TodoStore
from ..schemas import ErrorEnvelope, TodoCreate, TodoEnvelope, TodoListEnvelope, TodoOut, TodoUpdate
from ..utils import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_NOT_FOUND_RESPONSE = {404: {"model": ErrorEnvelope, "description": "Todo not found"}}


# PUBLIC_INTERFACE
def get_store(request: Request) -> TodoStore:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.store


def _unwrap(result: StoreResult[TodoEntity]) -> TodoOut:
    """Turn a store result into an output schema, raising ApiError for failures."""
    if not result.ok:
        logger.info("Todo request rejected: %s", result.error.value)
        raise ApiError.from_kind(result.error)
    return TodoOut(**result.value)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TodoListEnvelope,
    response_model_exclude_none=True,
    summary="List Todos",
    description="List every todo in creation order together with their count.",
)
def list_todos(store: TodoStore = Depends(get_store)) -> TodoListEnvelope:
    items = [TodoOut(**it) for it in store.list()]  # type: ignore[arg-type]
    return TodoListEnvelope(data=items, count=len(items))


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoEnvelope,
    response_model_exclude_none=True,
    summary="Get Todo",
    description="Get a single Todo item by ID. Ids that are not integers match no todo.",
    responses=_NOT_FOUND_RESPONSE,
)
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> TodoEnvelope:
    """
    Retrieve a single Todo item by its ID.
    """
    return TodoEnvelope(data=_unwrap(store.get(parse_id(todo_id))))


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoEnvelope,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item from a non-blank title and return it.",
    responses={400: {"model": ErrorEnvelope, "description": "Missing or blank title"}},
)
def create_todo(
    payload: Optional[TodoCreate] = None, store: TodoStore = Depends(get_store)
) -> TodoEnvelope:
    """
    Create a new Todo. A missing body is treated like a missing title.
    """
    title = payload.title if payload is not None else None
    return TodoEnvelope(data=_unwrap(store.create(title)))


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoEnvelope,
    response_model_exclude_none=True,
    summary="Update Todo",
    description=(
        "Partially update a Todo item. Only the provided fields change; "
        "the update timestamp is always refreshed."
    ),
    responses={
        **_NOT_FOUND_RESPONSE,
        400: {"model": ErrorEnvelope, "description": "Blank title or invalid field types"},
    },
)
def update_todo(
    todo_id: str,
    payload: Optional[TodoUpdate] = None,
    store: TodoStore = Depends(get_store),
) -> TodoEnvelope:
    """
    Partial update of a Todo item.
    """
    fields = payload.model_dump(exclude_none=True) if payload is not None else {}
    return TodoEnvelope(data=_unwrap(store.update(parse_id(todo_id), fields)))


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=TodoEnvelope,
    response_model_exclude_none=True,
    summary="Delete Todo",
    description="Delete a Todo item by ID and return the removed record.",
    responses=_NOT_FOUND_RESPONSE,
)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> TodoEnvelope:
    """
    Delete a Todo. Returns the deleted record with a confirmation message.
    """
    deleted = _unwrap(store.delete(parse_id(todo_id)))
    return TodoEnvelope(data=deleted, message=TODO_DELETED)
