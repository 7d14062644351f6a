"""List API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from src.api.dependencies import CurrentClaims, get_list_service
from src.schemas.base import MessageResponse
from src.schemas.list import (
    ListCreate,
    ListDetailEnvelope,
    ListEnvelope,
    ListResponse,
    ListsEnvelope,
    ListUpdate,
    ListWithTasksResponse,
)
from src.services.list_service import ListService

router = APIRouter(prefix="/api/lists", tags=["lists"])

ListId = Annotated[int, Path(gt=0)]
Lists = Annotated[ListService, Depends(get_list_service)]


@router.post("", response_model=ListEnvelope, status_code=status.HTTP_201_CREATED)
def create_list(list_data: ListCreate, claims: CurrentClaims, lists: Lists):
    """Create a new list."""
    lst = lists.create(claims.user_id, title=list_data.title, color=list_data.color)
    return ListEnvelope(message="List created successfully", list=ListResponse.model_validate(lst))


@router.get("", response_model=ListsEnvelope)
def get_lists(claims: CurrentClaims, lists: Lists):
    """Get all lists owned by the current user, newest first."""
    items = lists.list_for_user(claims.user_id)
    return ListsEnvelope(lists=[ListResponse.model_validate(lst) for lst in items])


@router.get("/{list_id}", response_model=ListDetailEnvelope)
def get_list(list_id: ListId, claims: CurrentClaims, lists: Lists):
    """Get a specific list with its tasks."""
    lst = lists.get_with_tasks(claims.user_id, list_id)
    return ListDetailEnvelope(list=ListWithTasksResponse.model_validate(lst))


@router.put("/{list_id}", response_model=ListEnvelope)
def update_list(list_id: ListId, list_data: ListUpdate, claims: CurrentClaims, lists: Lists):
    """Update a list."""
    lst = lists.update(claims.user_id, list_id, list_data.patch())
    return ListEnvelope(message="List updated successfully", list=ListResponse.model_validate(lst))


@router.delete("/{list_id}", response_model=MessageResponse)
def delete_list(list_id: ListId, claims: CurrentClaims, lists: Lists):
    """Delete a list and all of its tasks."""
    lists.delete(claims.user_id, list_id)
    return MessageResponse(message="List deleted successfully")


@router.patch("/{list_id}/favorite", response_model=ListEnvelope)
def toggle_favorite(list_id: ListId, claims: CurrentClaims, lists: Lists):
    """Mark or unmark a list as favorite."""
    lst = lists.toggle_favorite(claims.user_id, list_id)
    return ListEnvelope(
        message="List favorite status toggled successfully",
        list=ListResponse.model_validate(lst),
    )
