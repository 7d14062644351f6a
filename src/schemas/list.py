"""List schemas."""

from datetime import datetime

from pydantic import Field

from src.models.list import DEFAULT_LIST_COLOR
from src.schemas.base import HEX_COLOR_PATTERN, CamelModel, PatchModel
from src.schemas.task import TaskResponse


class ListCreate(CamelModel):
    """Create a new list."""

    title: str = Field(..., min_length=1, max_length=50)
    color: str = Field(DEFAULT_LIST_COLOR, pattern=HEX_COLOR_PATTERN)


class ListUpdate(PatchModel):
    """Update a list."""

    title: str | None = Field(None, min_length=1, max_length=50)
    color: str | None = Field(None, pattern=HEX_COLOR_PATTERN)


class ListResponse(CamelModel):
    """List response."""

    id: int
    title: str
    color: str
    favorite: bool
    author_id: int
    created_at: datetime
    updated_at: datetime


class ListWithTasksResponse(ListResponse):
    """List response including every task in the list."""

    tasks: list[TaskResponse] = []


class ListEnvelope(CamelModel):
    success: bool = True
    message: str
    list: ListResponse


class ListDetailEnvelope(CamelModel):
    success: bool = True
    message: str = "List retrieved successfully"
    list: ListWithTasksResponse


class ListsEnvelope(CamelModel):
    success: bool = True
    message: str = "Lists retrieved successfully"
    lists: list[ListResponse]
