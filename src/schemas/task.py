"""Task schemas."""

from datetime import datetime

from pydantic import Field

from src.models.enums import TaskPriority, TaskStatus
from src.schemas.base import CamelModel, IdInt, PatchModel


class TaskCreate(CamelModel):
    """Create a new task."""

    task_name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=200)
    status: TaskStatus = TaskStatus.TODO
    due_date: datetime | None = None
    priority: TaskPriority = TaskPriority.LOW
    list_id: IdInt | None = None
    archived: bool = False


class TaskUpdate(PatchModel):
    """Update a task.

    Only fields present in the request are written. Sending ``listId: null``
    detaches the task from its list; ``dueDate: null`` clears the due date.
    """

    required_fields = frozenset({"id"})
    nullable_fields = frozenset({"description", "due_date", "list_id"})
    empty_message = "At least one field besides id must be provided"

    id: IdInt
    task_name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=200)
    status: TaskStatus | None = None
    due_date: datetime | None = None
    priority: TaskPriority | None = None
    list_id: IdInt | None = None
    archived: bool | None = None


class TaskResponse(CamelModel):
    """Task response."""

    id: int
    task_name: str
    description: str | None
    status: TaskStatus
    due_date: datetime | None
    priority: TaskPriority
    author_id: int
    list_id: int | None
    archived: bool
    created_at: datetime
    updated_at: datetime


class TaskEnvelope(CamelModel):
    success: bool = True
    message: str
    task: TaskResponse


class TasksEnvelope(CamelModel):
    success: bool = True
    message: str = "Tasks retrieved successfully"
    tasks: list[TaskResponse]
