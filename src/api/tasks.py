"""Task API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from src.api.dependencies import CurrentClaims, get_task_service
from src.schemas.base import MessageResponse
from src.schemas.task import TaskCreate, TaskEnvelope, TaskResponse, TasksEnvelope, TaskUpdate
from src.services.task_service import TaskService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])

TaskId = Annotated[int, Path(gt=0)]
Tasks = Annotated[TaskService, Depends(get_task_service)]


@router.get("", response_model=TasksEnvelope)
def get_tasks(claims: CurrentClaims, tasks: Tasks):
    """Get all tasks for the current user, newest first."""
    items = tasks.list_for_user(claims.user_id)
    return TasksEnvelope(tasks=[TaskResponse.model_validate(task) for task in items])


@router.post("", response_model=TaskEnvelope, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, claims: CurrentClaims, tasks: Tasks):
    """Create a new task."""
    task = tasks.create(claims.user_id, **task_data.model_dump())
    return TaskEnvelope(message="Task created successfully", task=TaskResponse.model_validate(task))


@router.patch("", response_model=TaskEnvelope)
def update_task(task_data: TaskUpdate, claims: CurrentClaims, tasks: Tasks):
    """Update an existing task identified by the ``id`` in the body."""
    task = tasks.update(claims.user_id, task_data.id, task_data.patch())
    return TaskEnvelope(message="Task updated successfully", task=TaskResponse.model_validate(task))


@router.get("/{task_id}", response_model=TaskEnvelope)
def get_task(task_id: TaskId, claims: CurrentClaims, tasks: Tasks):
    """Get a specific task."""
    task = tasks.get(claims.user_id, task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return TaskEnvelope(
        message="Task retrieved successfully",
        task=TaskResponse.model_validate(task),
    )


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(task_id: TaskId, claims: CurrentClaims, tasks: Tasks):
    """Delete a task."""
    tasks.delete(claims.user_id, task_id)
    return MessageResponse(message="Task deleted successfully")


@router.patch("/{task_id}/toggle-archived", response_model=TaskEnvelope)
def toggle_archived(task_id: TaskId, claims: CurrentClaims, tasks: Tasks):
    """Archive or unarchive a task."""
    task = tasks.toggle_archived(claims.user_id, task_id)
    return TaskEnvelope(
        message="Task archived status toggled successfully",
        task=TaskResponse.model_validate(task),
    )


@router.patch("/{task_id}/toggle-status", response_model=TaskEnvelope)
def toggle_status(task_id: TaskId, claims: CurrentClaims, tasks: Tasks):
    """Toggle a task between TODO and DONE."""
    task = tasks.toggle_status(claims.user_id, task_id)
    return TaskEnvelope(
        message="Task status toggled successfully",
        task=TaskResponse.model_validate(task),
    )
