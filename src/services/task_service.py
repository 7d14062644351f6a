"""Task service: ownership-scoped task CRUD and toggles."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from src.exceptions import ListNotFoundError, TaskNotFoundError
from src.models.enums import TaskPriority, TaskStatus
from src.models.list import List
from src.models.task import Task
from src.services.user_service import UserService

logger = logging.getLogger(__name__)


class TaskService:
    """Service for task operations.

    Every lookup filters by task id and author id together, so a task that
    belongs to someone else is reported exactly like a missing one.
    """

    def __init__(self, db: Session):
        self.db = db
        self.users = UserService(db)

    def get_owned(self, task_id: int, owner_id: int) -> Task | None:
        """Get a task only if it belongs to ``owner_id``."""
        return self.db.query(Task).filter(Task.id == task_id, Task.author_id == owner_id).first()

    def _require_owned(self, task_id: int, owner_id: int) -> Task:
        task = self.get_owned(task_id, owner_id)
        if task is None:
            raise TaskNotFoundError("Task not found or does not belong to user")
        return task

    def _require_owned_list(self, list_id: int, owner_id: int) -> List:
        lst = self.db.query(List).filter(List.id == list_id, List.author_id == owner_id).first()
        if lst is None:
            raise ListNotFoundError("List not found or does not belong to user")
        return lst

    def list_for_user(self, user_id: int) -> list[Task]:
        """All tasks authored by the user, most recent first."""
        self.users.require(user_id)
        return self.db.query(Task).filter(Task.author_id == user_id).order_by(Task.id.desc()).all()

    def get(self, user_id: int, task_id: int) -> Task | None:
        """Get one of the user's tasks, or None."""
        self.users.require(user_id)
        return self.get_owned(task_id, user_id)

    def create(
        self,
        user_id: int,
        task_name: str,
        description: str | None = None,
        status: TaskStatus = TaskStatus.TODO,
        due_date: datetime | None = None,
        priority: TaskPriority = TaskPriority.LOW,
        list_id: int | None = None,
        archived: bool = False,
    ) -> Task:
        """Create a task, checking that the target list belongs to the same user."""
        self.users.require(user_id)

        if list_id:
            self._require_owned_list(list_id, user_id)

        task = Task(
            task_name=task_name,
            description=description,
            status=status,
            due_date=due_date,
            priority=priority,
            author_id=user_id,
            list_id=list_id,
            archived=archived,
        )
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)

        logger.info(f"User {user_id} created task {task.id}")
        return task

    def update(self, user_id: int, task_id: int, changes: dict[str, Any]) -> Task:
        """Apply a partial update to a task.

        A non-null ``list_id`` must name one of the user's lists; a null one
        detaches the task from its list.
        """
        self.users.require(user_id)
        task = self._require_owned(task_id, user_id)

        if "list_id" in changes:
            if changes["list_id"]:
                self._require_owned_list(changes["list_id"], user_id)
            else:
                changes["list_id"] = None

        for field, value in changes.items():
            setattr(task, field, value)

        self.db.commit()
        self.db.refresh(task)
        return task

    def delete(self, user_id: int, task_id: int) -> None:
        """Delete one of the user's tasks."""
        self.users.require(user_id)
        task = self._require_owned(task_id, user_id)

        self.db.delete(task)
        self.db.commit()
        logger.info(f"User {user_id} deleted task {task_id}")

    def toggle_archived(self, user_id: int, task_id: int) -> Task:
        """Flip the archived flag."""
        self.users.require(user_id)
        task = self._require_owned(task_id, user_id)

        task.archived = not task.archived
        self.db.commit()
        self.db.refresh(task)
        return task

    def toggle_status(self, user_id: int, task_id: int) -> Task:
        """Flip between TODO and DONE.

        IN_PROGRESS counts as not done and moves to DONE, so toggling twice
        from IN_PROGRESS lands on TODO.
        """
        self.users.require(user_id)
        task = self._require_owned(task_id, user_id)

        task.status = TaskStatus(task.status).toggled()
        self.db.commit()
        self.db.refresh(task)
        return task
