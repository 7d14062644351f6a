"""List service: ownership-scoped list CRUD."""

import logging
from typing import Any

from sqlalchemy.orm import Session, selectinload

from src.exceptions import ListNotFoundError
from src.models.list import DEFAULT_LIST_COLOR, List
from src.models.task import Task
from src.services.user_service import UserService

logger = logging.getLogger(__name__)


class ListService:
    """Service for list operations."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserService(db)

    def get_owned(self, list_id: int, owner_id: int, with_tasks: bool = False) -> List | None:
        """Get a list only if it belongs to ``owner_id``."""
        query = self.db.query(List).filter(List.id == list_id, List.author_id == owner_id)
        if with_tasks:
            query = query.options(selectinload(List.tasks))
        return query.first()

    def _require_owned(self, list_id: int, owner_id: int, with_tasks: bool = False) -> List:
        lst = self.get_owned(list_id, owner_id, with_tasks=with_tasks)
        if lst is None:
            raise ListNotFoundError("List not found or does not belong to user")
        return lst

    def create(self, user_id: int, title: str, color: str = DEFAULT_LIST_COLOR) -> List:
        """Create a list for the user."""
        self.users.require(user_id)

        lst = List(title=title, color=color or DEFAULT_LIST_COLOR, author_id=user_id)
        self.db.add(lst)
        self.db.commit()
        self.db.refresh(lst)

        logger.info(f"User {user_id} created list {lst.id}")
        return lst

    def list_for_user(self, user_id: int) -> list[List]:
        """All lists owned by the user, most recent first."""
        self.users.require(user_id)
        return self.db.query(List).filter(List.author_id == user_id).order_by(List.id.desc()).all()

    def get_with_tasks(self, user_id: int, list_id: int) -> List:
        """Get one of the user's lists with its tasks loaded."""
        self.users.require(user_id)
        return self._require_owned(list_id, user_id, with_tasks=True)

    def update(self, user_id: int, list_id: int, changes: dict[str, Any]) -> List:
        """Apply a partial update to a list."""
        self.users.require(user_id)
        lst = self._require_owned(list_id, user_id)

        for field, value in changes.items():
            setattr(lst, field, value)

        self.db.commit()
        self.db.refresh(lst)
        return lst

    def delete(self, user_id: int, list_id: int) -> None:
        """Delete a list together with its tasks in one transaction."""
        self.users.require(user_id)
        self._require_owned(list_id, user_id)

        try:
            removed = (
                self.db.query(Task)
                .filter(Task.list_id == list_id)
                .delete(synchronize_session=False)
            )
            self.db.query(List).filter(List.id == list_id).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"User {user_id} deleted list {list_id} and {removed} tasks")

    def toggle_favorite(self, user_id: int, list_id: int) -> List:
        """Flip the favorite flag."""
        self.users.require(user_id)
        lst = self._require_owned(list_id, user_id)

        lst.favorite = not lst.favorite
        self.db.commit()
        self.db.refresh(lst)
        return lst
