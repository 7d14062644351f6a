"""User service: registration, credentials, profile updates and account removal."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.exceptions import ConflictError, UserNotFoundError
from src.models.list import List
from src.models.task import Task
from src.models.user import User
from src.models.user_settings import UserSettings
from src.services.auth import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Service for user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def require(self, user_id: int) -> User:
        """Get a user by id or raise UserNotFoundError."""
        user = self.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def create(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        profile_image: str | None = None,
    ) -> User:
        """Create a new user with a hashed password."""
        if self.get_by_email(email):
            raise ConflictError("Email already registered")

        user = User(
            email=email,
            password=get_password_hash(password),
            first_name=first_name,
            last_name=last_name,
            profile_image=profile_image,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise ConflictError("Email already registered") from None
        self.db.refresh(user)

        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User | None:
        """Authenticate a user by email and password."""
        user = self.get_by_email(email)
        if not user:
            return None
        if not verify_password(password, user.password):
            return None
        return user

    def update(self, user_id: int, changes: dict[str, Any]) -> User:
        """Apply a partial update to a user.

        Only keys present in ``changes`` are written. A new email must not
        belong to another user; a new password is hashed before storage.
        """
        user = self.require(user_id)

        email = changes.get("email")
        if email is not None and email != user.email:
            existing = self.get_by_email(email)
            if existing and existing.id != user.id:
                logger.warning(f"User {user_id} tried to take an email already in use")
                raise ConflictError("Email already in use")

        for field, value in changes.items():
            if field == "password":
                value = get_password_hash(value)
            setattr(user, field, value)

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("Email already in use") from None
        self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> None:
        """Delete a user and everything they own in one transaction.

        Tasks, lists and the settings row go first because their foreign keys
        to users restrict deletion.
        """
        self.require(user_id)

        try:
            tasks = (
                self.db.query(Task)
                .filter(Task.author_id == user_id)
                .delete(synchronize_session=False)
            )
            lists = (
                self.db.query(List)
                .filter(List.author_id == user_id)
                .delete(synchronize_session=False)
            )
            self.db.query(UserSettings).filter(UserSettings.user_id == user_id).delete(
                synchronize_session=False
            )
            self.db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info(f"Deleted user {user_id} with {tasks} tasks and {lists} lists")
