"""SQLAlchemy models."""

from src.models.list import List
from src.models.task import Task
from src.models.user import User
from src.models.user_settings import UserSettings

__all__ = [
    "User",
    "List",
    "Task",
    "UserSettings",
]
