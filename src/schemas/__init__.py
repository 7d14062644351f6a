"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse, UserUpdate
from src.schemas.list import ListCreate, ListResponse, ListUpdate, ListWithTasksResponse
from src.schemas.settings import SettingsResponse, SettingsUpdate
from src.schemas.task import TaskCreate, TaskResponse, TaskUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserUpdate",
    "UserResponse",
    "AuthResponse",
    "ListCreate",
    "ListUpdate",
    "ListResponse",
    "ListWithTasksResponse",
    "TaskCreate",
    "TaskUpdate",
    "TaskResponse",
    "SettingsUpdate",
    "SettingsResponse",
]
