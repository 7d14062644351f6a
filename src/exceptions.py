"""Domain errors raised by services and rendered by the application."""

from fastapi import status


class AppError(Exception):
    """Base class for errors that map to a specific HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    """Entity is absent or not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UserNotFoundError(NotFoundError):
    default_message = "User not found"


class TaskNotFoundError(NotFoundError):
    default_message = "Task not found"


class ListNotFoundError(NotFoundError):
    default_message = "List not found"


class ConflictError(AppError):
    """Write would violate a uniqueness rule."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Conflict"
