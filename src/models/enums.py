"""Enums for model fields."""

from enum import Enum


class TaskStatus(str, Enum):
    """Lifecycle status of a task."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    def toggled(self) -> "TaskStatus":
        """Flip between TODO and DONE; any non-DONE status becomes DONE."""
        return TaskStatus.TODO if self == TaskStatus.DONE else TaskStatus.DONE


class TaskPriority(str, Enum):
    """Priority levels for tasks."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Theme(str, Enum):
    LIGHT = "LIGHT"
    DARK = "DARK"


class DateFormat(str, Enum):
    """Date display formats offered to clients."""

    MM_DD_YYYY = "MM_DD_YYYY"
    DD_MM_YYYY = "DD_MM_YYYY"
    YYYY_MM_DD = "YYYY_MM_DD"


class Language(str, Enum):
    EN = "EN"
    ES = "ES"
