"""User settings schemas."""


from src.models.enums import DateFormat, Language, TaskPriority, TaskStatus, Theme
from src.schemas.base import CamelModel, PatchModel


class SettingsUpdate(PatchModel):
    """Update user settings. Omitted fields keep their current value."""

    empty_message = "At least one settings field must be provided"

    theme: Theme | None = None
    date_format: DateFormat | None = None
    language: Language | None = None
    default_priority: TaskPriority | None = None
    default_status: TaskStatus | None = None


class SettingsResponse(CamelModel):
    id: int
    user_id: int
    theme: Theme
    date_format: DateFormat
    language: Language
    default_priority: TaskPriority
    default_status: TaskStatus


class SettingsEnvelope(CamelModel):
    success: bool = True
    message: str
    settings: SettingsResponse
