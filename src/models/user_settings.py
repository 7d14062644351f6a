"""User settings model."""

from sqlalchemy import Column, Enum, ForeignKey, Integer
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import DateFormat, Language, TaskPriority, TaskStatus, Theme
from src.models.mixins import TimestampMixin
from src.models.task import task_priority_type, task_status_type

# Values used when a settings row is materialized for the first time
SETTINGS_DEFAULTS = {
    "theme": Theme.LIGHT,
    "date_format": DateFormat.MM_DD_YYYY,
    "language": Language.EN,
    "default_priority": TaskPriority.MEDIUM,
    "default_status": TaskStatus.TODO,
}


class UserSettings(Base, TimestampMixin):
    """Per-user display and task-default preferences. One row per user."""

    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, index=True)
    theme = Column(Enum(Theme, name="theme"), nullable=False, default=Theme.LIGHT)
    date_format = Column(
        Enum(DateFormat, name="date_format"), nullable=False, default=DateFormat.MM_DD_YYYY
    )
    language = Column(Enum(Language, name="language"), nullable=False, default=Language.EN)
    default_priority = Column(task_priority_type, nullable=False, default=TaskPriority.MEDIUM)
    default_status = Column(task_status_type, nullable=False, default=TaskStatus.TODO)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="RESTRICT"), unique=True, nullable=False
    )

    # Relationships
    user = relationship("User", back_populates="settings")
