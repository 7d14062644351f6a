"""Task model."""

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.enums import TaskPriority, TaskStatus
from src.models.mixins import AuthoredMixin, TimestampMixin

# Shared with UserSettings so PostgreSQL sees a single enum type per name
task_status_type = Enum(TaskStatus, name="task_status")
task_priority_type = Enum(TaskPriority, name="task_priority")


class Task(Base, AuthoredMixin, TimestampMixin):
    """Task owned by a user, optionally grouped into one of that user's lists."""

    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    task_name = Column(String(100), nullable=False)
    description = Column(String(200), nullable=True)
    status = Column(task_status_type, nullable=False, default=TaskStatus.TODO)
    due_date = Column(DateTime(timezone=True), nullable=True)
    priority = Column(task_priority_type, nullable=False, default=TaskPriority.LOW)
    # Same-owner rule for list_id is checked by the task service, not the schema
    list_id = Column(
        Integer, ForeignKey("lists.id", ondelete="SET NULL"), nullable=True, index=True
    )
    archived = Column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship("User", back_populates="tasks")
    list = relationship("List", back_populates="tasks")
