"""List model."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import AuthoredMixin, TimestampMixin

DEFAULT_LIST_COLOR = "#000000"


class List(Base, AuthoredMixin, TimestampMixin):
    """List model for grouping a user's tasks.

    Tasks are removed explicitly by the list service before the list itself;
    the relationship carries no ORM cascade.
    """

    __tablename__ = "lists"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(50), nullable=False)
    color = Column(String(20), nullable=False, default=DEFAULT_LIST_COLOR)
    favorite = Column(Boolean, nullable=False, default=False)

    # Relationships
    author = relationship("User", back_populates="lists")
    tasks = relationship("Task", back_populates="list", order_by="Task.id")
