"""User model."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.orm import relationship

from src.database import Base
from src.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    profile_image = Column(String(255), nullable=True)
    phone_number = Column(String(30), nullable=True)
    email_verified = Column(Boolean, default=False, nullable=False)

    # Relationships
    lists = relationship("List", back_populates="author")
    tasks = relationship("Task", back_populates="author")
    settings = relationship("UserSettings", back_populates="user", uselist=False)
