"""Settings service: lazily created per-user preferences."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user_settings import SETTINGS_DEFAULTS, UserSettings
from src.services.user_service import UserService

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for user settings. A row is created the first time it is needed."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserService(db)

    def _find(self, user_id: int) -> UserSettings | None:
        return self.db.query(UserSettings).filter(UserSettings.user_id == user_id).first()

    def _apply(self, settings: UserSettings, changes: dict[str, Any]) -> UserSettings:
        for field, value in changes.items():
            setattr(settings, field, value)

        self.db.commit()
        self.db.refresh(settings)
        return settings

    def _create(self, user_id: int, values: dict[str, Any]) -> UserSettings:
        settings = UserSettings(user_id=user_id, **{**SETTINGS_DEFAULTS, **values})
        self.db.add(settings)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent request created the row first
            self.db.rollback()
            existing = self._find(user_id)
            if existing is None:
                raise
            return self._apply(existing, values)

        self.db.refresh(settings)
        logger.info(f"Created settings for user {user_id}")
        return settings

    def get_or_create(self, user_id: int) -> UserSettings:
        """Get the user's settings, creating the default row on first access."""
        self.users.require(user_id)
        return self._find(user_id) or self._create(user_id, {})

    def update(self, user_id: int, changes: dict[str, Any]) -> UserSettings:
        """Patch the user's settings.

        When no row exists yet, one is created from the defaults merged with
        ``changes``.
        """
        self.users.require(user_id)

        settings = self._find(user_id)
        if settings is None:
            return self._create(user_id, changes)
        return self._apply(settings, changes)
