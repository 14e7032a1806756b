"""
Local user preferences (nickname, notification flag, admin toggle)

The admin flag only gates what the UI offers; it is not a security boundary.
"""

import logging
from typing import Any, Dict, Optional

from app.core.exceptions import AdminModeRequired, ValidationError
from app.schemas.user import UserPreferences

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, preferences: Optional[UserPreferences] = None):
        self._preferences = preferences or UserPreferences()

    @property
    def preferences(self) -> UserPreferences:
        return self._preferences.model_copy()

    @property
    def nickname(self) -> str:
        return self._preferences.nickname

    @property
    def is_admin(self) -> bool:
        return self._preferences.is_admin

    def set_nickname(self, nickname: str) -> None:
        nickname = nickname.strip()
        if not nickname:
            raise ValidationError("Nickname must not be empty", field="nickname")
        self._preferences = self._preferences.model_copy(update={"nickname": nickname})

    def toggle_notifications(self) -> bool:
        enabled = not self._preferences.notifications_enabled
        self._preferences = self._preferences.model_copy(update={"notifications_enabled": enabled})
        return enabled

    def toggle_admin(self) -> bool:
        is_admin = not self._preferences.is_admin
        self._preferences = self._preferences.model_copy(update={"is_admin": is_admin})
        logger.info(f"Admin mode {'enabled' if is_admin else 'disabled'}")
        return is_admin

    def require_admin(self) -> None:
        if not self._preferences.is_admin:
            raise AdminModeRequired()

    def state(self) -> Dict[str, Any]:
        return self._preferences.model_dump()
