from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.enums import MANAGER_ROLES, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import AttendancePolicy
from .policy import policy_from_settings
from .repository import AppConfigRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Admin-editable key/value settings layered over the deployment settings."""

    def __init__(self, app_config: AppConfigRepository, *, settings: Any = None):
        self._app_config = app_config
        self._settings = settings

    def get_config(self) -> dict[str, str]:
        return dict(self._app_config.get_all())

    def current_policy(self) -> AttendancePolicy:
        return policy_from_settings(self._settings, self._app_config.get_all())

    def update_config(self, *, current_role: Role, values: Mapping[str, Any]) -> AttendancePolicy:
        if current_role not in MANAGER_ROLES:
            raise AuthorizationError("You do not have permission to manage settings")
        if not isinstance(values, Mapping) or not values:
            raise ValidationError("Invalid config data")

        as_text = {str(k): str(v) for k, v in values.items()}
        merged = {**self._app_config.get_all(), **as_text}
        # Reject the update before storing anything if it yields an invalid policy.
        policy = policy_from_settings(self._settings, merged)

        self._app_config.upsert_many(as_text)
        logger.info("Updated app config keys: %s", ", ".join(sorted(as_text)))
        return policy
