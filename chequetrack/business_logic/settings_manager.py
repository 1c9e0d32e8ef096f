# chequetrack/business_logic/settings_manager.py

from typing import TYPE_CHECKING
from chequetrack.business_logic.entities.setting_entity import NotificationSettingsEntity, GeneralSettingsEntity
from chequetrack.config import SCRIPT_URL
from chequetrack.constants import UserRole

if TYPE_CHECKING:
    from chequetrack.data_access.settings_repository import SettingsRepository
    from chequetrack.business_logic.entities.user_entity import UserEntity

import logging
logger = logging.getLogger(__name__)

class SettingsManager:
    def __init__(self, settings_repository: 'SettingsRepository', fallback_script_url: str = SCRIPT_URL):
        self.settings_repository = settings_repository
        self.fallback_script_url = fallback_script_url

    def _require_admin(self, acting_user: 'UserEntity') -> None:
        if acting_user.role != UserRole.ADMIN:
            raise PermissionError("Only administrators can change settings.")

    def get_notification_settings(self) -> NotificationSettingsEntity:
        return self.settings_repository.get_notification_settings()

    def save_notification_settings(self, settings: NotificationSettingsEntity,
                                   acting_user: 'UserEntity') -> NotificationSettingsEntity:
        self._require_admin(acting_user)
        if settings.default_stock_threshold < 0:
            raise ValueError("Default stock threshold cannot be negative.")
        logger.info(f"Notification settings updated by {acting_user.id}.")
        return self.settings_repository.save_notification_settings(settings)

    def get_general_settings(self) -> GeneralSettingsEntity:
        return self.settings_repository.get_general_settings()

    def save_general_settings(self, settings: GeneralSettingsEntity,
                              acting_user: 'UserEntity') -> GeneralSettingsEntity:
        self._require_admin(acting_user)
        logger.info(f"General settings updated by {acting_user.id}.")
        return self.settings_repository.save_general_settings(settings)

    def get_script_url(self) -> str:
        """Sync endpoint from saved settings, falling back to CHEQUETRACK_SCRIPT_URL."""
        return self.get_general_settings().script_url or self.fallback_script_url
