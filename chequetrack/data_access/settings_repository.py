# chequetrack/data_access/settings_repository.py

from typing import Any, Dict
from chequetrack.utils.json_codec import dataclass_from_json, dataclass_to_json
from chequetrack.data_access.local_store import LocalStore
from chequetrack.business_logic.entities.setting_entity import NotificationSettingsEntity, GeneralSettingsEntity
from chequetrack.config import NOTIF_SETTINGS_KEY, SETTINGS_KEY
import logging

logger = logging.getLogger(__name__)

class SettingsRepository:
    """Settings are single JSON objects, not collections, and are never seeded into storage."""
    def __init__(self, local_store: LocalStore):
        self.local_store = local_store

    def _load_object(self, key: str) -> Dict[str, Any]:
        data = self.local_store.load(key)
        if data is not None and not isinstance(data, dict):
            logger.warning(f"Settings under '{key}' are not an object, using defaults.")
            return {}
        return data or {}

    def get_notification_settings(self) -> NotificationSettingsEntity:
        return dataclass_from_json(NotificationSettingsEntity, self._load_object(NOTIF_SETTINGS_KEY))

    def save_notification_settings(self, settings: NotificationSettingsEntity) -> NotificationSettingsEntity:
        self.local_store.store(NOTIF_SETTINGS_KEY, dataclass_to_json(settings))
        return settings

    def get_general_settings(self) -> GeneralSettingsEntity:
        return dataclass_from_json(GeneralSettingsEntity, self._load_object(SETTINGS_KEY))

    def save_general_settings(self, settings: GeneralSettingsEntity) -> GeneralSettingsEntity:
        self.local_store.store(SETTINGS_KEY, dataclass_to_json(settings))
        return settings
