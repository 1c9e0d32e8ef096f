# chequetrack/data_access/notifications_repository.py

from typing import Dict, Any, List
from datetime import timedelta
from chequetrack.data_access.base_repository import BaseRepository, record_id
from chequetrack.data_access.local_store import LocalStore
from chequetrack.business_logic.entities.notification_entity import NotificationEntity
from chequetrack.constants import NotificationType
from chequetrack.config import NOTIFICATIONS_KEY
from chequetrack.utils import date_converter

class NotificationsRepository(BaseRepository[NotificationEntity]):
    """Most recent notification first."""
    def __init__(self, local_store: LocalStore):
        super().__init__(local_store=local_store,
                         model_type=NotificationEntity,
                         storage_key=NOTIFICATIONS_KEY)

    def _default_records(self) -> List[Dict[str, Any]]:
        now = date_converter.now()

        def stamp(days_ago: int) -> str:
            return date_converter.to_iso_timestamp(now - timedelta(days=days_ago))

        return [
            {"id": "n1", "title": "Approaching Due Date",
             "message": "Cheque #4552 (Global Supplies) is due tomorrow.",
             "type": NotificationType.WARNING.value, "read": False, "date": stamp(0), "userId": "u1"},
            {"id": "n2", "title": "Backend Sync",
             "message": "Your recent changes have been synced to Google Sheets.",
             "type": NotificationType.SUCCESS.value, "read": True, "date": stamp(1), "userId": "u1"},
            {"id": "n3", "title": "Cheque Bounced",
             "message": "Cheque #000125 was marked as BOUNCED by bank update.",
             "type": NotificationType.ERROR.value, "read": False, "date": stamp(2), "userId": "u1"},
        ]

    def mark_read(self, notification_id: str) -> bool:
        records = self._load_records()
        found = False
        for record in records:
            if record_id(record) == notification_id:
                record["read"] = True
                found = True
        if found:
            self._store_records(records)
        return found
