# chequetrack/business_logic/notification_manager.py

from typing import Optional, List, TYPE_CHECKING

from chequetrack.business_logic.entities.notification_entity import NotificationEntity, NotificationMetadata
from chequetrack.constants import NotificationType
from chequetrack.utils import date_converter

if TYPE_CHECKING:
    from chequetrack.data_access.notifications_repository import NotificationsRepository

import logging
logger = logging.getLogger(__name__)

class NotificationManager:
    def __init__(self, notifications_repository: 'NotificationsRepository'):
        if notifications_repository is None:
            raise ValueError("notifications_repository cannot be None")
        self.notifications_repository = notifications_repository

    def list(self, user_id: Optional[str] = None) -> List[NotificationEntity]:
        """All notifications, most recent first, optionally only those addressed to `user_id`."""
        notifications = self.notifications_repository.get_all()
        if user_id:
            return [n for n in notifications if n.user_id == user_id]
        return notifications

    def create(self,
               user_id: str,
               title: str,
               message: str,
               notification_type: NotificationType = NotificationType.INFO,
               metadata: Optional[NotificationMetadata] = None) -> NotificationEntity:
        notification = NotificationEntity(
            title=title,
            message=message,
            type=notification_type,
            user_id=user_id,
            read=False,
            date=date_converter.now(),
            metadata=metadata,
        )
        self.notifications_repository.prepend(notification)
        logger.info(f"Notification '{title}' ({notification_type.value}) created for user {user_id}.")
        return notification

    def mark_read(self, notification_id: str) -> None:
        if not self.notifications_repository.mark_read(notification_id):
            logger.debug(f"Notification {notification_id} not found, nothing marked read.")

    def mark_all_read(self, user_id: str) -> int:
        unread = [n for n in self.list(user_id) if not n.read]
        for notification in unread:
            self.notifications_repository.mark_read(notification.id)
        return len(unread)

    def unread_count(self, user_id: str) -> int:
        return sum(1 for n in self.list(user_id) if not n.read)

    def urgent(self, user_id: str) -> List[NotificationEntity]:
        """Unread warnings and errors, as surfaced on the dashboard."""
        return [n for n in self.list(user_id)
                if not n.read and n.type in (NotificationType.WARNING, NotificationType.ERROR)]
