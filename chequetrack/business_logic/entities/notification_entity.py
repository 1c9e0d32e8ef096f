# chequetrack/business_logic/entities/notification_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime
from .base_entity import BaseEntity
from chequetrack.constants import NotificationType, NotificationMetadataType

@dataclass
class NotificationMetadata:
    type: NotificationMetadataType
    cheque_book_id: str

@dataclass
class NotificationEntity(BaseEntity):
    title: str
    message: str
    type: NotificationType
    user_id: str
    read: bool = False
    date: Optional[datetime] = field(default=None)
    metadata: Optional[NotificationMetadata] = field(default=None) # deduplication key only
