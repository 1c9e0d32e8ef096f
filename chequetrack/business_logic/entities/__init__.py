# chequetrack/business_logic/entities/__init__.py
from .base_entity import BaseEntity
from .cheque_entity import ChequeEntity, ChequeSplit
from .branch_entity import BranchEntity
from .chequebook_entity import ChequebookEntity
from .user_entity import UserEntity
from .notification_entity import NotificationEntity, NotificationMetadata
from .audit_log_entity import AuditLogEntity
from .setting_entity import NotificationSettingsEntity, GeneralSettingsEntity
__all__ = [
    "BaseEntity", "ChequeEntity", "ChequeSplit", "BranchEntity",
    "ChequebookEntity", "UserEntity", "NotificationEntity", "NotificationMetadata",
    "AuditLogEntity", "NotificationSettingsEntity", "GeneralSettingsEntity",
]
