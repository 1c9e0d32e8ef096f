# chequetrack/business_logic/audit_log_manager.py

from typing import Optional, List, TYPE_CHECKING
from chequetrack.business_logic.entities.audit_log_entity import AuditLogEntity
from chequetrack.constants import AuditAction
from chequetrack.utils import date_converter

if TYPE_CHECKING:
    from chequetrack.data_access.audit_log_repository import AuditLogRepository

import logging
logger = logging.getLogger(__name__)

class AuditLogManager:
    def __init__(self, audit_log_repository: 'AuditLogRepository', default_user_id: str = "u1"):
        self.audit_log_repository = audit_log_repository
        self.default_user_id = default_user_id

    def add_entry(self, action: AuditAction, details: str, user_id: Optional[str] = None) -> AuditLogEntity:
        entry = AuditLogEntity(
            action=action.value,
            details=details,
            timestamp=date_converter.now(),
            user_id=user_id or self.default_user_id,
        )
        self.audit_log_repository.prepend(entry)
        logger.info(f"Audit: {entry.action} - {details}")
        return entry

    def get_entries(self) -> List[AuditLogEntity]:
        return self.audit_log_repository.get_all()
