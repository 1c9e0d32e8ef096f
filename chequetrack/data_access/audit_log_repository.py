# chequetrack/data_access/audit_log_repository.py

from chequetrack.data_access.base_repository import BaseRepository
from chequetrack.data_access.local_store import LocalStore
from chequetrack.business_logic.entities.audit_log_entity import AuditLogEntity
from chequetrack.constants import AUDIT_LOG_LIMIT
from chequetrack.config import AUDIT_KEY

class AuditLogRepository(BaseRepository[AuditLogEntity]):
    """Most recent entry first, never more than `limit` entries."""
    def __init__(self, local_store: LocalStore, limit: int = AUDIT_LOG_LIMIT):
        super().__init__(local_store=local_store,
                         model_type=AuditLogEntity,
                         storage_key=AUDIT_KEY)
        self.limit = limit

    def prepend(self, entry: AuditLogEntity, limit=None) -> AuditLogEntity:
        return super().prepend(entry, limit=self.limit if limit is None else limit)
