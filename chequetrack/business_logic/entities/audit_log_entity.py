# chequetrack/business_logic/entities/audit_log_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime
from .base_entity import BaseEntity

@dataclass
class AuditLogEntity(BaseEntity):
    action: str
    details: str
    timestamp: Optional[datetime] = field(default=None)
    user_id: Optional[str] = field(default=None)
