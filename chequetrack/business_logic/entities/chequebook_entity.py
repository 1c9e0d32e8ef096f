# chequetrack/business_logic/entities/chequebook_entity.py
from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime
from .base_entity import BaseEntity
from chequetrack.constants import ChequebookStatus

@dataclass
class ChequebookEntity(BaseEntity):
    name: str                 # join key for ChequeEntity.cheque_book_ref
    total_leaves: int
    date_added: Optional[datetime] = field(default=None)
    status: ChequebookStatus = ChequebookStatus.ACTIVE
    branch_id: Optional[str] = field(default=None)
    low_stock_threshold: Optional[int] = field(default=None) # overrides the global default when set
