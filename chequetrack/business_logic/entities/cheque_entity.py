# chequetrack/business_logic/entities/cheque_entity.py
from dataclasses import dataclass, field
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from .base_entity import BaseEntity
from chequetrack.constants import ChequeStatus, MULTI_BRANCH

@dataclass
class ChequeSplit:
    branch: str      # branch *name*, not id
    amount: Decimal

@dataclass
class ChequeEntity(BaseEntity):
    cheque_number: str
    amount: Decimal
    payee_name: str
    date: date                        # due date
    status: ChequeStatus = ChequeStatus.PENDING
    bank_name: str = ""
    branch: str = MULTI_BRANCH        # primary branch, or "Multi" when split across several
    splits: List[ChequeSplit] = field(default_factory=list)
    cheque_book_ref: Optional[str] = field(default=None) # chequebook *name*
    notes: Optional[str] = field(default=None)
    image_url: Optional[str] = field(default=None)
    created_at: Optional[datetime] = field(default=None)
    created_by: Optional[str] = field(default=None)     # user id
    last_status_change: Optional[datetime] = field(default=None)
