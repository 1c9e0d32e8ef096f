# chequetrack/data_access/cheques_repository.py

from typing import Dict, Any, List, Optional
from datetime import timedelta
from chequetrack.data_access.base_repository import BaseRepository
from chequetrack.data_access.local_store import LocalStore
from chequetrack.business_logic.entities.cheque_entity import ChequeEntity
from chequetrack.constants import ChequeStatus
from chequetrack.config import STORAGE_KEY
from chequetrack.utils import date_converter
import logging

logger = logging.getLogger(__name__)

class ChequesRepository(BaseRepository[ChequeEntity]):
    def __init__(self, local_store: LocalStore):
        super().__init__(local_store=local_store,
                         model_type=ChequeEntity,
                         storage_key=STORAGE_KEY)

    def _default_records(self) -> List[Dict[str, Any]]:
        now = date_converter.now()
        created_at = date_converter.to_iso_timestamp(now)

        def due(days: int) -> str:
            return (now + timedelta(days=days)).date().isoformat()

        samples = [
            ("c1", "000123", 5000.00, "Global Supplies Ltd", due(2), ChequeStatus.PENDING, "Menwar 01", "Menwar Chequebook"),
            ("c2", "000124", 1250.50, "Office Depot", due(-5), ChequeStatus.CLEARED, "JN24", "Menwar Chequebook"),
            ("c3", "000125", 3200.00, "Tech Solutions Inc", due(-1), ChequeStatus.BOUNCED, "Menwar 02", "Zakia Chequebook"),
            ("c4", "000126", 750.00, "Cleaning Services Co", due(10), ChequeStatus.PENDING, "Menwar 01", "Zakia Chequebook"),
        ]
        return [
            {
                "id": cheque_id,
                "chequeNumber": number,
                "amount": amount,
                "payeeName": payee,
                "date": due_date,
                "status": status.value,
                "bankName": "",
                "branch": branch,
                "chequeBookRef": book,
                "createdAt": created_at,
                "createdBy": "u1",
            }
            for cheque_id, number, amount, payee, due_date, status, branch, book in samples
        ]

    def get_chequebook_refs(self) -> List[Optional[str]]:
        """`chequeBookRef` of every stored cheque, including records that cannot be decoded."""
        refs = []
        for record in self._load_records():
            if isinstance(record, dict):
                ref = record.get("chequeBookRef")
                refs.append(None if ref is None else str(ref))
        return refs
