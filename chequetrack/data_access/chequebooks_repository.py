# chequetrack/data_access/chequebooks_repository.py

from typing import Dict, Any, List
from chequetrack.data_access.base_repository import BaseRepository
from chequetrack.data_access.local_store import LocalStore
from chequetrack.business_logic.entities.chequebook_entity import ChequebookEntity
from chequetrack.constants import ChequebookStatus, DEFAULT_CHEQUE_BOOKS, DEFAULT_STOCK_THRESHOLD
from chequetrack.config import BOOKS_KEY
from chequetrack.utils import date_converter

class ChequebooksRepository(BaseRepository[ChequebookEntity]):
    def __init__(self, local_store: LocalStore):
        super().__init__(local_store=local_store,
                         model_type=ChequebookEntity,
                         storage_key=BOOKS_KEY)

    def _default_records(self) -> List[Dict[str, Any]]:
        date_added = date_converter.to_iso_timestamp(date_converter.now())
        return [
            {
                "id": self.new_id(),
                "name": book["name"],
                "totalLeaves": book["totalLeaves"],
                "dateAdded": date_added,
                "status": ChequebookStatus.ACTIVE.value,
                "lowStockThreshold": DEFAULT_STOCK_THRESHOLD,
            }
            for book in DEFAULT_CHEQUE_BOOKS
        ]
