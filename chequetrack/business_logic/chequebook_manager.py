# chequetrack/business_logic/chequebook_manager.py

from typing import Optional, List, TYPE_CHECKING
from chequetrack.business_logic.entities.chequebook_entity import ChequebookEntity
from chequetrack.utils.json_codec import dataclass_to_json
from chequetrack.constants import AuditAction, SyncAction, ChequebookStatus
from chequetrack.utils import date_converter

if TYPE_CHECKING:
    from chequetrack.data_access.chequebooks_repository import ChequebooksRepository
    from chequetrack.business_logic.audit_log_manager import AuditLogManager
    from chequetrack.business_logic.stock_alert_manager import StockAlertManager
    from chequetrack.business_logic.sync_manager import SyncManager

import logging
logger = logging.getLogger(__name__)

class ChequebookManager:
    def __init__(self,
                 chequebooks_repository: 'ChequebooksRepository',
                 audit_log_manager: 'AuditLogManager',
                 stock_alert_manager: 'StockAlertManager',
                 sync_manager: 'SyncManager'):
        self.chequebooks_repository = chequebooks_repository
        self.audit_log_manager = audit_log_manager
        self.stock_alert_manager = stock_alert_manager
        self.sync_manager = sync_manager

    def get_all_chequebooks(self) -> List[ChequebookEntity]:
        return self.chequebooks_repository.get_all()

    def add_chequebook(self, name: str, total_leaves: int,
                       branch_id: Optional[str] = None,
                       low_stock_threshold: Optional[int] = None) -> ChequebookEntity:
        book = ChequebookEntity(
            name=name,
            total_leaves=total_leaves,
            date_added=date_converter.now(),
            status=ChequebookStatus.ACTIVE,
            branch_id=branch_id,
            low_stock_threshold=low_stock_threshold,
        )
        return self.save_chequebook(book)

    def save_chequebook(self, book: ChequebookEntity) -> ChequebookEntity:
        """Upserts, audits, pushes, then re-checks stock since leaves or threshold may have changed."""
        if not book.name or not book.name.strip():
            raise ValueError("Chequebook name cannot be empty.")
        if book.total_leaves < 0:
            raise ValueError(f"Total leaves cannot be negative: {book.total_leaves}")
        if book.low_stock_threshold is not None and book.low_stock_threshold < 0:
            raise ValueError(f"Low stock threshold cannot be negative: {book.low_stock_threshold}")
        if book.date_added is None:
            book.date_added = date_converter.now()

        inserted = self.chequebooks_repository.save(book)
        if inserted:
            self.audit_log_manager.add_entry(AuditAction.ADDED_CHEQUEBOOK, f"Added new chequebook: {book.name}")
        else:
            self.audit_log_manager.add_entry(AuditAction.UPDATED_CHEQUEBOOK, f"Updated chequebook: {book.name}")
        self.sync_manager.push(SyncAction.SAVE_CHEQUEBOOK, {"chequeBook": dataclass_to_json(book)})
        self.stock_alert_manager.check_and_trigger_stock_alerts()
        return book

    def archive_chequebook(self, book_id: str) -> ChequebookEntity:
        book = self.chequebooks_repository.get_by_id(book_id)
        if book is None:
            raise ValueError(f"Chequebook {book_id} not found.")
        book.status = ChequebookStatus.ARCHIVED
        return self.save_chequebook(book)

    def delete_chequebook(self, book_id: str) -> Optional[ChequebookEntity]:
        removed = self.chequebooks_repository.delete(book_id)
        if removed is not None:
            self.audit_log_manager.add_entry(AuditAction.DELETED_CHEQUEBOOK, f"Deleted chequebook: {removed.name}")
        self.sync_manager.push(SyncAction.DELETE_CHEQUEBOOK, {"id": book_id})
        return removed
