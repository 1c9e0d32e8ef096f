# chequetrack/business_logic/cheque_manager.py

from typing import Optional, List, Dict, Any, Iterable, TYPE_CHECKING
from datetime import date
from decimal import Decimal, InvalidOperation

from chequetrack.business_logic.entities.cheque_entity import ChequeEntity
from chequetrack.business_logic.allocation_resolver import build_splits, splits_total
from chequetrack.utils.json_codec import dataclass_to_json
from chequetrack.constants import (
    ChequeStatus, UserRole, SyncAction, MULTI_BRANCH, DEFAULT_CHEQUE_NUMBER, DEFAULT_PAYEE_NAME
)
from chequetrack.utils import date_converter

if TYPE_CHECKING:
    from chequetrack.data_access.cheques_repository import ChequesRepository
    from chequetrack.business_logic.entities.user_entity import UserEntity
    from chequetrack.business_logic.stock_alert_manager import StockAlertManager
    from chequetrack.business_logic.sync_manager import SyncManager

import logging
logger = logging.getLogger(__name__)


def _to_amount(value: Any) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ValueError(f"Invalid cheque amount: {value!r}") from e
    if amount < 0:
        raise ValueError(f"Cheque amount cannot be negative: {amount}")
    return amount


class ChequeManager:
    def __init__(self,
                 cheques_repository: 'ChequesRepository',
                 stock_alert_manager: 'StockAlertManager',
                 sync_manager: 'SyncManager'):
        self.cheques_repository = cheques_repository
        self.stock_alert_manager = stock_alert_manager
        self.sync_manager = sync_manager

    def get_all_cheques(self) -> List[ChequeEntity]:
        return self.cheques_repository.get_all()

    def get_cheque_by_id(self, cheque_id: str) -> Optional[ChequeEntity]:
        return self.cheques_repository.get_by_id(cheque_id)

    def create_cheque(self,
                      acting_user: 'UserEntity',
                      amount: Decimal,
                      due_date: date,
                      cheque_number: Optional[str] = None,
                      payee_name: Optional[str] = None,
                      bank_name: str = "",
                      branch: Optional[str] = None,
                      allocations: Optional[Dict[str, Decimal]] = None,
                      cheque_book_ref: Optional[str] = None,
                      notes: Optional[str] = None,
                      image_url: Optional[str] = None) -> ChequeEntity:
        """
        Records a new cheque. The status is always PENDING.
        `allocations` ({branch name: amount}) splits the cheque; the primary branch then
        becomes the single split's branch, or "Multi" for several.
        """
        amount = _to_amount(amount)
        splits = []
        if allocations:
            branch, splits = build_splits(allocations)

        cheque = ChequeEntity(
            cheque_number=cheque_number or DEFAULT_CHEQUE_NUMBER,
            amount=amount,
            payee_name=payee_name or DEFAULT_PAYEE_NAME,
            date=due_date,
            status=ChequeStatus.PENDING,
            bank_name=bank_name or "",
            branch=branch or MULTI_BRANCH,
            splits=splits,
            cheque_book_ref=cheque_book_ref or None,
            notes=notes or None,
            image_url=image_url,
            created_at=date_converter.now(),
            created_by=acting_user.id,
        )
        self._warn_on_split_mismatch(cheque)
        logger.info(f"Creating cheque {cheque.cheque_number} for {cheque.amount} (branch: {cheque.branch})")
        return self.save_cheque(cheque)

    def save_cheque(self, cheque: ChequeEntity) -> ChequeEntity:
        """Upserts a cheque, pushes it and re-runs the stock check."""
        existing = self.cheques_repository.get_by_id(cheque.id) if cheque.id else None
        if existing is not None and existing.status != cheque.status:
            cheque.last_status_change = date_converter.now()
        self.cheques_repository.save(cheque)
        self.sync_manager.push(SyncAction.SAVE_CHEQUE, {"cheque": dataclass_to_json(cheque)})
        self.stock_alert_manager.check_and_trigger_stock_alerts()
        return cheque

    def change_status(self, cheque_id: str, new_status: ChequeStatus, note: Optional[str] = None) -> ChequeEntity:
        """
        Moves a cheque to `new_status`, stamps `last_status_change` and appends `note`
        (if any) to the cheque's notes trail.
        """
        cheque = self.cheques_repository.get_by_id(cheque_id)
        if cheque is None:
            raise ValueError(f"Cheque {cheque_id} not found.")

        stamp = date_converter.now()
        cheque.status = new_status
        cheque.last_status_change = stamp
        if note:
            label = "Rejection Reason" if new_status == ChequeStatus.BOUNCED else "Status Note"
            note_text = f"[{date_converter.to_display_str(stamp)}] {label}: {note}"
            cheque.notes = f"{cheque.notes}\n{note_text}" if cheque.notes else note_text

        logger.info(f"Cheque {cheque_id} status -> {new_status.value}")
        self.cheques_repository.save(cheque)
        self.sync_manager.push(SyncAction.SAVE_CHEQUE, {"cheque": dataclass_to_json(cheque)})
        self.stock_alert_manager.check_and_trigger_stock_alerts()
        return cheque

    def batch_update_status(self, cheque_ids: Iterable[str], new_status: ChequeStatus) -> int:
        updated = 0
        for cheque_id in cheque_ids:
            if self.cheques_repository.get_by_id(cheque_id) is None:
                logger.warning(f"Batch status update: cheque {cheque_id} not found, skipped.")
                continue
            self.change_status(cheque_id, new_status)
            updated += 1
        return updated

    def import_cheques(self, rows: List[Dict[str, Any]], acting_user: 'UserEntity') -> List[ChequeEntity]:
        """
        Bulk import of parsed CSV rows (see utils.csv_io). Imported cheques are PENDING,
        unsplit, and pushed as one batch.
        """
        now = date_converter.now()
        new_cheques = []
        for row in rows:
            new_cheques.append(ChequeEntity(
                cheque_number=row.get("cheque_number") or DEFAULT_CHEQUE_NUMBER,
                amount=_to_amount(row.get("amount") or 0),
                payee_name=row.get("payee_name") or DEFAULT_PAYEE_NAME,
                date=row.get("date") or now.date(),
                status=ChequeStatus.PENDING,
                bank_name=row.get("bank_name") or "",
                branch=row.get("branch") or acting_user.branch or MULTI_BRANCH,
                cheque_book_ref=row.get("cheque_book_ref") or None,
                notes=row.get("notes") or None,
                created_at=now,
                created_by=acting_user.id,
            ))
        if not new_cheques:
            return []

        self.cheques_repository.save_many(new_cheques)
        logger.info(f"Imported {len(new_cheques)} cheque(s).")
        self.sync_manager.push(SyncAction.SAVE_BATCH_CHEQUES,
                               {"cheques": [dataclass_to_json(c) for c in new_cheques]})
        self.stock_alert_manager.check_and_trigger_stock_alerts()
        return new_cheques

    def delete_cheque(self, cheque_id: str, acting_user: 'UserEntity') -> None:
        if acting_user.role == UserRole.USER:
            raise PermissionError("You do not have permission to delete cheques.")
        removed = self.cheques_repository.delete(cheque_id)
        if removed is not None:
            logger.info(f"Cheque {cheque_id} ({removed.cheque_number}) deleted by {acting_user.id}.")
        self.sync_manager.push(SyncAction.DELETE_CHEQUE, {"id": cheque_id})
        self.stock_alert_manager.check_and_trigger_stock_alerts()

    def _warn_on_split_mismatch(self, cheque: ChequeEntity) -> None:
        # Not enforced: split amounts are expected to add up to the total.
        if cheque.splits and splits_total(cheque) != cheque.amount:
            logger.warning(f"Cheque {cheque.cheque_number}: splits total {splits_total(cheque)} "
                           f"differs from amount {cheque.amount}.")
