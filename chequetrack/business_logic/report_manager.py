# chequetrack/business_logic/report_manager.py

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional, List, Iterable, TYPE_CHECKING

from chequetrack.business_logic.allocation_resolver import amount_for, belongs_to_branch, ZERO
from chequetrack.constants import (
    ChequeStatus, ChequebookStatus, UserRole, DEFAULT_TOTAL_LEAVES, UPCOMING_WINDOW_DAYS
)
from chequetrack.utils import date_converter

if TYPE_CHECKING:
    from chequetrack.business_logic.entities.cheque_entity import ChequeEntity
    from chequetrack.business_logic.entities.branch_entity import BranchEntity
    from chequetrack.business_logic.entities.chequebook_entity import ChequebookEntity
    from chequetrack.business_logic.entities.user_entity import UserEntity
    from chequetrack.data_access.cheques_repository import ChequesRepository
    from chequetrack.data_access.branches_repository import BranchesRepository
    from chequetrack.data_access.chequebooks_repository import ChequebooksRepository

import logging
logger = logging.getLogger(__name__)

ALL = "ALL"


@dataclass
class ChequebookUsage:
    used: int
    total: int

    @property
    def remaining(self) -> int:
        return max(0, self.total - self.used)

    @property
    def percent(self) -> float:
        """Remaining leaves as a percentage of the book, clamped to [0, 100]."""
        if self.total <= 0:
            return 0.0
        return min(100.0, max(0.0, self.remaining / self.total * 100))


@dataclass
class BookStock:
    name: str
    remaining: int
    total: int
    percent: float


@dataclass
class BranchMetric:
    id: Optional[str]
    name: str
    outstanding: Decimal = ZERO
    overdue: Decimal = ZERO
    upcoming: Decimal = ZERO
    pending_count: int = 0
    books: List[BookStock] = field(default_factory=list)


@dataclass
class DashboardStats:
    total_count: int = 0
    total_amount: Decimal = ZERO
    cleared_count: int = 0
    cleared_amount: Decimal = ZERO
    pending_count: int = 0
    pending_amount: Decimal = ZERO
    bounced_count: int = 0
    upcoming_count: int = 0 # pending and due within UPCOMING_WINDOW_DAYS


def chequebook_usage(book_name: str,
                     cheque_book_refs: Iterable[Optional[str]],
                     chequebooks: Iterable['ChequebookEntity']) -> ChequebookUsage:
    """`cheque_book_refs` holds the chequebook reference of every recorded cheque."""
    # exact string match on the book name, no case or whitespace folding
    used = sum(1 for ref in cheque_book_refs if ref == book_name)
    book = next((b for b in chequebooks if b.name == book_name), None)
    total = book.total_leaves if book else DEFAULT_TOTAL_LEAVES
    return ChequebookUsage(used=used, total=total)


def branch_metrics(branches: Iterable['BranchEntity'],
                   cheques: Iterable['ChequeEntity'],
                   chequebooks: Iterable['ChequebookEntity'],
                   reference_date: date,
                   cheque_book_refs: Optional[Iterable[Optional[str]]] = None) -> List[BranchMetric]:
    cheques = list(cheques)
    chequebooks = list(chequebooks)
    if cheque_book_refs is None:
        cheque_book_refs = [c.cheque_book_ref for c in cheques]
    else:
        cheque_book_refs = list(cheque_book_refs)
    metrics = []
    for branch in branches:
        metric = BranchMetric(id=branch.id, name=branch.name)

        for cheque in cheques:
            if cheque.status != ChequeStatus.PENDING or not belongs_to_branch(cheque, branch.name):
                continue
            amount = amount_for(cheque, branch.name)
            metric.outstanding += amount
            metric.pending_count += 1
            if cheque.date < reference_date:
                metric.overdue += amount
            else:
                metric.upcoming += amount

        for book in chequebooks:
            if book.status != ChequebookStatus.ACTIVE or book.branch_id != branch.id:
                continue
            usage = chequebook_usage(book.name, cheque_book_refs, chequebooks)
            metric.books.append(BookStock(name=book.name, remaining=usage.remaining,
                                          total=usage.total, percent=usage.percent))
        metrics.append(metric)
    return metrics


def dashboard_stats(cheques: Iterable['ChequeEntity'], now: Optional[datetime] = None) -> DashboardStats:
    today = (now or date_converter.now()).date()
    window_end = today + timedelta(days=UPCOMING_WINDOW_DAYS)
    stats = DashboardStats()
    for cheque in cheques:
        stats.total_count += 1
        stats.total_amount += cheque.amount
        if cheque.status == ChequeStatus.CLEARED:
            stats.cleared_count += 1
            stats.cleared_amount += cheque.amount
        elif cheque.status == ChequeStatus.PENDING:
            stats.pending_count += 1
            stats.pending_amount += cheque.amount
            if today <= cheque.date <= window_end:
                stats.upcoming_count += 1
        elif cheque.status == ChequeStatus.BOUNCED:
            stats.bounced_count += 1
    return stats


def enforced_branch(user: Optional['UserEntity'], requested_branch: str = ALL) -> str:
    """Non-admin users with a home branch only ever see that branch."""
    if user is not None and user.role != UserRole.ADMIN and user.branch:
        return user.branch
    return requested_branch


def filter_cheques(cheques: Iterable['ChequeEntity'],
                   user: Optional['UserEntity'] = None,
                   search: str = "",
                   status: str = ALL,
                   branch: str = ALL,
                   chequebook: str = ALL,
                   date_from: Optional[date] = None,
                   date_to: Optional[date] = None) -> List['ChequeEntity']:
    branch = enforced_branch(user, branch)
    needle = search.lower()
    result = []
    for c in cheques:
        if needle and not (needle in c.payee_name.lower()
                           or search in c.cheque_number
                           or needle in c.bank_name.lower()):
            continue
        if status != ALL and c.status.value != status:
            continue
        if branch != ALL and not belongs_to_branch(c, branch):
            continue
        if chequebook != ALL and c.cheque_book_ref != chequebook:
            continue
        if date_from and c.date < date_from:
            continue
        if date_to and c.date > date_to:
            continue
        result.append(c)
    return result


def unpaid_cheques(cheques: Iterable['ChequeEntity']) -> List['ChequeEntity']:
    return sorted((c for c in cheques if c.status == ChequeStatus.PENDING), key=lambda c: c.date)


class ReportManager:
    """Read-side queries for the presentation layer. Recomputes from storage on every call."""

    def __init__(self,
                 cheques_repository: 'ChequesRepository',
                 branches_repository: 'BranchesRepository',
                 chequebooks_repository: 'ChequebooksRepository'):
        self.cheques_repository = cheques_repository
        self.branches_repository = branches_repository
        self.chequebooks_repository = chequebooks_repository

    def get_branch_metrics(self, reference_date: Optional[date] = None) -> List[BranchMetric]:
        reference_date = reference_date or date_converter.today()
        logger.debug(f"Computing branch metrics as of {reference_date.isoformat()}")
        return branch_metrics(self.branches_repository.get_all(),
                              self.cheques_repository.get_all(),
                              self.chequebooks_repository.get_all(),
                              reference_date,
                              self.cheques_repository.get_chequebook_refs())

    def get_chequebook_usage(self, book_name: str) -> ChequebookUsage:
        return chequebook_usage(book_name,
                                self.cheques_repository.get_chequebook_refs(),
                                self.chequebooks_repository.get_all())

    def get_dashboard_stats(self, now: Optional[datetime] = None) -> DashboardStats:
        return dashboard_stats(self.cheques_repository.get_all(), now)

    def get_filtered_cheques(self, user: Optional['UserEntity'] = None, **filters) -> List['ChequeEntity']:
        return filter_cheques(self.cheques_repository.get_all(), user=user, **filters)

    def get_unpaid_cheques(self, user: Optional['UserEntity'] = None) -> List['ChequeEntity']:
        return unpaid_cheques(filter_cheques(self.cheques_repository.get_all(), user=user))
