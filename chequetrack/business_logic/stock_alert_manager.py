# chequetrack/business_logic/stock_alert_manager.py

from typing import List, Set, Tuple, TYPE_CHECKING

from chequetrack.business_logic.allocation_resolver import resolve_branch_name
from chequetrack.business_logic.entities.notification_entity import NotificationMetadata
from chequetrack.business_logic.report_manager import chequebook_usage
from chequetrack.constants import ChequebookStatus, NotificationType, NotificationMetadataType, UserRole

if TYPE_CHECKING:
    from chequetrack.business_logic.entities.branch_entity import BranchEntity
    from chequetrack.business_logic.entities.chequebook_entity import ChequebookEntity
    from chequetrack.business_logic.entities.notification_entity import NotificationEntity
    from chequetrack.business_logic.entities.user_entity import UserEntity
    from chequetrack.business_logic.notification_manager import NotificationManager
    from chequetrack.data_access.cheques_repository import ChequesRepository
    from chequetrack.data_access.chequebooks_repository import ChequebooksRepository
    from chequetrack.data_access.branches_repository import BranchesRepository
    from chequetrack.data_access.users_repository import UsersRepository
    from chequetrack.data_access.settings_repository import SettingsRepository

import logging
logger = logging.getLogger(__name__)

# (user id, metadata type, chequebook id)
AlertKey = Tuple[str, str, str]

LOW_STOCK_TITLE = "Low Stock Alert"


def alert_targets(book: 'ChequebookEntity',
                  users: List['UserEntity'],
                  branches: List['BranchEntity']) -> List['UserEntity']:
    """Every admin, plus the managers of the branch that owns `book`."""
    book_branch_name = resolve_branch_name(book.branch_id, branches)
    targets = []
    for user in users:
        if user.role == UserRole.ADMIN:
            targets.append(user)
        elif (user.role == UserRole.MANAGER and user.branch
              and book_branch_name is not None and user.branch == book_branch_name):
            targets.append(user)
    return targets


def unread_alert_keys(notifications: List['NotificationEntity']) -> Set[AlertKey]:
    return {
        (n.user_id, n.metadata.type.value, n.metadata.cheque_book_id)
        for n in notifications
        if not n.read and n.metadata is not None
    }


class StockAlertManager:
    """
    Raises one unread low-stock warning per (chequebook, user) pair. A pair is
    alerted again only after the user has marked the previous warning read.
    """

    def __init__(self,
                 cheques_repository: 'ChequesRepository',
                 chequebooks_repository: 'ChequebooksRepository',
                 branches_repository: 'BranchesRepository',
                 users_repository: 'UsersRepository',
                 settings_repository: 'SettingsRepository',
                 notification_manager: 'NotificationManager'):
        self.cheques_repository = cheques_repository
        self.chequebooks_repository = chequebooks_repository
        self.branches_repository = branches_repository
        self.users_repository = users_repository
        self.settings_repository = settings_repository
        self.notification_manager = notification_manager

    def check_and_trigger_stock_alerts(self) -> int:
        """Returns the number of notifications created."""
        books = self.chequebooks_repository.get_all()
        settings = self.settings_repository.get_notification_settings()
        users = self.users_repository.get_all()
        branches = self.branches_repository.get_all()
        cheque_book_refs = self.cheques_repository.get_chequebook_refs()
        existing = unread_alert_keys(self.notification_manager.list())

        created = 0
        for book in books:
            if book.status != ChequebookStatus.ACTIVE:
                continue

            usage = chequebook_usage(book.name, cheque_book_refs, books)
            remaining = usage.total - usage.used
            threshold = (book.low_stock_threshold if book.low_stock_threshold is not None
                         else settings.default_stock_threshold)
            if remaining > threshold:
                continue

            logger.debug(f"Chequebook '{book.name}' low: {remaining} remaining, threshold {threshold}.")
            for user in alert_targets(book, users, branches):
                key = (user.id, NotificationMetadataType.STOCK_LOW.value, book.id)
                if key in existing:
                    continue
                self.notification_manager.create(
                    user_id=user.id,
                    title=LOW_STOCK_TITLE,
                    message=f'Chequebook "{book.name}" has only {remaining} pages remaining (Threshold: {threshold}).',
                    notification_type=NotificationType.WARNING,
                    metadata=NotificationMetadata(type=NotificationMetadataType.STOCK_LOW,
                                                  cheque_book_id=book.id),
                )
                existing.add(key)
                created += 1

        if created:
            logger.info(f"Stock check raised {created} low-stock notification(s).")
        return created
