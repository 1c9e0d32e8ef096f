# chequetrack/main_app.py
import sys
import logging
from typing import Optional

# --- Configuration ---
from chequetrack.config import DATABASE_PATH, configure_logging

# --- Data Access Layer (DAL) ---
from chequetrack.data_access.database_manager import DatabaseManager
from chequetrack.data_access.local_store import LocalStore
from chequetrack.data_access.cheques_repository import ChequesRepository
from chequetrack.data_access.branches_repository import BranchesRepository
from chequetrack.data_access.chequebooks_repository import ChequebooksRepository
from chequetrack.data_access.users_repository import UsersRepository
from chequetrack.data_access.notifications_repository import NotificationsRepository
from chequetrack.data_access.audit_log_repository import AuditLogRepository
from chequetrack.data_access.settings_repository import SettingsRepository

# --- Business Logic Layer (BLL) ---
from chequetrack.business_logic.notification_manager import NotificationManager
from chequetrack.business_logic.audit_log_manager import AuditLogManager
from chequetrack.business_logic.stock_alert_manager import StockAlertManager
from chequetrack.business_logic.sync_manager import SyncManager
from chequetrack.business_logic.cheque_manager import ChequeManager
from chequetrack.business_logic.branch_manager import BranchManager
from chequetrack.business_logic.chequebook_manager import ChequebookManager
from chequetrack.business_logic.user_manager import UserManager
from chequetrack.business_logic.settings_manager import SettingsManager
from chequetrack.business_logic.report_manager import ReportManager

# --- Services ---
from chequetrack.services.sheets_client import SheetsSyncClient
from chequetrack.services.outbox import BestEffortOutbox, Sender

logger = logging.getLogger(__name__)


class ChequeTrackApp:
    """
    Composition root: one instance per process. Builds the store, every repository and
    every manager, and hands them to each other explicitly.
    """

    def __init__(self, db_path: str = DATABASE_PATH,
                 sender: Optional[Sender] = None,
                 client: Optional[SheetsSyncClient] = None):
        logger.info("Initializing storage...")
        self.db_manager = DatabaseManager(db_path)
        self.db_manager.create_tables()
        self.local_store = LocalStore(self.db_manager)

        self.cheques_repository = ChequesRepository(self.local_store)
        self.branches_repository = BranchesRepository(self.local_store)
        self.chequebooks_repository = ChequebooksRepository(self.local_store)
        self.users_repository = UsersRepository(self.local_store)
        self.notifications_repository = NotificationsRepository(self.local_store)
        self.audit_log_repository = AuditLogRepository(self.local_store)
        self.settings_repository = SettingsRepository(self.local_store)

        self.settings_manager = SettingsManager(self.settings_repository)
        self.client = client or SheetsSyncClient(url_provider=self.settings_manager.get_script_url)
        # the outbox worker thread pushes through its own session
        self.push_client = SheetsSyncClient(url_provider=self.client.url_provider, timeout=self.client.timeout)
        self.outbox = BestEffortOutbox(sender=sender or self.push_client.push,
                                       on_failure=self._on_push_failure)

        self.notification_manager = NotificationManager(self.notifications_repository)
        self.audit_log_manager = AuditLogManager(self.audit_log_repository)
        self.sync_manager = SyncManager(self.client, self.outbox,
                                        self.cheques_repository, self.branches_repository,
                                        self.chequebooks_repository, self.users_repository)
        self.stock_alert_manager = StockAlertManager(self.cheques_repository,
                                                     self.chequebooks_repository,
                                                     self.branches_repository,
                                                     self.users_repository,
                                                     self.settings_repository,
                                                     self.notification_manager)
        self.cheque_manager = ChequeManager(self.cheques_repository,
                                            self.stock_alert_manager,
                                            self.sync_manager)
        self.branch_manager = BranchManager(self.branches_repository,
                                            self.audit_log_manager,
                                            self.sync_manager)
        self.chequebook_manager = ChequebookManager(self.chequebooks_repository,
                                                    self.audit_log_manager,
                                                    self.stock_alert_manager,
                                                    self.sync_manager)
        self.user_manager = UserManager(self.users_repository,
                                        self.audit_log_manager,
                                        self.sync_manager)
        self.report_manager = ReportManager(self.cheques_repository,
                                            self.branches_repository,
                                            self.chequebooks_repository)

    @staticmethod
    def _on_push_failure(action: str, payload, exc: Exception) -> None:
        logger.warning(f"Remote push {action} was not delivered: {exc}")

    def start(self) -> bool:
        """
        Start-up sequence: pull from the sync endpoint when one is configured, then run
        the stock check once. Returns whether the pull succeeded.
        """
        synced = False
        if self.client.is_configured():
            synced = self.sync_manager.load_from_backend()
            if not synced:
                logger.warning("Could not sync with backend, continuing with local data. Please retry.")
        self.stock_alert_manager.check_and_trigger_stock_alerts()
        return synced

    def shutdown(self) -> None:
        self.outbox.flush(timeout=10)
        self.outbox.close()


def main(argv=None) -> int:
    configure_logging()
    app = ChequeTrackApp()
    try:
        app.start()
        for metric in app.report_manager.get_branch_metrics():
            logger.info(f"{metric.name}: outstanding={metric.outstanding} overdue={metric.overdue} "
                        f"upcoming={metric.upcoming} pending={metric.pending_count}")
    except Exception as e:
        logger.error(f"FATAL: Could not start application: {e}", exc_info=True)
        return 1
    finally:
        app.shutdown()
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
