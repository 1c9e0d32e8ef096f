# chequetrack/business_logic/__init__.py
from .notification_manager import NotificationManager
from .audit_log_manager import AuditLogManager
from .stock_alert_manager import StockAlertManager
from .sync_manager import SyncManager
from .cheque_manager import ChequeManager
from .branch_manager import BranchManager
from .chequebook_manager import ChequebookManager
from .user_manager import UserManager
from .settings_manager import SettingsManager
from .report_manager import ReportManager
