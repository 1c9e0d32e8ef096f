# chequetrack/data_access/__init__.py

from .database_manager import DatabaseManager
from .local_store import LocalStore
from .base_repository import BaseRepository

from .cheques_repository import ChequesRepository
from .branches_repository import BranchesRepository
from .chequebooks_repository import ChequebooksRepository
from .users_repository import UsersRepository
from .notifications_repository import NotificationsRepository
from .audit_log_repository import AuditLogRepository
from .settings_repository import SettingsRepository
