# chequetrack/constants.py

from enum import Enum

# General
DATE_FORMAT = "%Y-%m-%d"

MULTI_BRANCH = "Multi"          # primary branch label of a cheque split across several branches
UNASSIGNED_BRANCH = "Unassigned"
DEFAULT_TOTAL_LEAVES = 50       # used when a cheque references a chequebook that does not exist
DEFAULT_STOCK_THRESHOLD = 5
AUDIT_LOG_LIMIT = 100
UPCOMING_WINDOW_DAYS = 5
DEFAULT_CHEQUE_NUMBER = "000000"
DEFAULT_PAYEE_NAME = "Unknown"


class ChequeStatus(Enum):
    PENDING = "PENDING"
    CLEARED = "CLEARED"
    BOUNCED = "BOUNCED"
    CANCELLED = "CANCELLED"


class ChequebookStatus(Enum):
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"


class UserRole(Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    USER = "USER"


class NotificationType(Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"


class NotificationMetadataType(Enum):
    STOCK_LOW = "STOCK_LOW"


class SyncAction(Enum):
    SAVE_CHEQUE = "SAVE_CHEQUE"
    SAVE_BATCH_CHEQUES = "SAVE_BATCH_CHEQUES"
    DELETE_CHEQUE = "DELETE_CHEQUE"
    SAVE_BRANCH = "SAVE_BRANCH"
    DELETE_BRANCH = "DELETE_BRANCH"
    SAVE_CHEQUEBOOK = "SAVE_CHEQUEBOOK"
    DELETE_CHEQUEBOOK = "DELETE_CHEQUEBOOK"
    SAVE_USER = "SAVE_USER"
    DELETE_USER = "DELETE_USER"


class AuditAction(Enum):
    ADDED_BRANCH = "Added Branch"
    UPDATED_BRANCH = "Updated Branch"
    DELETED_BRANCH = "Deleted Branch"
    ADDED_CHEQUEBOOK = "Added Chequebook"
    UPDATED_CHEQUEBOOK = "Updated Chequebook"
    DELETED_CHEQUEBOOK = "Deleted Chequebook"
    ADDED_USER = "Added User"
    UPDATED_USER = "Updated User"
    DELETED_USER = "Deleted User"


# Seed data written on first access of an empty collection
DEFAULT_BRANCHES = ["Menwar 01", "JN24", "Menwar 02"]

DEFAULT_CHEQUE_BOOKS = [
    {"name": "Menwar Chequebook", "totalLeaves": 50},
    {"name": "Zakia Chequebook", "totalLeaves": 50},
]

DEFAULT_USERS = [
    {
        "id": "u1",
        "name": "Alex Morgan",
        "email": "alex@chequeharmony.com",
        "password": "admin",
        "role": UserRole.ADMIN.value,
        "branch": "Menwar 01",
        "avatarUrl": "https://picsum.photos/200",
    },
    {
        "id": "u2",
        "name": "Sarah Manager",
        "email": "sarah@chequeharmony.com",
        "password": "user123",
        "role": UserRole.MANAGER.value,
        "branch": "JN24",
    },
    {
        "id": "u3",
        "name": "John User",
        "email": "john@chequeharmony.com",
        "password": "user123",
        "role": UserRole.USER.value,
        "branch": "Menwar 02",
    },
]
