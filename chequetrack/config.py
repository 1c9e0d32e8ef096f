# chequetrack/config.py

import os
import logging
import logging.config

# --- Storage Configuration ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))  # repo root
DATA_DIR = os.getenv("CHEQUETRACK_DATA_DIR", os.path.join(BASE_DIR, "data"))
DB_NAME = os.getenv("CHEQUETRACK_DB_NAME", "chequetrack_data.db")
DATABASE_PATH = os.path.join(DATA_DIR, DB_NAME)

# Keys of the local key-value store, one JSON document per collection
STORAGE_KEY = "cheque_harmony_data"
SETTINGS_KEY = "cheque_harmony_settings"
NOTIF_SETTINGS_KEY = "cheque_harmony_notif_settings"
NOTIFICATIONS_KEY = "cheque_harmony_notifications"
BRANCHES_KEY = "cheque_harmony_branches"
BOOKS_KEY = "cheque_harmony_books"
USERS_KEY = "cheque_harmony_users"
AUDIT_KEY = "cheque_harmony_audit"

# --- Remote Sync Configuration ---
SCRIPT_URL = os.getenv("CHEQUETRACK_SCRIPT_URL", "")
HTTP_TIMEOUT = float(os.getenv("CHEQUETRACK_HTTP_TIMEOUT", "15"))

# --- Logging Configuration ---
LOGS_DIR = os.getenv("CHEQUETRACK_LOG_DIR", os.path.join(BASE_DIR, "logs"))
LOG_FILE_NAME = "app.log"
LOG_FILE_PATH = os.path.join(LOGS_DIR, LOG_FILE_NAME)

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': logging.INFO,
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': LOG_FILE_PATH,
            'maxBytes': 1024*1024*5,  # 5 MB
            'backupCount': 5,
            'level': logging.INFO,
            'encoding': 'utf-8',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': logging.DEBUG,
    },
}


def configure_logging() -> None:
    """Creates the log and data directories and applies LOGGING_CONFIG."""
    for directory in (LOGS_DIR, DATA_DIR):
        if not os.path.exists(directory):
            os.makedirs(directory)
    logging.config.dictConfig(LOGGING_CONFIG)
