# chequetrack/data_access/local_store.py

import json
import logging
from typing import Any, Optional
from chequetrack.data_access.database_manager import DatabaseManager

logger = logging.getLogger(__name__)

class LocalStore:
    """
    Key-value view over the sqlite `storage` table. Every value is a JSON document.
    """
    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self.table_name = "storage"

    def load(self, key: str) -> Optional[Any]:
        """Returns the decoded document under `key`, or None when absent or unreadable."""
        row = self.db_manager.fetch_one(f"SELECT value FROM {self.table_name} WHERE key = ?", (key,))
        if row is None:
            return None
        try:
            return json.loads(row["value"])
        except (ValueError, TypeError) as e:
            logger.warning(f"Stored value for key '{key}' is not valid JSON, treating it as absent: {e}")
            return None

    def store(self, key: str, value: Any) -> None:
        payload = json.dumps(value, ensure_ascii=False)
        self.db_manager.execute_query(
            f"INSERT OR REPLACE INTO {self.table_name} (key, value) VALUES (?, ?)", (key, payload)
        )
        logger.debug(f"Stored key '{key}' ({len(payload)} bytes).")
