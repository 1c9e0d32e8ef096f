# chequetrack/business_logic/sync_manager.py

from typing import Any, Dict, TYPE_CHECKING

from chequetrack.constants import SyncAction

if TYPE_CHECKING:
    from chequetrack.services.sheets_client import SheetsSyncClient
    from chequetrack.services.outbox import BestEffortOutbox
    from chequetrack.data_access.cheques_repository import ChequesRepository
    from chequetrack.data_access.branches_repository import BranchesRepository
    from chequetrack.data_access.chequebooks_repository import ChequebooksRepository
    from chequetrack.data_access.users_repository import UsersRepository

import logging
logger = logging.getLogger(__name__)

class SyncManager:
    """
    Two directions, neither transactional:
    pushes go through the best-effort outbox after the local write has happened;
    `load_from_backend` overwrites the local collections with whatever the endpoint returns.
    """

    def __init__(self,
                 client: 'SheetsSyncClient',
                 outbox: 'BestEffortOutbox',
                 cheques_repository: 'ChequesRepository',
                 branches_repository: 'BranchesRepository',
                 chequebooks_repository: 'ChequebooksRepository',
                 users_repository: 'UsersRepository'):
        self.client = client
        self.outbox = outbox
        # response key -> repository; notifications, audit log and settings stay local
        self._pull_targets = {
            "cheques": cheques_repository,
            "branches": branches_repository,
            "chequeBooks": chequebooks_repository,
            "users": users_repository,
        }

    def push(self, action: SyncAction, payload: Dict[str, Any]) -> None:
        """Never blocks, never raises."""
        if not self.client.is_configured():
            logger.debug(f"Sync disabled, not pushing {action.value}.")
            return
        self.outbox.enqueue(action.value, payload)

    def load_from_backend(self) -> bool:
        """
        Pulls every collection and replaces the local copy wholesale. Local edits made
        since the last push are lost. Returns False when nothing could be fetched.
        """
        data = self.client.fetch_all()
        if data is None:
            logger.warning("Load from backend failed or endpoint not configured.")
            return False
        for key, repository in self._pull_targets.items():
            records = data.get(key)
            if records is None:
                continue
            if not isinstance(records, list):
                logger.warning(f"Ignoring '{key}' from backend: expected a list, got {type(records).__name__}.")
                continue
            repository.replace_all(records)
        logger.info("Local data replaced from backend.")
        return True
