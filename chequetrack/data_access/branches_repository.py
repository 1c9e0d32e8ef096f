# chequetrack/data_access/branches_repository.py

from typing import Dict, Any, List
from chequetrack.data_access.base_repository import BaseRepository
from chequetrack.data_access.local_store import LocalStore
from chequetrack.business_logic.entities.branch_entity import BranchEntity
from chequetrack.constants import DEFAULT_BRANCHES
from chequetrack.config import BRANCHES_KEY

class BranchesRepository(BaseRepository[BranchEntity]):
    def __init__(self, local_store: LocalStore):
        super().__init__(local_store=local_store,
                         model_type=BranchEntity,
                         storage_key=BRANCHES_KEY)

    def _default_records(self) -> List[Dict[str, Any]]:
        return [{"id": self.new_id(), "name": name} for name in DEFAULT_BRANCHES]
