# chequetrack/data_access/users_repository.py

import copy
from typing import Dict, Any, List
from chequetrack.data_access.base_repository import BaseRepository
from chequetrack.data_access.local_store import LocalStore
from chequetrack.business_logic.entities.user_entity import UserEntity
from chequetrack.constants import DEFAULT_USERS
from chequetrack.config import USERS_KEY

class UsersRepository(BaseRepository[UserEntity]):
    def __init__(self, local_store: LocalStore):
        super().__init__(local_store=local_store,
                         model_type=UserEntity,
                         storage_key=USERS_KEY)

    def _default_records(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(DEFAULT_USERS)
