# chequetrack/business_logic/user_manager.py

from typing import Optional, List, TYPE_CHECKING
from chequetrack.business_logic.entities.user_entity import UserEntity
from chequetrack.utils.json_codec import dataclass_to_json
from chequetrack.constants import AuditAction, SyncAction, UserRole

if TYPE_CHECKING:
    from chequetrack.data_access.users_repository import UsersRepository
    from chequetrack.business_logic.audit_log_manager import AuditLogManager
    from chequetrack.business_logic.sync_manager import SyncManager

import logging
logger = logging.getLogger(__name__)

class UserManager:
    """Roles gate UI features only; nothing here is a security boundary."""
    def __init__(self,
                 users_repository: 'UsersRepository',
                 audit_log_manager: 'AuditLogManager',
                 sync_manager: 'SyncManager'):
        self.users_repository = users_repository
        self.audit_log_manager = audit_log_manager
        self.sync_manager = sync_manager

    def get_all_users(self) -> List[UserEntity]:
        return self.users_repository.get_all()

    def get_user_by_id(self, user_id: str) -> Optional[UserEntity]:
        return self.users_repository.get_by_id(user_id)

    def save_user(self, user: UserEntity) -> UserEntity:
        if not user.name or not user.email:
            raise ValueError("User name and email are required.")
        if not isinstance(user.role, UserRole):
            raise ValueError(f"Invalid user role: {user.role}")
        inserted = self.users_repository.save(user)
        if inserted:
            self.audit_log_manager.add_entry(AuditAction.ADDED_USER, f"Created new user: {user.name} ({user.role.value})")
        else:
            self.audit_log_manager.add_entry(AuditAction.UPDATED_USER, f"Updated details for user: {user.name}")
        self.sync_manager.push(SyncAction.SAVE_USER, {"user": dataclass_to_json(user)})
        return user

    def delete_user(self, user_id: str) -> Optional[UserEntity]:
        removed = self.users_repository.delete(user_id)
        if removed is not None:
            self.audit_log_manager.add_entry(AuditAction.DELETED_USER, f"Deleted user: {removed.name}")
        self.sync_manager.push(SyncAction.DELETE_USER, {"id": user_id})
        return removed
