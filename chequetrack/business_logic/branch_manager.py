# chequetrack/business_logic/branch_manager.py

from typing import Optional, List, TYPE_CHECKING
from chequetrack.business_logic.entities.branch_entity import BranchEntity
from chequetrack.utils.json_codec import dataclass_to_json
from chequetrack.constants import AuditAction, SyncAction

if TYPE_CHECKING:
    from chequetrack.data_access.branches_repository import BranchesRepository
    from chequetrack.business_logic.audit_log_manager import AuditLogManager
    from chequetrack.business_logic.sync_manager import SyncManager

import logging
logger = logging.getLogger(__name__)

class BranchManager:
    """
    Branch administration. Deleting a branch leaves cheques (by name) and chequebooks
    (by id) that reference it untouched.
    """
    def __init__(self,
                 branches_repository: 'BranchesRepository',
                 audit_log_manager: 'AuditLogManager',
                 sync_manager: 'SyncManager'):
        self.branches_repository = branches_repository
        self.audit_log_manager = audit_log_manager
        self.sync_manager = sync_manager

    def get_all_branches(self) -> List[BranchEntity]:
        return self.branches_repository.get_all()

    def add_branch(self, name: str) -> BranchEntity:
        return self.save_branch(BranchEntity(name=name))

    def save_branch(self, branch: BranchEntity) -> BranchEntity:
        if not branch.name or not branch.name.strip():
            raise ValueError("Branch name cannot be empty.")
        inserted = self.branches_repository.save(branch)
        if inserted:
            self.audit_log_manager.add_entry(AuditAction.ADDED_BRANCH, f"Added new branch: {branch.name}")
        else:
            self.audit_log_manager.add_entry(AuditAction.UPDATED_BRANCH, f"Updated branch: {branch.name}")
        self.sync_manager.push(SyncAction.SAVE_BRANCH, {"branch": dataclass_to_json(branch)})
        return branch

    def delete_branch(self, branch_id: str) -> Optional[BranchEntity]:
        removed = self.branches_repository.delete(branch_id)
        if removed is not None:
            self.audit_log_manager.add_entry(AuditAction.DELETED_BRANCH, f"Deleted branch: {removed.name}")
        self.sync_manager.push(SyncAction.DELETE_BRANCH, {"id": branch_id})
        return removed
