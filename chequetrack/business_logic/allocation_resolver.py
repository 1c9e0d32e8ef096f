# chequetrack/business_logic/allocation_resolver.py
"""
Branch attribution of cheque amounts.

Cheques reference branches by *name* (primary branch and splits) while chequebooks
reference them by *id*. Every name-keyed join goes through this module so that
moving to id-based references only has to change these functions. Renaming a
branch orphans the historical cheques that still carry the old name.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING

from chequetrack.business_logic.entities.cheque_entity import ChequeSplit
from chequetrack.constants import MULTI_BRANCH, UNASSIGNED_BRANCH

if TYPE_CHECKING:
    from chequetrack.business_logic.entities.cheque_entity import ChequeEntity
    from chequetrack.business_logic.entities.branch_entity import BranchEntity

ZERO = Decimal("0")


def amount_for(cheque: 'ChequeEntity', branch_name: str) -> Decimal:
    """Amount of `cheque` attributable to `branch_name`; zero when the cheque does not touch it."""
    if cheque.splits:
        for split in cheque.splits:
            if split.branch == branch_name:
                return split.amount
        return ZERO
    return cheque.amount if cheque.branch == branch_name else ZERO


def belongs_to_branch(cheque: 'ChequeEntity', branch_name: str) -> bool:
    if cheque.branch == branch_name:
        return True
    return any(split.branch == branch_name for split in cheque.splits)


def resolve_branch_name(branch_id: Optional[str], branches: Iterable['BranchEntity']) -> Optional[str]:
    """Name of the branch with `branch_id`, or None when the id is unset or dangling."""
    if not branch_id:
        return None
    for branch in branches:
        if branch.id == branch_id:
            return branch.name
    return None


def branch_display_name(branch_id: Optional[str], branches: Iterable['BranchEntity']) -> str:
    return resolve_branch_name(branch_id, branches) or UNASSIGNED_BRANCH


def build_splits(allocations: Dict[str, Decimal]) -> Tuple[str, List[ChequeSplit]]:
    """
    Turns a {branch name: amount} allocation into (primary branch label, splits).
    Insertion order of `allocations` is kept.
    """
    splits = [ChequeSplit(branch=name, amount=Decimal(str(amount))) for name, amount in allocations.items()]
    if len(splits) == 1:
        return splits[0].branch, splits
    return MULTI_BRANCH, splits


def splits_total(cheque: 'ChequeEntity') -> Decimal:
    return sum((split.amount for split in cheque.splits), ZERO)
