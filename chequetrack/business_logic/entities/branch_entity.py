# chequetrack/business_logic/entities/branch_entity.py
from dataclasses import dataclass
from .base_entity import BaseEntity

@dataclass
class BranchEntity(BaseEntity):
    name: str
