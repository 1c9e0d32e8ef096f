# chequetrack/business_logic/entities/user_entity.py
from dataclasses import dataclass, field
from typing import Optional
from .base_entity import BaseEntity
from chequetrack.constants import UserRole

@dataclass
class UserEntity(BaseEntity):
    name: str
    email: str
    role: UserRole
    password: Optional[str] = field(default=None, repr=False)
    branch: Optional[str] = field(default=None) # home branch *name*
    avatar_url: Optional[str] = field(default=None)
