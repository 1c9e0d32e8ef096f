# chequetrack/business_logic/entities/base_entity.py
from dataclasses import dataclass, field
from typing import Optional

@dataclass
class BaseEntity:
    id: Optional[str] = field(default=None, kw_only=True) # opaque string id (uuid4 for new records)
