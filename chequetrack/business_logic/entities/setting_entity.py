# chequetrack/business_logic/entities/setting_entity.py
from dataclasses import dataclass, field
from typing import Optional
from chequetrack.constants import DEFAULT_STOCK_THRESHOLD

@dataclass
class NotificationSettingsEntity: # single document, no id
    email_alerts: bool = False
    sms_alerts: bool = False
    default_stock_threshold: int = DEFAULT_STOCK_THRESHOLD
    script_url: Optional[str] = field(default=None)

@dataclass
class GeneralSettingsEntity:
    script_url: str = ""
