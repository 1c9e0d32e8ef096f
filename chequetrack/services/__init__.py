# chequetrack/services/__init__.py
from .sheets_client import SheetsSyncClient
from .outbox import BestEffortOutbox
