import threading
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from chequetrack.main_app import ChequeTrackApp
from chequetrack.data_access.database_manager import DatabaseManager
from chequetrack.data_access.local_store import LocalStore
from chequetrack.services.sheets_client import SheetsSyncClient
from chequetrack.utils import date_converter

SYNC_URL = "https://script.example.test/macros/s/abc/exec"


class RecordingSender:
    """Stands in for the HTTP push; remembers every (action, payload) it is handed."""

    def __init__(self):
        self.calls = []
        self._lock = threading.Lock()

    def __call__(self, action, payload):
        with self._lock:
            self.calls.append((action, payload))

    def actions(self):
        return [action for action, _ in self.calls]


@pytest.fixture()
def db_path(tmp_path):
    return str(tmp_path / "chequetrack_test.db")


@pytest.fixture()
def local_store(db_path):
    db_manager = DatabaseManager(db_path)
    db_manager.create_tables()
    return LocalStore(db_manager)


@pytest.fixture()
def sender():
    return RecordingSender()


@pytest.fixture()
def app(db_path, sender):
    client = SheetsSyncClient(url_provider=lambda: SYNC_URL, session=MagicMock())
    application = ChequeTrackApp(db_path=db_path, sender=sender, client=client)
    yield application
    application.shutdown()


def iso_day(days_from_today=0):
    return (date_converter.today() + timedelta(days=days_from_today)).isoformat()


def cheque_record(cheque_id, amount=100, branch="A", days=1, status="PENDING", book=None, splits=None):
    record = {
        "id": cheque_id,
        "chequeNumber": f"{cheque_id:0>6}",
        "amount": amount,
        "payeeName": "Payee",
        "date": iso_day(days),
        "status": status,
        "bankName": "Bank",
        "branch": branch,
    }
    if book is not None:
        record["chequeBookRef"] = book
    if splits is not None:
        record["splits"] = splits
    return record


def book_record(book_id, name, total=50, branch_id=None, threshold=None, status="ACTIVE"):
    record = {"id": book_id, "name": name, "totalLeaves": total, "status": status}
    if branch_id is not None:
        record["branchId"] = branch_id
    if threshold is not None:
        record["lowStockThreshold"] = threshold
    return record


def user_record(user_id, role, branch=None):
    record = {"id": user_id, "name": f"User {user_id}", "email": f"{user_id}@example.test", "role": role}
    if branch is not None:
        record["branch"] = branch
    return record


@pytest.fixture()
def org(app):
    """
    Two branches, an admin, a manager per branch and a plain user, no cheques,
    no chequebooks and no notifications.
    """
    app.branches_repository.replace_all([{"id": "bA", "name": "A"}, {"id": "bB", "name": "B"}])
    app.users_repository.replace_all([
        user_record("admin", "ADMIN", "A"),
        user_record("mgrA", "MANAGER", "A"),
        user_record("mgrB", "MANAGER", "B"),
        user_record("clerk", "USER", "A"),
    ])
    app.cheques_repository.replace_all([])
    app.chequebooks_repository.replace_all([])
    app.notifications_repository.replace_all([])
    return app
