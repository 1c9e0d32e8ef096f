import json
from unittest.mock import MagicMock

import requests

from chequetrack.constants import SyncAction
from chequetrack.main_app import ChequeTrackApp
from chequetrack.services.sheets_client import SheetsSyncClient

from conftest import RecordingSender, SYNC_URL, book_record, cheque_record, user_record


def backend_payload():
    return {
        "cheques": [cheque_record("r1", amount=10, branch="Remote")],
        "branches": [{"id": "rb", "name": "Remote"}],
        "chequeBooks": [book_record("rk", "Remote Book", total=20, branch_id="rb")],
        "users": [user_record("ru", "ADMIN")],
        "notifications": [{"id": "ignored"}],
    }


def test_pull_overwrites_local_collections(org):
    org.cheques_repository.replace_all([cheque_record("local")])
    org.client.session.get.return_value.json.return_value = backend_payload()

    assert org.sync_manager.load_from_backend()

    assert [c.id for c in org.cheque_manager.get_all_cheques()] == ["r1"]
    assert [b.name for b in org.branch_manager.get_all_branches()] == ["Remote"]
    assert [b.id for b in org.chequebook_manager.get_all_chequebooks()] == ["rk"]
    assert [u.id for u in org.user_manager.get_all_users()] == ["ru"]
    org.client.session.get.assert_called_once_with(SYNC_URL, params={"action": "getAll"},
                                                   timeout=org.client.timeout)


def test_pull_keeps_collections_missing_from_the_response(org):
    org.cheques_repository.replace_all([cheque_record("local")])
    org.client.session.get.return_value.json.return_value = {"branches": [{"id": "rb", "name": "Remote"}]}

    assert org.sync_manager.load_from_backend()

    assert [c.id for c in org.cheque_manager.get_all_cheques()] == ["local"]
    assert [b.name for b in org.branch_manager.get_all_branches()] == ["Remote"]


def test_pull_failure_leaves_local_data(org):
    org.cheques_repository.replace_all([cheque_record("local")])
    org.client.session.get.side_effect = requests.exceptions.ConnectionError("offline")

    assert org.sync_manager.load_from_backend() is False
    assert [c.id for c in org.cheque_manager.get_all_cheques()] == ["local"]


def test_non_object_body_is_a_failed_fetch():
    session = MagicMock()
    session.get.return_value.json.return_value = ["not", "an", "object"]
    client = SheetsSyncClient(url_provider=lambda: SYNC_URL, session=session)

    assert client.fetch_all() is None


def test_push_posts_plain_text_json():
    session = MagicMock()
    client = SheetsSyncClient(url_provider=lambda: SYNC_URL, session=session, timeout=3)

    client.push("DELETE_CHEQUE", {"id": "c1"})

    args, kwargs = session.post.call_args
    assert args == (SYNC_URL,)
    assert kwargs["headers"] == {"Content-Type": "text/plain"}
    assert kwargs["timeout"] == 3
    assert json.loads(kwargs["data"].decode("utf-8")) == {"action": "DELETE_CHEQUE", "id": "c1"}
    session.post.return_value.raise_for_status.assert_called_once()


def test_unconfigured_client_makes_no_requests():
    session = MagicMock()
    client = SheetsSyncClient(url_provider=lambda: "  ", session=session)

    assert not client.is_configured()
    assert client.fetch_all() is None
    client.push("SAVE_USER", {"user": {}})
    session.get.assert_not_called()
    session.post.assert_not_called()


def test_push_is_skipped_without_endpoint(db_path):
    sender = RecordingSender()
    client = SheetsSyncClient(url_provider=lambda: "", session=MagicMock())
    app = ChequeTrackApp(db_path=db_path, sender=sender, client=client)
    try:
        app.sync_manager.push(SyncAction.DELETE_BRANCH, {"id": "b1"})
        assert app.outbox.flush(timeout=5)
        assert sender.calls == []
    finally:
        app.shutdown()


def test_start_pulls_then_checks_stock(app):
    payload = backend_payload()
    payload["cheques"] = [cheque_record(f"r{i}", book="Remote Book") for i in range(18)]
    app.notifications_repository.replace_all([])
    app.client.session.get.return_value.json.return_value = payload

    assert app.start()

    alerts = app.notification_manager.list("ru")
    assert len(alerts) == 1
    assert alerts[0].message == 'Chequebook "Remote Book" has only 2 pages remaining (Threshold: 5).'


def test_start_without_endpoint_uses_local_data(db_path):
    client = SheetsSyncClient(url_provider=lambda: "", session=MagicMock())
    app = ChequeTrackApp(db_path=db_path, sender=RecordingSender(), client=client)
    try:
        assert app.start() is False
        client.session.get.assert_not_called()
        assert len(app.cheque_manager.get_all_cheques()) == 4
    finally:
        app.shutdown()


def test_outbox_pushes_through_its_own_session(db_path):
    app = ChequeTrackApp(db_path=db_path)
    try:
        assert app.outbox.sender == app.push_client.push
        assert app.push_client.session is not app.client.session
        assert app.push_client.url_provider == app.settings_manager.get_script_url
    finally:
        app.shutdown()
