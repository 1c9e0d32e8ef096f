from datetime import timedelta
from decimal import Decimal

import pytest

from chequetrack.constants import ChequeStatus, MULTI_BRANCH
from chequetrack.utils import date_converter

from conftest import book_record, cheque_record


@pytest.fixture()
def admin(org):
    return org.user_manager.get_user_by_id("admin")


@pytest.fixture()
def clerk(org):
    return org.user_manager.get_user_by_id("clerk")


def test_create_cheque_is_pending_and_pushed(org, sender, admin):
    due = date_converter.today() + timedelta(days=3)

    cheque = org.cheque_manager.create_cheque(admin, Decimal("1500.250"), due,
                                              cheque_number="000901", payee_name="Acme",
                                              branch="A", cheque_book_ref="Book1")

    stored = org.cheque_manager.get_cheque_by_id(cheque.id)
    assert stored.status == ChequeStatus.PENDING
    assert stored.amount == Decimal("1500.250")
    assert stored.created_by == "admin"
    assert stored.created_at is not None

    assert org.outbox.flush(timeout=5)
    action, payload = sender.calls[-1]
    assert action == "SAVE_CHEQUE"
    assert payload["cheque"]["id"] == cheque.id
    assert payload["cheque"]["chequeBookRef"] == "Book1"


def test_create_cheque_with_allocations_sets_split_branch_label(org, admin):
    due = date_converter.today()

    split = org.cheque_manager.create_cheque(admin, Decimal("300"), due,
                                             allocations={"A": Decimal("100"), "B": Decimal("200")})
    single = org.cheque_manager.create_cheque(admin, Decimal("50"), due, allocations={"B": Decimal("50")})

    assert split.branch == MULTI_BRANCH
    assert [(s.branch, s.amount) for s in split.splits] == [("A", Decimal("100")), ("B", Decimal("200"))]
    assert single.branch == "B"


def test_create_cheque_applies_form_defaults(org, admin):
    cheque = org.cheque_manager.create_cheque(admin, Decimal("0"), date_converter.today())

    assert cheque.cheque_number == "000000"
    assert cheque.payee_name == "Unknown"
    assert cheque.branch == MULTI_BRANCH


def test_negative_amount_is_rejected(org, admin):
    with pytest.raises(ValueError):
        org.cheque_manager.create_cheque(admin, Decimal("-1"), date_converter.today())


def test_split_mismatch_is_saved_with_a_warning(org, admin, caplog):
    cheque = org.cheque_manager.create_cheque(admin, Decimal("300"), date_converter.today(),
                                              allocations={"A": Decimal("100")})

    assert org.cheque_manager.get_cheque_by_id(cheque.id) is not None
    assert "differs from amount" in caplog.text


def test_change_status_stamps_time_and_appends_notes(org):
    org.cheques_repository.replace_all([cheque_record("c1")])

    org.cheque_manager.change_status("c1", ChequeStatus.BOUNCED, note="Insufficient funds")
    cheque = org.cheque_manager.change_status("c1", ChequeStatus.CLEARED, note="Re-presented")

    assert cheque.status == ChequeStatus.CLEARED
    assert cheque.last_status_change is not None
    lines = cheque.notes.split("\n")
    assert len(lines) == 2
    assert lines[0].endswith("Rejection Reason: Insufficient funds")
    assert lines[1].endswith("Status Note: Re-presented")
    assert lines[0].startswith("[")


def test_change_status_of_unknown_cheque_raises(org):
    with pytest.raises(ValueError):
        org.cheque_manager.change_status("missing", ChequeStatus.CLEARED)


def test_batch_status_update_skips_unknown_ids(org):
    org.cheques_repository.replace_all([cheque_record("c1"), cheque_record("c2")])

    updated = org.cheque_manager.batch_update_status(["c1", "missing", "c2"], ChequeStatus.CANCELLED)

    assert updated == 2
    assert {c.status for c in org.cheque_manager.get_all_cheques()} == {ChequeStatus.CANCELLED}


def test_plain_user_cannot_delete(org, clerk):
    org.cheques_repository.replace_all([cheque_record("c1")])

    with pytest.raises(PermissionError):
        org.cheque_manager.delete_cheque("c1", clerk)
    assert org.cheque_manager.get_cheque_by_id("c1") is not None


def test_delete_pushes_and_frees_a_leaf(org, sender, admin):
    org.chequebooks_repository.replace_all([book_record("k1", "Book1", total=3, threshold=0)])
    org.cheques_repository.replace_all([cheque_record(f"c{i}", book="Book1") for i in range(3)])

    org.cheque_manager.delete_cheque("c0", admin)

    assert org.report_manager.get_chequebook_usage("Book1").remaining == 1
    assert org.outbox.flush(timeout=5)
    assert sender.calls[-1] == ("DELETE_CHEQUE", {"id": "c0"})


def test_saving_a_cheque_triggers_stock_check(org, admin):
    org.chequebooks_repository.replace_all([book_record("k1", "Book1", total=3, threshold=1)])
    org.cheques_repository.replace_all([cheque_record("c0", book="Book1")])

    assert org.notification_manager.list("admin") == []
    org.cheque_manager.create_cheque(admin, Decimal("10"), date_converter.today(), cheque_book_ref="Book1")

    alerts = org.notification_manager.list("admin")
    assert len(alerts) == 1
    assert alerts[0].metadata.cheque_book_id == "k1"


def test_import_cheques_is_one_batch(org, sender, clerk):
    rows = [
        {"cheque_number": "1", "amount": Decimal("10"), "payee_name": "X",
         "date": date_converter.today(), "branch": None, "cheque_book_ref": "Book1"},
        {"cheque_number": "2", "amount": Decimal("20"), "payee_name": "Y",
         "date": date_converter.today(), "branch": "B"},
    ]

    created = org.cheque_manager.import_cheques(rows, clerk)

    assert [c.branch for c in created] == ["A", "B"]
    assert all(c.status == ChequeStatus.PENDING and c.created_by == "clerk" for c in created)
    assert len(org.cheque_manager.get_all_cheques()) == 2
    assert org.outbox.flush(timeout=5)
    batches = [p for a, p in sender.calls if a == "SAVE_BATCH_CHEQUES"]
    assert len(batches) == 1
    assert [c["chequeNumber"] for c in batches[0]["cheques"]] == ["1", "2"]
    assert "SAVE_CHEQUE" not in sender.actions()


def test_import_of_nothing_does_nothing(org, sender, clerk):
    assert org.cheque_manager.import_cheques([], clerk) == []
    assert org.outbox.flush(timeout=5)
    assert sender.calls == []
