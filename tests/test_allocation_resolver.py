from datetime import date
from decimal import Decimal

from chequetrack.business_logic.allocation_resolver import (
    amount_for, belongs_to_branch, build_splits, branch_display_name, resolve_branch_name, splits_total,
)
from chequetrack.business_logic.entities import BranchEntity, ChequeEntity, ChequeSplit
from chequetrack.constants import MULTI_BRANCH, UNASSIGNED_BRANCH


def make_cheque(amount="300", branch=MULTI_BRANCH, splits=None):
    return ChequeEntity(cheque_number="000001", amount=Decimal(amount), payee_name="Payee",
                        date=date(2026, 1, 15), branch=branch, splits=splits or [])


def test_split_amounts_add_up_to_cheque_total():
    cheque = make_cheque("300.750", splits=[ChequeSplit("A", Decimal("100.250")),
                                            ChequeSplit("B", Decimal("150.500")),
                                            ChequeSplit("C", Decimal("50"))])
    branches = ["A", "B", "C", "D"]

    assert sum(amount_for(cheque, b) for b in branches) == cheque.amount
    assert splits_total(cheque) == cheque.amount


def test_unsplit_cheque_is_fully_attributed_to_primary_branch():
    cheque = make_cheque("1000", branch="A")

    assert amount_for(cheque, "A") == Decimal("1000")
    assert amount_for(cheque, "B") == Decimal("0")


def test_unreferenced_branch_resolves_to_zero():
    cheque = make_cheque(splits=[ChequeSplit("A", Decimal("100")), ChequeSplit("B", Decimal("200"))])

    assert amount_for(cheque, "Nowhere") == Decimal("0")
    assert amount_for(cheque, "") == Decimal("0")


def test_split_cheque_ignores_primary_label():
    # "Multi" is a label, not a branch that receives money
    cheque = make_cheque(splits=[ChequeSplit("A", Decimal("100")), ChequeSplit("B", Decimal("200"))])

    assert amount_for(cheque, MULTI_BRANCH) == Decimal("0")


def test_belongs_to_branch_checks_primary_and_splits():
    split = make_cheque(splits=[ChequeSplit("A", Decimal("100")), ChequeSplit("B", Decimal("200"))])
    direct = make_cheque(branch="C")

    assert belongs_to_branch(split, "B")
    assert not belongs_to_branch(split, "C")
    assert belongs_to_branch(direct, "C")


def test_build_splits_derives_primary_branch():
    branch, splits = build_splits({"A": Decimal("300")})
    assert branch == "A"
    assert splits == [ChequeSplit("A", Decimal("300"))]

    branch, splits = build_splits({"A": 100, "B": "200"})
    assert branch == MULTI_BRANCH
    assert [s.branch for s in splits] == ["A", "B"]
    assert splits[1].amount == Decimal("200")


def test_dangling_branch_id_falls_back_to_unassigned():
    branches = [BranchEntity(id="b1", name="Menwar 01")]

    assert resolve_branch_name("b1", branches) == "Menwar 01"
    assert resolve_branch_name("gone", branches) is None
    assert resolve_branch_name(None, branches) is None
    assert branch_display_name("gone", branches) == UNASSIGNED_BRANCH
