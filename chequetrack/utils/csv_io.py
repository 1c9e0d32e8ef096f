# chequetrack/utils/csv_io.py

import csv
import io
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING

from chequetrack.utils import date_converter

if TYPE_CHECKING:
    from chequetrack.business_logic.entities.cheque_entity import ChequeEntity
    from chequetrack.business_logic.entities.user_entity import UserEntity

IMPORT_TEMPLATE_HEADER = ["Cheque Number", "Amount", "Payee Name", "Date (YYYY-MM-DD)",
                          "Bank Name", "Branch", "Chequebook", "Notes"]

EXPORT_HEADER = ["ID", "Cheque Number", "Payee", "Amount", "Date", "Status",
                 "Last Status Change", "Branch", "Split Details", "Chequebook"]


def import_template() -> str:
    """Header line plus one example row, offered as a download to fill in."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(IMPORT_TEMPLATE_HEADER)
    writer.writerow(["000123", "1500.000", "Example Supplier", date_converter.today().isoformat(),
                     "Bank Muscat", "Menwar 01", "Menwar Chequebook", "Monthly rent"])
    return buffer.getvalue()


def parse_cheque_csv(text: str, current_user: Optional['UserEntity'] = None) -> Tuple[List[Dict[str, Any]], List[str]]:
    """
    Parses an import file. The first non-blank line is the header and is skipped.
    Returns (rows, errors); an invalid row is reported as 'Row N: ...' and left out.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    rows: List[Dict[str, Any]] = []
    errors: List[str] = []
    default_branch = current_user.branch if current_user is not None else None

    for index, cols in enumerate(csv.reader(lines[1:]), start=2):
        cols = [c.strip() for c in cols]
        if len(cols) < 4:
            errors.append(f"Row {index}: Insufficient columns. Expected at least 4.")
            continue
        cols += [""] * (8 - len(cols))
        cheque_no, amount_str, payee, date_str, bank, branch, book_ref, notes = cols[:8]

        if not cheque_no:
            errors.append(f"Row {index}: Missing Cheque Number")
            continue
        try:
            amount = Decimal(amount_str)
            if not amount.is_finite():
                raise InvalidOperation(amount_str)
        except InvalidOperation:
            errors.append(f"Row {index}: Invalid Amount")
            continue
        if not payee:
            errors.append(f"Row {index}: Missing Payee Name")
            continue
        due_date = date_converter.try_parse_date(date_str)
        if due_date is None:
            errors.append(f"Row {index}: Invalid Date format (YYYY-MM-DD required)")
            continue

        rows.append({
            "cheque_number": cheque_no,
            "amount": amount,
            "payee_name": payee.replace('"', ''),
            "date": due_date,
            "bank_name": bank,
            "branch": branch or default_branch,
            "cheque_book_ref": book_ref,
            "notes": notes,
        })
    return rows, errors


def export_cheques_csv(cheques: Iterable['ChequeEntity']) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(EXPORT_HEADER)
    for c in cheques:
        split_details = " | ".join(f"{s.branch}:{s.amount}" for s in c.splits)
        writer.writerow([
            c.id,
            c.cheque_number,
            c.payee_name,
            f"{c.amount:.3f}",
            c.date.isoformat() if isinstance(c.date, date) else c.date,
            c.status.value,
            date_converter.to_iso_timestamp(c.last_status_change) if c.last_status_change else "",
            c.branch,
            split_details,
            c.cheque_book_ref or "",
        ])
    return buffer.getvalue()


def export_file_name(today: Optional[date] = None) -> str:
    return f"cheques_export_{(today or date_converter.today()).isoformat()}.csv"
