"""Load transactions from JSON or CSV files.

Accepted field names (camelCase as exported by the web app, or snake_case):

    amount | rawAmount                     signed decimal, required
    date | rawDate | booked_at             ISO-8601 date or datetime, required
    majorCategoryRef | major_category_ref  name, or {"name": ...}
    majorCategory | major_category         legacy free text
    categoryRef | category_ref             name, or {"name": ...}
    category                               legacy free text
    origin, bank                           used by the equality filters
"""

from __future__ import annotations

import csv
import io
import json
import logging
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from cashflow.domain.cashflow import CashFlowTransaction, TransactionFileError
from cashflow.domain.shared.time import ensure_tz_aware

logger = logging.getLogger(__name__)

_ALIASES: dict[str, tuple[str, ...]] = {
    "amount": ("amount", "rawAmount", "raw_amount"),
    "booked_at": ("booked_at", "date", "rawDate", "raw_date"),
    "major_category_ref": ("major_category_ref", "majorCategoryRef"),
    "major_category": ("major_category", "majorCategory"),
    "category_ref": ("category_ref", "categoryRef"),
    "category": ("category",),
    "origin": ("origin",),
    "bank": ("bank",),
}


def _field(record: Mapping[str, Any], name: str) -> Any:
    for alias in _ALIASES[name]:
        if alias in record:
            return record[alias]
    return None


def _name(value: Any) -> str | None:
    if isinstance(value, Mapping):
        value = value.get("name")
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_transaction(
    record: Mapping[str, Any],
    source: str = "<record>",
    row: int | None = None,
) -> CashFlowTransaction:
    raw_amount = _field(record, "amount")
    if raw_amount is None or str(raw_amount).strip() == "":
        raise TransactionFileError(source, row, "missing amount")
    try:
        amount = Decimal(str(raw_amount).strip())
    except InvalidOperation as exc:
        raise TransactionFileError(source, row, f"bad amount {raw_amount!r}") from exc
    if amount.is_snan():
        raise TransactionFileError(source, row, f"bad amount {raw_amount!r}")

    raw_date = _field(record, "booked_at")
    if not raw_date:
        raise TransactionFileError(source, row, "missing date")
    try:
        booked_at = ensure_tz_aware(datetime.fromisoformat(str(raw_date).strip()))
    except ValueError as exc:
        raise TransactionFileError(source, row, f"bad date {raw_date!r}") from exc

    return CashFlowTransaction(
        amount=amount,
        booked_at=booked_at,
        major_category_ref=_name(_field(record, "major_category_ref")),
        major_category=_name(_field(record, "major_category")),
        category_ref=_name(_field(record, "category_ref")),
        category=_name(_field(record, "category")),
        origin=_name(_field(record, "origin")),
        bank=_name(_field(record, "bank")),
    )


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise TransactionFileError(str(path), None, "file is not valid UTF-8") from exc
    except OSError as exc:
        raise TransactionFileError(str(path), None, exc.strerror or "unreadable file") from exc


def _json_records(path: Path) -> list[Mapping[str, Any]]:
    text = _read_text(path)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TransactionFileError(str(path), None, f"invalid JSON ({exc.msg})") from exc

    if isinstance(payload, Mapping):
        payload = payload.get("transactions", [])
    if not isinstance(payload, list):
        raise TransactionFileError(str(path), None, "expected a list of transactions")
    return payload


def _csv_records(path: Path) -> list[Mapping[str, Any]]:
    return list(csv.DictReader(io.StringIO(_read_text(path), newline="")))


def load_transactions(path: Path | str) -> list[CashFlowTransaction]:
    """Read every transaction from a ``.json`` or ``.csv`` file."""
    path = Path(path)
    if not path.is_file():
        raise TransactionFileError(str(path), None, "file not found")

    suffix = path.suffix.lower()
    if suffix == ".json":
        records = _json_records(path)
    elif suffix == ".csv":
        records = _csv_records(path)
    else:
        raise TransactionFileError(str(path), None, f"unsupported file type {suffix!r}")

    transactions = []
    for row, record in enumerate(records, start=1):
        if not isinstance(record, Mapping):
            raise TransactionFileError(str(path), row, "expected an object")
        transactions.append(parse_transaction(record, str(path), row))

    logger.info("Loaded %d transactions from %s", len(transactions), path)
    return transactions
