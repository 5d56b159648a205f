"""Ledger script import domain service.

A ledger script is a JSON document describing users, groups and expenses:

    {
      "users": [{"id": "u1", "name": "Alice"}],
      "groups": [{"id": "trip", "name": "Trip", "members": ["u1", "u2"]}],
      "expenses": [
        {"description": "Dinner", "amount": "900", "payer": "u1",
         "kind": "equal", "group": "trip", "date": "2024-01-15"},
        {"description": "Taxi", "amount": 500, "payer": "u2",
         "kind": "unequal", "splits": {"u1": 400, "u2": 100}}
      ]
    }

Expenses are replayed in file order into the store. An expense either lists
its ``splits`` (user -> share or percent; for equal splits a list of user ids
is enough) or names a ``group`` whose members share it.
"""

import json
import logging
from pathlib import Path
from typing import Any

from splitledger.domain.errors import ValidationError
from splitledger.domain.expense import ExpenseService
from splitledger.domain.group import GroupService
from splitledger.domain.user import UserService
from splitledger.store.base import LedgerStore
from splitledger.utils.amount_parser import parse_amount, parse_percent
from splitledger.utils.date_parser import parse_date

logger = logging.getLogger(__name__)


class ScriptImportService:
    """Service for replaying ledger scripts into a store."""

    def __init__(self, store: LedgerStore):
        """Initialize script import service.

        Args:
            store: Ledger store instance
        """
        self.store = store
        self.user_service = UserService(store)
        self.group_service = GroupService(store)
        self.expense_service = ExpenseService(store)

    def import_script(self, script_path: str | Path) -> dict[str, Any]:
        """Import users, groups and expenses from a JSON ledger script.

        Args:
            script_path: Path to the script file

        Returns:
            Dict with import statistics:
            - imported: number of expenses applied
            - rejected: number of expenses rejected
            - errors: list of error messages for rejected expenses

        Raises:
            FileNotFoundError: If the script file doesn't exist
            ValidationError: If the document, a user or a group is malformed
        """
        path = Path(script_path)
        if not path.exists():
            raise FileNotFoundError(f"Ledger script not found: {script_path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Ledger script is not valid JSON: {e}")
        except UnicodeDecodeError as e:
            raise ValidationError(f"Ledger script is not valid UTF-8: {e}")

        return self.import_document(document)

    def import_document(self, document: Any) -> dict[str, Any]:
        """Import an already decoded ledger script. See ``import_script``."""
        if not isinstance(document, dict):
            raise ValidationError("Ledger script must be a JSON object")

        for index, entry in enumerate(document.get("users", []), start=1):
            if not isinstance(entry, dict):
                raise ValidationError(f"User {index}: entry must be an object")
            self.user_service.create_user(
                user_id=str(entry.get("id", "")), name=str(entry.get("name", ""))
            )

        for index, entry in enumerate(document.get("groups", []), start=1):
            if not isinstance(entry, dict):
                raise ValidationError(f"Group {index}: entry must be an object")
            self.group_service.create_group(
                group_id=str(entry.get("id", "")),
                name=str(entry.get("name", "")),
                member_ids=[str(m) for m in entry.get("members", [])],
            )

        imported = 0
        errors = []

        for index, entry in enumerate(document.get("expenses", []), start=1):
            try:
                self._import_expense(entry)
                imported += 1
            except ValueError as e:
                errors.append(f"Expense {index}: {e}")

        logger.info("Imported %d expense(s), rejected %d", imported, len(errors))
        return {"imported": imported, "rejected": len(errors), "errors": errors}

    def _import_expense(self, entry: Any) -> None:
        if not isinstance(entry, dict):
            raise ValidationError("entry must be an object")

        for field in ("amount", "payer", "kind"):
            if entry.get(field) in (None, ""):
                raise ValidationError(f"missing {field}")

        kind = str(entry["kind"])
        amount = parse_amount(entry["amount"])
        payer_id = str(entry["payer"])
        description = str(entry.get("description", ""))
        expense_date = parse_date(str(entry["date"])) if entry.get("date") else None
        group_id = str(entry["group"]) if entry.get("group") is not None else None

        value_parser = parse_percent if kind.strip().lower() == "percentage" else parse_amount
        raw_splits = entry.get("splits")

        if raw_splits is None:
            if group_id is None:
                raise ValidationError("expense needs either splits or a group")
            self.expense_service.create_group_expense(
                description=description,
                amount=amount,
                kind=kind,
                payer_id=payer_id,
                group_id=group_id,
                shares=None,
                expense_date=expense_date,
            )
            return

        if isinstance(raw_splits, dict):
            split_inputs = [
                (str(user_id), None if value is None else value_parser(value))
                for user_id, value in raw_splits.items()
            ]
        elif isinstance(raw_splits, list):
            split_inputs = [(str(user_id), None) for user_id in raw_splits]
        else:
            raise ValidationError("splits must be an object or a list of user ids")

        self.expense_service.create_expense(
            description=description,
            amount=amount,
            kind=kind,
            split_inputs=split_inputs,
            payer_id=payer_id,
            expense_date=expense_date,
            group_id=group_id,
        )
