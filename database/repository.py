'''
    File Name: repository.py
    Version: 3.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
    Description: Transactions, budgets and categories over a Store, plus
                 every aggregate the views display.
'''

import copy
import csv
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from uuid import uuid4

import config
from models.budget import Budget
from models.period import DateLike, add_years, in_range, month_bounds, parse_optional_date
from models.report import ZERO, BudgetStatus, MonthlyTotals, ReportSummary
from models.transaction import CENT, Transaction, parse_record_id, parse_timestamp

from .store import BUDGETS, CATEGORIES, COLLECTIONS, TRANSACTIONS, Store

logger = logging.getLogger(__name__)

Record = Union[Transaction, Budget]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid4().hex


def _csv_quote(value: Any) -> str:
    return '"' + str(value).replace('"', '""') + '"'


def normalize_categories(mapping: Any) -> Dict[str, List[str]]:
    """Validate a category mapping: type name -> ordered list of names."""
    if not isinstance(mapping, dict):
        raise ValueError(f"Categories must be a mapping, got {type(mapping).__name__}")
    result: Dict[str, List[str]] = {}
    for kind, names in mapping.items():
        if isinstance(names, (str, bytes)) or not isinstance(names, (list, tuple)):
            raise ValueError(f"Categories for {kind!r} must be a list of names")
        result[str(kind)] = [str(n) for n in names]
    return result


class BudgetRepository:
    """Owns transactions, budgets and categories stored in a `Store`.

    Build one at startup and hand it to whatever needs it. The repository
    keeps no cache: each call reads the collections it needs from the store,
    so instances over the same store are interchangeable.

    Mutations read the whole collection, change it and write it back. Two
    writers working on the same store at the same time can therefore lose
    one another's change; the application assumes a single writer.
    """

    def __init__(
        self,
        store: Store,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.store = store
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id
        self.initialize_categories()

    def initialize_categories(self) -> None:
        """Seed the default category lists when none have ever been stored."""
        if self.store.read(CATEGORIES) is not None:
            return
        if self.save_categories(copy.deepcopy(config.DEFAULT_CATEGORIES)):
            logger.info("Seeded default categories")
        else:
            logger.warning("Failed seeding default categories")

    def today(self) -> date:
        """Current local calendar date according to the repository clock."""
        return self._clock().astimezone().date()

    # --- Internal collection helpers ---
    def _raw_records(self, collection: str) -> List[Any]:
        raw = self.store.read(collection)
        if raw is None:
            return []
        if not isinstance(raw, list):
            logger.warning("Collection %s is not a list; treating as empty", collection)
            return []
        return raw

    def _load(self, collection: str, model) -> list:
        records = []
        for item in self._raw_records(collection):
            try:
                records.append(model.from_dict(item))
            except ValueError:
                logger.warning("Skipping malformed %s record: %r", collection, item)
        return records

    def _save_record(self, collection: str, record: Record) -> bool:
        now = self._clock()
        stored = replace(record)
        items = self._raw_records(collection)
        match = None
        if stored.id:
            match = next(
                (i for i, item in enumerate(items)
                 if isinstance(item, dict) and parse_record_id(item.get("id")) == stored.id),
                None,
            )
        if not stored.id:
            stored.id = self._id_factory()
            stored.created_at = now
        elif stored.created_at is None:
            # createdAt is fixed at first save
            previous = items[match].get("createdAt") if match is not None else None
            try:
                stored.created_at = parse_timestamp(previous) or now
            except ValueError:
                stored.created_at = now
        stored.updated_at = now

        payload = stored.to_dict()
        if match is not None:
            items[match] = payload
        else:
            items.append(payload)

        if not self.store.write(collection, items):
            logger.error("Failed saving %s record %s", collection, stored.id)
            return False

        # only a durable save hands identity back to the caller
        record.id = stored.id
        record.created_at = stored.created_at
        record.updated_at = stored.updated_at
        logger.debug("Saved %s record %s", collection, stored.id)
        return True

    def _delete_record(self, collection: str, record_id: Any) -> bool:
        target = parse_record_id(record_id)
        items = self._raw_records(collection)
        kept = [
            item for item in items
            if not (isinstance(item, dict) and parse_record_id(item.get("id")) == target)
        ]
        if not self.store.write(collection, kept):
            logger.error("Failed deleting %s record %s", collection, record_id)
            return False
        logger.debug("Deleted %d %s record(s) with id %s", len(items) - len(kept), collection, record_id)
        return True

    # --- Transactions ---
    def get_transactions(self) -> List[Transaction]:
        return self._load(TRANSACTIONS, Transaction)

    def save_transaction(self, transaction: Transaction) -> bool:
        """Insert or replace a transaction by id. Returns True when stored."""
        return self._save_record(TRANSACTIONS, transaction)

    def delete_transaction(self, transaction_id: Any) -> bool:
        """Remove the transaction with this id; unknown ids are a no-op."""
        return self._delete_record(TRANSACTIONS, transaction_id)

    def get_transaction_by_id(self, transaction_id: Any) -> Optional[Transaction]:
        target = parse_record_id(transaction_id)
        return next((t for t in self.get_transactions() if t.id == target), None)

    def get_transactions_by_date_range(self, start: Optional[DateLike], end: Optional[DateLike]) -> List[Transaction]:
        """Transactions dated within [start, end]; both bounds inclusive."""
        start, end = parse_optional_date(start), parse_optional_date(end)
        return [t for t in self.get_transactions() if in_range(t.date, start, end)]

    def get_transactions_by_category(self, category: str) -> List[Transaction]:
        return [t for t in self.get_transactions() if t.category == category]

    def get_transactions_by_type(self, kind: str) -> List[Transaction]:
        return [t for t in self.get_transactions() if t.type == kind]

    def recent_transactions(self, limit: int = config.RECENT_LIMIT) -> List[Transaction]:
        """Newest transactions first, by calendar date."""
        ordered = sorted(self.get_transactions(), key=lambda t: t.date, reverse=True)
        return ordered[:limit]

    # --- Budgets ---
    def get_budgets(self) -> List[Budget]:
        return self._load(BUDGETS, Budget)

    def save_budget(self, budget: Budget) -> bool:
        """Insert or replace a budget by id. Returns True when stored."""
        return self._save_record(BUDGETS, budget)

    def delete_budget(self, budget_id: Any) -> bool:
        return self._delete_record(BUDGETS, budget_id)

    def get_budget_by_id(self, budget_id: Any) -> Optional[Budget]:
        target = parse_record_id(budget_id)
        return next((b for b in self.get_budgets() if b.id == target), None)

    def get_budget_by_category(self, category: str) -> Optional[Budget]:
        return next((b for b in self.get_budgets() if b.category == category), None)

    # --- Categories ---
    def get_categories(self) -> Dict[str, List[str]]:
        raw = self.store.read(CATEGORIES)
        try:
            return normalize_categories(raw) if raw is not None else {}
        except ValueError:
            logger.warning("Stored categories are malformed; treating as empty")
            return {}

    def save_categories(self, categories: Dict[str, List[str]]) -> bool:
        """Replace the whole category mapping.

        Raises ValueError when `categories` is not a mapping of name lists.
        """
        return self.store.write(CATEGORIES, normalize_categories(categories))

    def get_categories_by_type(self, kind: str) -> List[str]:
        return list(self.get_categories().get(kind, []))

    def all_categories(self) -> List[str]:
        """Expense categories followed by income categories."""
        categories = self.get_categories()
        return list(categories.get("expense", [])) + list(categories.get("income", []))

    # --- Aggregates ---
    def _sum_by_type(self, kind: str, start: Optional[DateLike], end: Optional[DateLike]) -> Decimal:
        start, end = parse_optional_date(start), parse_optional_date(end)
        return sum(
            (t.amount for t in self.get_transactions_by_type(kind) if in_range(t.date, start, end)),
            ZERO,
        )

    def total_income(self, start: Optional[DateLike] = None, end: Optional[DateLike] = None) -> Decimal:
        return self._sum_by_type("income", start, end)

    def total_expenses(self, start: Optional[DateLike] = None, end: Optional[DateLike] = None) -> Decimal:
        return self._sum_by_type("expense", start, end)

    def net_balance(self, start: Optional[DateLike] = None, end: Optional[DateLike] = None) -> Decimal:
        return self.total_income(start, end) - self.total_expenses(start, end)

    def spending_by_category(self, start: Optional[DateLike] = None, end: Optional[DateLike] = None) -> Dict[str, Decimal]:
        """Expense totals per category; categories without expenses are omitted."""
        start, end = parse_optional_date(start), parse_optional_date(end)
        totals: Dict[str, Decimal] = {}
        for t in self.get_transactions_by_type("expense"):
            if in_range(t.date, start, end):
                totals[t.category] = totals.get(t.category, ZERO) + t.amount
        return totals

    def monthly_series(self, year: Optional[int] = None) -> Dict[str, MonthlyTotals]:
        """Income and expense per month of `year`, keyed 'YYYY-MM'.

        All twelve months are always present, zero when empty.
        """
        year = year if year is not None else self.today().year
        series = {f"{year}-{month:02d}": MonthlyTotals() for month in range(1, 13)}
        for t in self.get_transactions():
            if t.date.year != year:
                continue
            totals = series[f"{year}-{t.date.month:02d}"]
            if t.type == "income":
                totals.income += t.amount
            elif t.type == "expense":
                totals.expense += t.amount
        return series

    @staticmethod
    def budget_window(budget: Budget, today: date) -> Optional[Tuple[date, date]]:
        """Inclusive (first, last) days a budget is evaluated over.

        None for an annual budget without a start date.
        """
        if budget.period == "monthly":
            return month_bounds(today)
        if budget.start_date is None:
            return None
        # one year from start_date, end exclusive
        return budget.start_date, add_years(budget.start_date, 1) - timedelta(days=1)

    def budget_vs_actual(self, today: Optional[date] = None) -> List[BudgetStatus]:
        """Compare each budget with the expenses of its category in its window.

        Monthly budgets always use the current calendar month, whatever their
        start date. Annual budgets use [start_date, start_date + 1 year).
        """
        today = today or self.today()
        expenses = self.get_transactions_by_type("expense")
        result = []
        for budget in self.get_budgets():
            window = self.budget_window(budget, today)
            if window is None:
                logger.warning("Annual budget %s has no start date; nothing counted", budget.id)
                spent = ZERO
            else:
                first, last = window
                spent = sum(
                    (t.amount for t in expenses
                     if t.category == budget.category and in_range(t.date, first, last)),
                    ZERO,
                )
            if budget.amount == 0:
                percentage = None
            else:
                ratio = spent / budget.amount * 100
                try:
                    percentage = ratio.quantize(CENT)
                except InvalidOperation:
                    # too many digits for two decimals
                    percentage = ratio
            result.append(BudgetStatus(
                category=budget.category,
                budget_amount=budget.amount,
                actual_spent=spent,
                remaining=budget.amount - spent,
                percentage=percentage,
                period=budget.period,
                budget_id=budget.id,
            ))
        return result

    def report_summary(self, start: DateLike, end: DateLike) -> ReportSummary:
        """Totals, category breakdown and matching transactions for [start, end]."""
        start, end = parse_optional_date(start), parse_optional_date(end)
        if start is None or end is None:
            raise ValueError("Both start and end dates are required for a report")
        transactions = self.get_transactions_by_date_range(start, end)
        summary = ReportSummary(start=start, end=end, transactions=transactions)
        for t in transactions:
            if t.type == "income":
                summary.total_income += t.amount
            elif t.type == "expense":
                summary.total_expenses += t.amount
                summary.spending_by_category[t.category] = (
                    summary.spending_by_category.get(t.category, ZERO) + t.amount
                )
        return summary

    # --- Bulk operations ---
    def export_all(self) -> Dict[str, Any]:
        """Snapshot of every collection plus the export instant."""
        return {
            "transactions": [t.to_dict() for t in self.get_transactions()],
            "budgets": [b.to_dict() for b in self.get_budgets()],
            "categories": self.get_categories(),
            "exportDate": self._clock().isoformat(),
        }

    def _normalize_import(self, model, items: Any) -> List[dict]:
        if not isinstance(items, list):
            raise ValueError(f"Expected a list of records, got {type(items).__name__}")
        now = self._clock()
        records = []
        for item in items:
            record = model.from_dict(item)
            if not record.id:
                record.id = self._id_factory()
            record.created_at = record.created_at or now
            record.updated_at = record.updated_at or now
            records.append(record.to_dict())
        return records

    def import_all(self, snapshot: Dict[str, Any]) -> bool:
        """Replace each collection present in `snapshot`.

        Collections missing from the snapshot are left alone and unknown keys
        are ignored. Writes are independent: when one fails the others are
        kept, and the result is True only if every attempted write succeeded.
        """
        if not isinstance(snapshot, dict):
            logger.error("Import payload must be a mapping, got %s", type(snapshot).__name__)
            return False

        ok = True
        for collection, model in ((TRANSACTIONS, Transaction), (BUDGETS, Budget)):
            if snapshot.get(collection) is None:
                continue
            try:
                records = self._normalize_import(model, snapshot[collection])
            except ValueError:
                logger.exception("Rejected malformed %s in import", collection)
                ok = False
                continue
            if not self.store.write(collection, records):
                ok = False

        if snapshot.get(CATEGORIES) is not None:
            try:
                if not self.save_categories(snapshot[CATEGORIES]):
                    ok = False
            except ValueError:
                logger.exception("Rejected malformed categories in import")
                ok = False

        logger.info("Import finished (success=%s)", ok)
        return ok

    def reset_all(self) -> None:
        """Erase every collection and reseed the default categories."""
        for collection in COLLECTIONS:
            self.store.erase(collection)
        self.initialize_categories()
        logger.info("All data cleared")

    # --- Import / Export helpers ---
    def export_to_csv(self, path: Path) -> bool:
        """Export transactions to a CSV file at `path`. Returns True on success.

        Columns: Date, Description, Category, Type, Amount. Description and
        category are always quoted.
        """
        # description and category always quoted, the other columns never
        try:
            lines = [",".join(config.CSV_HEADERS)]
            for t in self.get_transactions():
                lines.append(",".join([
                    t.date.isoformat(),
                    _csv_quote(t.description),
                    _csv_quote(t.category),
                    t.type,
                    str(t.amount),
                ]))
            with open(path, "w", newline="", encoding="utf-8") as f:
                f.write("\n".join(lines) + "\n")
            return True
        except Exception:
            logger.exception("Failed exporting transactions to CSV %s", path)
            return False

    def import_from_csv(self, path: Path) -> int:
        """Import transactions from a CSV file. Returns number of imported rows."""
        count = 0
        try:
            with open(path, newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                for row in reader:
                    # Normalize keys
                    row = {(k or "").strip().lower(): (v or "").strip() for k, v in row.items()}
                    try:
                        tx = Transaction(
                            type=row.get("type", "").lower(),
                            amount=row.get("amount"),
                            category=row.get("category", ""),
                            description=row.get("description", ""),
                            date=row.get("date"),
                        )
                    except ValueError:
                        logger.warning("Skipping malformed CSV row: %r", row)
                        continue
                    if self.save_transaction(tx):
                        count += 1
            return count
        except Exception:
            logger.exception("Failed importing transactions from CSV %s", path)
            return count

    def export_to_json(self, path: Path) -> bool:
        """Write `export_all()` to `path`. Returns True on success."""
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.export_all(), f, indent=2)
            return True
        except Exception:
            logger.exception("Failed exporting data to %s", path)
            return False

    def import_from_json(self, path: Path) -> bool:
        """Load a file written by `export_to_json` and pass it to `import_all`."""
        try:
            with open(path, encoding="utf-8") as f:
                snapshot = json.load(f)
        except Exception:
            logger.exception("Failed reading import file %s", path)
            return False
        return self.import_all(snapshot)
