'''
    File Name: transaction.py
    Version: 3.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
    Description: Transaction data model for the budget tracker.
'''
from dataclasses import dataclass
import datetime as dt
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from .period import parse_date

TRANSACTION_TYPES = ("income", "expense")

CENT = Decimal("0.01")


def parse_amount(value: Any) -> Decimal:
    """Convert an int/float/str/Decimal to a Decimal rounded to minor units."""
    if value is None or isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        # str() first so floats like 0.1 do not carry binary noise
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")


def parse_timestamp(value: Any) -> Optional[dt.datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return dt.datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid timestamp: {value!r}")


def format_timestamp(value: Optional[dt.datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def parse_record_id(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass
class Transaction:
    """
    Represents a single income or expense entry.

    Attributes:
        type: "income" or "expense"
        amount: Non-negative amount in minor-unit precision (not enforced)
        category: Category name; not checked against the category set
        description: Free text
        date: Calendar date of the transaction (no time component)
        id: Opaque identifier (None until saved by the repository)
        created_at: Set once when first saved
        updated_at: Refreshed on every save
    """
    type: str
    amount: Decimal
    category: str
    description: str = ""
    date: dt.date = None
    id: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    def __post_init__(self):
        """Validate and normalise fields after initialization."""
        if self.type not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid transaction type: {self.type!r}. Expected one of {TRANSACTION_TYPES}")
        self.amount = parse_amount(self.amount)
        if self.date is None:
            raise ValueError("Transaction date is required")
        self.date = parse_date(self.date)
        self.category = "" if self.category is None else str(self.category)
        self.description = "" if self.description is None else str(self.description)
        self.id = parse_record_id(self.id)
        self.created_at = parse_timestamp(self.created_at)
        self.updated_at = parse_timestamp(self.updated_at)

    def to_dict(self) -> dict:
        """Convert transaction to its persisted dictionary layout."""
        return {
            "id": self.id,
            "type": self.type,
            "amount": str(self.amount),
            "category": self.category,
            "description": self.description,
            "date": self.date.isoformat(),
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Create a Transaction from a dictionary; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ValueError(f"Transaction record must be a mapping, got {type(data).__name__}")
        if "amount" not in data:
            raise ValueError("Transaction record is missing 'amount'")
        return cls(
            type=data.get("type"),
            amount=data.get("amount"),
            category=data.get("category", ""),
            description=data.get("description", ""),
            date=data.get("date"),
            id=parse_record_id(data.get("id")),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    @property
    def is_income(self) -> bool:
        return self.type == "income"

    @property
    def is_expense(self) -> bool:
        return self.type == "expense"

    def __repr__(self) -> str:
        return (f"Transaction(id={self.id}, type={self.type}, desc='{self.description}', "
                f"amount={self.amount}, date={self.date}, category='{self.category}')")
