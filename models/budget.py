'''
    File Name: budget.py
    Version: 1.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
    Description: Budget data model for the budget tracker.
'''
from dataclasses import dataclass
import datetime as dt
from decimal import Decimal
from typing import Optional

from .period import parse_optional_date
from .transaction import format_timestamp, parse_amount, parse_record_id, parse_timestamp

BUDGET_PERIODS = ("monthly", "annual")


@dataclass
class Budget:
    """
    Spending ceiling for one expense category.

    Attributes:
        category: Expense category the budget applies to
        amount: Ceiling for one period
        period: "monthly" or "annual"
        start_date: Start of the yearly window; ignored for monthly budgets,
            which always evaluate against the current calendar month
        id: Opaque identifier (None until saved by the repository)
        created_at / updated_at: Repository-managed timestamps
    """
    category: str
    amount: Decimal
    period: str = "monthly"
    start_date: Optional[dt.date] = None
    id: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    def __post_init__(self):
        if self.period not in BUDGET_PERIODS:
            raise ValueError(f"Invalid budget period: {self.period!r}. Expected one of {BUDGET_PERIODS}")
        self.amount = parse_amount(self.amount)
        self.category = "" if self.category is None else str(self.category)
        self.start_date = parse_optional_date(self.start_date)
        self.id = parse_record_id(self.id)
        self.created_at = parse_timestamp(self.created_at)
        self.updated_at = parse_timestamp(self.updated_at)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "category": self.category,
            "amount": str(self.amount),
            "period": self.period,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Budget":
        """Create a Budget from a dictionary; unknown keys are ignored."""
        if not isinstance(data, dict):
            raise ValueError(f"Budget record must be a mapping, got {type(data).__name__}")
        if "amount" not in data:
            raise ValueError("Budget record is missing 'amount'")
        return cls(
            category=data.get("category", ""),
            amount=data.get("amount"),
            period=data.get("period", "monthly"),
            start_date=data.get("startDate"),
            id=parse_record_id(data.get("id")),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    def __repr__(self) -> str:
        return (f"Budget(id={self.id}, category='{self.category}', amount={self.amount}, "
                f"period={self.period}, start={self.start_date})")
