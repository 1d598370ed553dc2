'''
    File Name: report.py
    Version: 1.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
    Description: Read-only values derived by the repository for reporting.
'''
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from .transaction import Transaction

ZERO = Decimal("0.00")


@dataclass
class MonthlyTotals:
    income: Decimal = ZERO
    expense: Decimal = ZERO

    def to_dict(self) -> dict:
        return {"income": self.income, "expense": self.expense}


@dataclass
class BudgetStatus:
    """Budget compared with the expenses recorded inside its window.

    `percentage` is None when the budget amount is zero.
    """
    category: str
    budget_amount: Decimal
    actual_spent: Decimal
    remaining: Decimal
    percentage: Optional[Decimal]
    period: str = "monthly"
    budget_id: Optional[str] = None

    @property
    def is_over_budget(self) -> bool:
        return self.percentage is not None and self.percentage > 100

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "budgetAmount": self.budget_amount,
            "actualSpent": self.actual_spent,
            "remaining": self.remaining,
            "percentage": self.percentage,
        }


@dataclass
class ReportSummary:
    start: date
    end: date
    total_income: Decimal = ZERO
    total_expenses: Decimal = ZERO
    spending_by_category: Dict[str, Decimal] = field(default_factory=dict)
    transactions: List[Transaction] = field(default_factory=list)

    @property
    def net_balance(self) -> Decimal:
        return self.total_income - self.total_expenses

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)
