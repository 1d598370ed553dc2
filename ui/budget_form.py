'''
    File Name: budget_form.py
    Version: 1.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QFormLayout,
    QDoubleSpinBox,
    QDateEdit,
    QComboBox,
    QDialogButtonBox,
    QMessageBox,
)
from PyQt6.QtCore import QDate

from models.budget import BUDGET_PERIODS, Budget

logger = logging.getLogger(__name__)


class BudgetForm(QDialog):
    """Dialog to create or edit a budget for one expense category."""

    def __init__(self, parent=None, repository=None, budget: Optional[Budget] = None):
        super().__init__(parent)
        self.repository = repository
        self._original = budget
        self._budget: Optional[Budget] = None

        self.setWindowTitle("Edit Budget" if budget else "Create Budget")

        layout = QVBoxLayout()
        form = QFormLayout()

        self.category = QComboBox()
        self.category.setEditable(True)
        self._load_categories()
        form.addRow("Category:", self.category)

        self.amount = QDoubleSpinBox()
        self.amount.setMinimum(0)
        self.amount.setMaximum(1_000_000_000)
        self.amount.setDecimals(2)
        form.addRow("Amount:", self.amount)

        self.period = QComboBox()
        self.period.addItems(list(BUDGET_PERIODS))
        form.addRow("Period:", self.period)

        # only annual budgets use the start date
        self.start_date = QDateEdit()
        self.start_date.setCalendarPopup(True)
        self.start_date.setDisplayFormat("yyyy-MM-dd")
        self.start_date.setDate(QDate.currentDate())
        form.addRow("Start date:", self.start_date)

        layout.addLayout(form)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.save_budget)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.setLayout(layout)

        if budget:
            self._load_budget(budget)

    def _load_categories(self) -> None:
        if self.repository is None:
            return
        try:
            self.category.addItems([str(c) for c in self.repository.get_categories_by_type("expense")])
        except Exception:
            logger.exception("Failed loading expense categories for budget form")

    def _load_budget(self, budget: Budget) -> None:
        idx = self.category.findText(budget.category)
        if idx >= 0:
            self.category.setCurrentIndex(idx)
        else:
            self.category.setEditText(budget.category)
        self.amount.setValue(float(budget.amount))
        self.period.setCurrentText(budget.period)
        if budget.start_date:
            d = budget.start_date
            self.start_date.setDate(QDate(d.year, d.month, d.day))

    def save_budget(self) -> None:
        cat = self.category.currentText().strip()
        if not cat:
            QMessageBox.warning(self, "Validation", "Please choose a category.")
            return
        if self.amount.value() <= 0:
            QMessageBox.warning(self, "Validation", "Budget amount must be greater than zero.")
            return

        try:
            budget = Budget(
                category=cat,
                amount=f"{self.amount.value():.2f}",
                period=self.period.currentText(),
                start_date=self.start_date.date().toString("yyyy-MM-dd"),
            )
        except ValueError as e:
            QMessageBox.warning(self, "Validation", str(e))
            return

        if self._original is not None:
            budget.id = self._original.id
            budget.created_at = self._original.created_at

        self._budget = budget
        self.accept()

    def get_budget(self) -> Optional[Budget]:
        return self._budget
