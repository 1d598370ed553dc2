'''
    File Name: test_ui.py
    Version: 2.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''

import unittest
from unittest.mock import MagicMock, patch
import sys
from datetime import date
from decimal import Decimal

from PyQt6 import QtCore
from PyQt6.QtWidgets import QApplication

from database.repository import BudgetRepository
from models.budget import Budget
from models.report import BudgetStatus, MonthlyTotals
from models.transaction import Transaction
from ui.budget_form import BudgetForm
from ui.filter_dialog import FilterDialog
from ui.reports_view import ReportsView
from ui.transaction_form import TransactionForm

CATEGORIES = {"expense": ["Food", "Rent"], "income": ["Salary"]}


def make_repository():
    """Repository mock returning realistic empty aggregates."""
    repo = MagicMock(spec=BudgetRepository)
    repo.today.return_value = date(2024, 3, 15)
    repo.total_income.return_value = Decimal("0.00")
    repo.total_expenses.return_value = Decimal("0.00")
    repo.spending_by_category.return_value = {}
    repo.monthly_series.return_value = {f"2024-{m:02d}": MonthlyTotals() for m in range(1, 13)}
    repo.budget_vs_actual.return_value = []
    repo.get_categories_by_type.side_effect = lambda kind: list(CATEGORIES.get(kind, []))
    return repo


class QtTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        """Initialize QApplication for all tests."""
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()


class TestReportsView(QtTestCase):
    """Test suite for ReportsView statistics component."""

    def setUp(self):
        self.mock_repo = make_repository()
        self.widget = ReportsView(repository=self.mock_repo)

    def tearDown(self):
        self.widget.deleteLater()

    def test_reports_view_initialization(self):
        self.assertEqual(self.widget._current_chart_type, "category")
        self.assertEqual(self.widget._current_period, "month")
        self.assertEqual(self.widget._chart_combo.count(), 4)
        self.assertEqual(self.widget._period_combo.count(), 4)
        self.assertEqual(self.widget._year_spin.value(), 2024)
        self.assertIsNotNone(self.widget._figure)
        self.assertIsNotNone(self.widget._canvas)

    def test_category_chart_uses_current_month(self):
        self.mock_repo.spending_by_category.assert_called_with(date(2024, 3, 1), date(2024, 3, 31))

    def test_period_change_widens_range(self):
        self.widget._on_period_changed("This Year")
        self.assertEqual(self.widget._current_period, "year")
        self.mock_repo.spending_by_category.assert_called_with(date(2024, 1, 1), date(2024, 12, 31))

        self.widget._on_period_changed("All Time")
        self.mock_repo.spending_by_category.assert_called_with(None, None)

    def test_chart_type_changed(self):
        for label, key in (("By Category", "category"), ("Monthly Trend", "month"),
                           ("Income vs Expenses", "summary"), ("Budget vs Actual", "budget")):
            with patch.object(self.widget, 'plot_data') as mock_plot:
                self.widget._on_chart_type_changed(label)
                self.assertEqual(self.widget._current_chart_type, key)
                mock_plot.assert_called_once()

    def test_monthly_chart_queries_selected_year(self):
        self.widget._on_chart_type_changed("Monthly Trend")
        self.mock_repo.monthly_series.assert_called_with(2024)
        self.widget._year_spin.setValue(2023)
        self.mock_repo.monthly_series.assert_called_with(2023)

    def test_budget_chart_with_zero_budget(self):
        self.mock_repo.budget_vs_actual.return_value = [
            BudgetStatus("Food", Decimal("100"), Decimal("50"), Decimal("50"), Decimal("50.00")),
            BudgetStatus("Misc", Decimal("0"), Decimal("5"), Decimal("-5"), None),
        ]
        self.widget._on_chart_type_changed("Budget vs Actual")
        self.mock_repo.budget_vs_actual.assert_called_with(date(2024, 3, 15))

    def test_update_stats_with_data(self):
        self.mock_repo.total_income.return_value = Decimal("1000.00")
        self.mock_repo.total_expenses.return_value = Decimal("80.00")
        self.widget._update_stats()
        text = self.widget._stats_label.text()
        self.assertIn("Income: 1,000.00", text)
        self.assertIn("Expenses: 80.00", text)
        self.assertIn("Net: 920.00", text)

    def test_plot_errors_are_contained(self):
        self.mock_repo.spending_by_category.side_effect = Exception("store error")
        self.widget.plot_data()
        self.widget.refresh()

    def test_no_repository(self):
        widget = ReportsView(repository=None, today=date(2024, 1, 1))
        self.assertEqual(widget._stats_label.text(), "No data available")
        widget.deleteLater()


class TestTransactionForm(QtTestCase):

    def setUp(self):
        self.mock_repo = make_repository()

    def test_categories_follow_type(self):
        form = TransactionForm(repository=self.mock_repo)
        self.assertEqual(form.type.currentText(), "expense")
        self.assertEqual([form.category.itemText(i) for i in range(form.category.count())], ["Food", "Rent"])

        form.type.setCurrentText("income")
        self.assertEqual([form.category.itemText(i) for i in range(form.category.count())], ["Salary"])
        form.deleteLater()

    @patch('ui.transaction_form.QMessageBox.warning')
    def test_empty_description_is_rejected(self, mock_warning):
        form = TransactionForm(repository=self.mock_repo)
        form.save_transaction()
        mock_warning.assert_called_once()
        self.assertIsNone(form.get_transaction())
        form.deleteLater()

    def test_save_builds_transaction(self):
        form = TransactionForm(repository=self.mock_repo)
        form.description.setText("Groceries")
        form.amount.setValue(12.5)
        form.date.setDate(QtCore.QDate(2024, 3, 2))
        form.category.setCurrentText("Rent")
        form.save_transaction()

        tx = form.get_transaction()
        self.assertIsNotNone(tx)
        self.assertEqual(tx.type, "expense")
        self.assertEqual(tx.amount, Decimal("12.50"))
        self.assertEqual(tx.date, date(2024, 3, 2))
        self.assertEqual(tx.category, "Rent")
        self.assertIsNone(tx.id)
        form.deleteLater()

    def test_edit_keeps_identity(self):
        original = Transaction(type="income", amount=100, category="Salary", description="March",
                               date="2024-03-01", id="abc", created_at="2024-03-01T10:00:00+00:00")
        form = TransactionForm(repository=self.mock_repo, transaction=original)
        self.assertEqual(form.type.currentText(), "income")
        self.assertEqual(form.description.text(), "March")
        self.assertEqual(form.category.currentText(), "Salary")

        form.description.setText("March salary")
        form.save_transaction()
        tx = form.get_transaction()
        self.assertEqual(tx.id, "abc")
        self.assertEqual(tx.created_at, original.created_at)
        self.assertEqual(tx.description, "March salary")
        form.deleteLater()

    def test_form_without_repository_allows_free_text_category(self):
        form = TransactionForm()
        self.assertEqual(form.category.count(), 0)
        form.description.setText("Gift")
        form.category.setEditText("Presents")
        form.amount.setValue(5)
        form.save_transaction()
        self.assertEqual(form.get_transaction().category, "Presents")
        form.deleteLater()


class TestBudgetForm(QtTestCase):

    def setUp(self):
        self.mock_repo = make_repository()

    def test_lists_expense_categories(self):
        form = BudgetForm(repository=self.mock_repo)
        self.mock_repo.get_categories_by_type.assert_called_with("expense")
        self.assertEqual(form.category.count(), 2)
        form.deleteLater()

    @patch('ui.budget_form.QMessageBox.warning')
    def test_zero_amount_is_rejected(self, mock_warning):
        form = BudgetForm(repository=self.mock_repo)
        form.save_budget()
        mock_warning.assert_called_once()
        self.assertIsNone(form.get_budget())
        form.deleteLater()

    def test_save_builds_budget(self):
        form = BudgetForm(repository=self.mock_repo)
        form.amount.setValue(250)
        form.period.setCurrentText("annual")
        form.start_date.setDate(QtCore.QDate(2024, 6, 1))
        form.save_budget()

        budget = form.get_budget()
        self.assertEqual(budget.category, "Food")
        self.assertEqual(budget.amount, Decimal("250.00"))
        self.assertEqual(budget.period, "annual")
        self.assertEqual(budget.start_date, date(2024, 6, 1))
        form.deleteLater()

    def test_edit_keeps_identity(self):
        original = Budget(category="Rent", amount=900, id="b1")
        form = BudgetForm(repository=self.mock_repo, budget=original)
        self.assertEqual(form.category.currentText(), "Rent")
        form.amount.setValue(950)
        form.save_budget()
        budget = form.get_budget()
        self.assertEqual(budget.id, "b1")
        self.assertEqual(budget.amount, Decimal("950.00"))
        form.deleteLater()


class TestFilterDialog(QtTestCase):

    def setUp(self):
        self.dialog = FilterDialog(categories=["Food", "Salary"])

    def tearDown(self):
        self.dialog.deleteLater()

    def test_no_criteria(self):
        self.assertEqual(self.dialog.get_filters(), {})
        self.assertFalse(self.dialog.start_date.isEnabled())

    def test_category_and_type(self):
        self.dialog.category.setCurrentText("Food")
        self.dialog.type.setCurrentText("expense")
        self.assertEqual(self.dialog.get_filters(), {"category": "Food", "type": "expense"})

    def test_date_range_only_when_checked(self):
        self.dialog.start_date.setDate(QtCore.QDate(2024, 1, 1))
        self.dialog.end_date.setDate(QtCore.QDate(2024, 1, 31))
        self.assertNotIn("start_date", self.dialog.get_filters())

        self.dialog.use_dates.setChecked(True)
        self.assertTrue(self.dialog.start_date.isEnabled())
        filters = self.dialog.get_filters()
        self.assertEqual(filters["start_date"], "2024-01-01")
        self.assertEqual(filters["end_date"], "2024-01-31")


if __name__ == '__main__':
    unittest.main()
