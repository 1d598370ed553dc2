'''
    File Name: test_main_window.py
    Version: 2.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest

from PyQt6 import QtWidgets

import config
from models.budget import Budget
from models.transaction import Transaction
from ui.main_window import MainWindow


@pytest.fixture(autouse=True)
def ensure_qapp(qtbot):
    """Ensure a QApplication exists (provided by pytest-qt via qtbot)."""
    return qtbot


@pytest.fixture
def answer_yes(monkeypatch):
    monkeypatch.setattr(QtWidgets.QMessageBox, "question",
                        lambda *args, **kwargs: QtWidgets.QMessageBox.StandardButton.Yes)


@pytest.fixture
def quiet_dialogs(monkeypatch):
    """Swallow modal information/critical boxes and record their titles."""
    shown = []
    monkeypatch.setattr(QtWidgets.QMessageBox, "information", lambda parent, title, *a, **k: shown.append(title))
    monkeypatch.setattr(QtWidgets.QMessageBox, "critical", lambda parent, title, *a, **k: shown.append(title))
    return shown


@pytest.fixture
def window(qtbot, repo):
    mw = MainWindow(repository=repo)
    qtbot.addWidget(mw)
    return mw


class FakeDialog:
    """Stands in for a form dialog that the user accepted."""

    def __init__(self, result):
        self.result = result

    def __call__(self, *args, **kwargs):
        return self

    def exec(self):
        return True

    def get_transaction(self):
        return self.result

    def get_budget(self):
        return self.result

    def get_filters(self):
        return self.result


def table_column(table, column):
    return [table.item(row, column).text() for row in range(table.rowCount())]


def test_window_title_and_statusbar(window):
    # Title contains app name and version
    assert config.APP_NAME in window.windowTitle()
    assert config.APP_VERSION in window.windowTitle()
    assert window.status.currentMessage() == "Ready"


def test_apply_stylesheet_applies_content(qtbot, tmp_path, monkeypatch, repo):
    qss = tmp_path / "test_styles.qss"
    qss.write_text("QWidget { background-color: rgb(18,52,86); }", encoding="utf-8")
    monkeypatch.setattr("ui.main_window.STYLESHEET_PATH", qss)

    mw = MainWindow(repository=repo)
    qtbot.addWidget(mw)
    assert "background-color" in mw.styleSheet()


def test_no_repository_shows_message(qtbot):
    mw = MainWindow()
    qtbot.addWidget(mw)
    assert mw.status.currentMessage() == "No data store available"
    mw.load_transactions()
    assert mw.tx_table.rowCount() == 0


def test_tables_and_summary_reflect_repository(qtbot, repo):
    repo.save_transaction(Transaction(type="expense", amount=50, category="Food", date="2024-03-05"))
    repo.save_transaction(Transaction(type="income", amount=1000, category="Salary", date="2024-03-10"))
    repo.save_budget(Budget(category="Food", amount=200))
    repo.save_budget(Budget(category="Misc", amount=0))

    mw = MainWindow(repository=repo)
    qtbot.addWidget(mw)

    assert mw.tx_table.rowCount() == 2
    # newest first
    assert table_column(mw.tx_table, 1) == ["2024-03-10", "2024-03-05"]
    assert table_column(mw.tx_table, 5) == ["1,000.00", "50.00"]
    assert "1,000.00" in mw.income_label.text()
    assert "950.00" in mw.net_label.text()

    assert table_column(mw.budget_table, 1) == ["Food", "Misc"]
    assert table_column(mw.budget_table, 4) == ["50.00", "0.00"]
    assert table_column(mw.budget_table, 6) == ["25.0%", "n/a"]


def test_add_transaction_saves_and_refreshes(window, repo, monkeypatch):
    tx = Transaction(type="expense", amount="9.99", category="Food", description="Pizza", date="2024-03-01")
    monkeypatch.setattr("ui.main_window.TransactionForm", FakeDialog(tx))

    window.on_add_clicked()

    assert [t.description for t in repo.get_transactions()] == ["Pizza"]
    assert window.tx_table.rowCount() == 1
    assert "Transaction added" in window.text_display.toPlainText()
    assert window.status.currentMessage() == "Transaction saved"


def test_add_transaction_failure_is_reported(window, repo, monkeypatch, quiet_dialogs):
    tx = Transaction(type="expense", amount=1, category="Food", date="2024-03-01")
    monkeypatch.setattr("ui.main_window.TransactionForm", FakeDialog(tx))
    monkeypatch.setattr(repo, "save_transaction", lambda t: False)

    window.on_add_clicked()

    assert quiet_dialogs == ["Save failed"]
    assert window.status.currentMessage() == "Save failed"
    assert tx.id is None


def test_edit_transaction_updates_selected_row(window, repo, monkeypatch):
    tx = Transaction(type="expense", amount=5, category="Food", description="Old", date="2024-03-01")
    repo.save_transaction(tx)
    window.refresh()
    window.tx_table.selectRow(0)

    captured = {}

    class EditForm(FakeDialog):
        def __call__(self, parent, repository=None, transaction=None):
            captured["transaction"] = transaction
            return self

    updated = Transaction(type="expense", amount=6, category="Food", description="New",
                          date="2024-03-01", id=tx.id, created_at=tx.created_at)
    monkeypatch.setattr("ui.main_window.TransactionForm", EditForm(updated))

    window.on_edit_clicked()

    assert captured["transaction"].id == tx.id
    (stored,) = repo.get_transactions()
    assert stored.description == "New"
    assert stored.amount == Decimal("6.00")


def test_delete_without_selection(window, quiet_dialogs):
    window.on_delete_clicked()
    assert window.status.currentMessage() == "No transaction selected"
    assert quiet_dialogs == ["Select transaction"]


def test_delete_selected_transaction(window, repo, answer_yes):
    repo.save_transaction(Transaction(type="expense", amount=5, category="Food", date="2024-03-01"))
    window.refresh()
    window.tx_table.selectRow(0)

    window.on_delete_clicked()

    assert repo.get_transactions() == []
    assert window.tx_table.rowCount() == 0
    assert window.status.currentMessage() == "Transaction deleted"


def test_delete_cancelled_keeps_transaction(window, repo, monkeypatch):
    repo.save_transaction(Transaction(type="expense", amount=5, category="Food", date="2024-03-01"))
    window.refresh()
    window.tx_table.selectRow(0)
    monkeypatch.setattr(QtWidgets.QMessageBox, "question",
                        lambda *args, **kwargs: QtWidgets.QMessageBox.StandardButton.No)

    window.on_delete_clicked()

    assert len(repo.get_transactions()) == 1
    assert window.status.currentMessage() == "Delete cancelled"


def test_budget_add_and_delete(window, repo, monkeypatch, answer_yes):
    monkeypatch.setattr("ui.main_window.BudgetForm", FakeDialog(Budget(category="Food", amount=100)))
    window.on_add_budget_clicked()
    assert window.budget_table.rowCount() == 1

    window.budget_table.selectRow(0)
    window.on_delete_budget_clicked()
    assert repo.get_budgets() == []
    assert window.budget_table.rowCount() == 0


def test_filter_by_type_and_clear(window, repo, monkeypatch):
    repo.save_transaction(Transaction(type="expense", amount=5, category="Food", date="2024-03-01"))
    repo.save_transaction(Transaction(type="income", amount=50, category="Salary", date="2024-03-02"))
    monkeypatch.setattr("ui.main_window.FilterDialog", FakeDialog({"type": "income"}))

    window.on_filter_search_clicked()
    assert table_column(window.tx_table, 3) == ["Salary"]
    assert window.status.currentMessage() == "1 transaction(s) match the filter"

    window.on_clear_filter_clicked()
    assert window.tx_table.rowCount() == 2


def test_filter_by_date_range(window, repo):
    repo.save_transaction(Transaction(type="expense", amount=5, category="Food", date="2024-01-31"))
    repo.save_transaction(Transaction(type="expense", amount=5, category="Food", date="2024-02-01"))
    window._filters = {"start_date": "2024-01-01", "end_date": "2024-01-31", "category": "Food"}
    window.load_transactions()
    assert table_column(window.tx_table, 1) == ["2024-01-31"]


def test_statistics_opens_reports_view(window):
    with patch("ui.main_window.ReportsView",
               side_effect=lambda parent=None, repository=None: QtWidgets.QWidget(parent)) as mock_view, \
            patch.object(QtWidgets.QDialog, "exec", return_value=0):
        window.on_statistics_clicked()

    assert mock_view.call_args.kwargs["repository"] is window.repository
    assert window.status.currentMessage() == "Statistics dialog closed"


def test_export_and_import_csv(window, repo, tmp_path, monkeypatch, quiet_dialogs, answer_yes):
    repo.save_transaction(Transaction(type="expense", amount=5, category="Food", description="Tea", date="2024-03-01"))
    path = tmp_path / "export.csv"
    monkeypatch.setattr(QtWidgets.QFileDialog, "getSaveFileName", lambda *a, **k: (str(path), ""))
    monkeypatch.setattr(QtWidgets.QFileDialog, "getOpenFileName", lambda *a, **k: (str(path), ""))

    window._handle_export("csv")
    assert path.read_text(encoding="utf-8").startswith("Date,Description,Category,Type,Amount")

    window._handle_import("csv")
    assert len(repo.get_transactions()) == 2
    assert window.tx_table.rowCount() == 2
    assert quiet_dialogs == ["Success", "Success"]


def test_json_backup_and_restore(window, repo, tmp_path, monkeypatch, quiet_dialogs, answer_yes):
    repo.save_transaction(Transaction(type="income", amount=10, category="Salary", date="2024-03-01"))
    path = tmp_path / "backup.json"
    monkeypatch.setattr(QtWidgets.QFileDialog, "getSaveFileName", lambda *a, **k: (str(path), ""))
    monkeypatch.setattr(QtWidgets.QFileDialog, "getOpenFileName", lambda *a, **k: (str(path), ""))

    window._handle_export("json")
    repo.reset_all()
    window._handle_import("json")

    assert [t.category for t in repo.get_transactions()] == ["Salary"]
    assert window.status.currentMessage() == "Import successful"


def test_export_cancelled(window, monkeypatch):
    monkeypatch.setattr(QtWidgets.QFileDialog, "getSaveFileName", lambda *a, **k: ("", ""))
    window._handle_export("csv")
    assert window.status.currentMessage() == "Export cancelled"


def test_reset_clears_everything(window, repo, answer_yes):
    repo.save_transaction(Transaction(type="expense", amount=5, category="Food", date="2024-03-01"))
    repo.save_budget(Budget(category="Food", amount=5))
    window.refresh()

    window.on_reset_clicked()

    assert repo.get_transactions() == []
    assert repo.get_budgets() == []
    assert repo.get_categories() == config.DEFAULT_CATEGORIES
    assert window.tx_table.rowCount() == 0
    assert window.budget_table.rowCount() == 0
