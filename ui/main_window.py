'''
    File Name: main_window.py
    Version: 3.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
from pathlib import Path
import logging
from typing import List, Optional

from PyQt6 import QtWidgets, QtGui, QtCore
from config import APP_NAME, APP_VERSION, DEFAULT_CURRENCY, STYLESHEET_PATH, ensure_data_dir

# Local UI components
from .transaction_form import TransactionForm
from .budget_form import BudgetForm
from .filter_dialog import FilterDialog
from .reports_view import ReportsView

logger = logging.getLogger(__name__)

INCOME_COLOR = QtGui.QColor(34, 197, 94)
EXPENSE_COLOR = QtGui.QColor(239, 68, 68)


def _money(value) -> str:
    return f"{value:,.2f} {DEFAULT_CURRENCY}"


class MainWindow(QtWidgets.QMainWindow):
    """Main application window.

    The window works exclusively through the injected repository: every
    list, total and chart is a repository query, and every change is a
    repository command run synchronously on the GUI thread.
    """

    def __init__(self, *args, repository=None, **kwargs):
        super().__init__(*args, **kwargs)

        # Ensure runtime data dir exists (safe)
        try:
            ensure_data_dir()
        except Exception:
            logger.exception("Failed ensuring data directory")

        self.setWindowTitle(f"{APP_NAME} - {APP_VERSION}")

        self.status = self.statusBar()
        self.status.showMessage("Ready")

        # Repository is injected by the app (see main.build_repository)
        self.repository = repository
        self._filters: dict = {}

        # Apply stylesheet if present (non-fatal)
        try:
            self._apply_stylesheet()
        except Exception:
            logger.exception("Failed to apply stylesheet")

        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QtWidgets.QVBoxLayout()
        main_layout.setSpacing(15)
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Balance summary
        summary_group = QtWidgets.QGroupBox("Balance")
        s_layout = QtWidgets.QHBoxLayout()
        self.income_label = QtWidgets.QLabel()
        self.expenses_label = QtWidgets.QLabel()
        self.net_label = QtWidgets.QLabel()
        for label in (self.income_label, self.expenses_label, self.net_label):
            label.setAlignment(QtCore.Qt.AlignmentFlag.AlignCenter)
            label.setStyleSheet("font-weight: bold; font-size: 13px;")
            s_layout.addWidget(label)
        summary_group.setLayout(s_layout)
        main_layout.addWidget(summary_group)

        self.tabs = QtWidgets.QTabWidget()
        self.tabs.addTab(self._build_transactions_tab(), "Transactions")
        self.tabs.addTab(self._build_budgets_tab(), "Budgets")
        main_layout.addWidget(self.tabs)

        # Activity log
        self.text_display = QtWidgets.QTextEdit()
        self.text_display.setReadOnly(True)
        self.text_display.setMaximumHeight(120)
        main_layout.addWidget(self.text_display)

        # Reports / Utilities group
        report_group = QtWidgets.QGroupBox("Reports & Utilities")
        r_layout = QtWidgets.QHBoxLayout()
        self.statistics_btn = QtWidgets.QPushButton("Statistics")
        self.import_export_btn = QtWidgets.QPushButton("Import/Export")
        self.reset_btn = QtWidgets.QPushButton("Reset All Data")
        r_layout.addWidget(self.statistics_btn)
        r_layout.addWidget(self.import_export_btn)
        r_layout.addWidget(self.reset_btn)
        report_group.setLayout(r_layout)
        main_layout.addWidget(report_group)

        self.statistics_btn.clicked.connect(self.on_statistics_clicked)
        self.import_export_btn.clicked.connect(self.on_import_export_clicked)
        self.reset_btn.clicked.connect(self.on_reset_clicked)

        central_widget.setLayout(main_layout)

        # Restore/Set initial window size (remember last state with QSettings)
        try:
            settings = QtCore.QSettings("pbm", APP_NAME)
            geom = settings.value("geometry", None)
            if isinstance(geom, (bytes, bytearray)):
                geom = QtCore.QByteArray(bytes(geom))
            if isinstance(geom, QtCore.QByteArray) and not geom.isEmpty():
                self.restoreGeometry(geom)
            else:
                # Default startup size
                self.resize(1200, 800)
                self.setMinimumSize(800, 600)
        except Exception:
            logger.exception("Failed to restore/set window geometry")

        self.refresh()

    def _build_transactions_tab(self) -> QtWidgets.QWidget:
        tab = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout()

        # Transactions table (select rows to edit/delete)
        self.tx_table = QtWidgets.QTableWidget(0, 6)
        self.tx_table.setHorizontalHeaderLabels(["ID", "Date", "Description", "Category", "Type", "Amount"])
        self.tx_table.horizontalHeader().setStretchLastSection(True)
        self.tx_table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows)
        self.tx_table.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.tx_table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        self.tx_table.verticalHeader().setVisible(False)
        self.tx_table.setColumnHidden(0, True)
        layout.addWidget(self.tx_table)

        buttons = QtWidgets.QHBoxLayout()
        self.add_btn = QtWidgets.QPushButton("Add")
        self.edit_btn = QtWidgets.QPushButton("Edit")
        self.delete_btn = QtWidgets.QPushButton("Delete")
        self.filter_btn = QtWidgets.QPushButton("Filter/Search")
        self.clear_filter_btn = QtWidgets.QPushButton("Clear Filter")
        for btn in (self.add_btn, self.edit_btn, self.delete_btn, self.filter_btn, self.clear_filter_btn):
            buttons.addWidget(btn)
        layout.addLayout(buttons)

        self.add_btn.clicked.connect(self.on_add_clicked)
        self.edit_btn.clicked.connect(self.on_edit_clicked)
        self.delete_btn.clicked.connect(self.on_delete_clicked)
        self.filter_btn.clicked.connect(self.on_filter_search_clicked)
        self.clear_filter_btn.clicked.connect(self.on_clear_filter_clicked)

        tab.setLayout(layout)
        return tab

    def _build_budgets_tab(self) -> QtWidgets.QWidget:
        tab = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout()

        self.budget_table = QtWidgets.QTableWidget(0, 7)
        self.budget_table.setHorizontalHeaderLabels(
            ["ID", "Category", "Period", "Budget", "Spent", "Remaining", "%"]
        )
        self.budget_table.horizontalHeader().setStretchLastSection(True)
        self.budget_table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows)
        self.budget_table.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.budget_table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        self.budget_table.verticalHeader().setVisible(False)
        self.budget_table.setColumnHidden(0, True)
        layout.addWidget(self.budget_table)

        buttons = QtWidgets.QHBoxLayout()
        self.add_budget_btn = QtWidgets.QPushButton("Create Budget")
        self.edit_budget_btn = QtWidgets.QPushButton("Edit Budget")
        self.delete_budget_btn = QtWidgets.QPushButton("Delete Budget")
        for btn in (self.add_budget_btn, self.edit_budget_btn, self.delete_budget_btn):
            buttons.addWidget(btn)
        layout.addLayout(buttons)

        self.add_budget_btn.clicked.connect(self.on_add_budget_clicked)
        self.edit_budget_btn.clicked.connect(self.on_edit_budget_clicked)
        self.delete_budget_btn.clicked.connect(self.on_delete_budget_clicked)

        tab.setLayout(layout)
        return tab

    def _apply_stylesheet(self) -> None:
        """Load and apply a stylesheet if the file exists; otherwise skip quietly."""
        path = Path(STYLESHEET_PATH)
        if path.exists():
            with path.open("r", encoding="utf-8") as f:
                self.setStyleSheet(f.read())
            logger.debug("Applied stylesheet: %s", path)
        else:
            logger.debug("Stylesheet not found at %s; skipping", path)

    def show_error(self, title: str, message: str, exc: Optional[Exception] = None) -> None:
        """Log and present a critical message box to the user."""
        if exc:
            logger.error("%s: %s", title, message, exc_info=exc)
        else:
            logger.error("%s: %s", title, message)
        QtWidgets.QMessageBox.critical(self, title, message)

    def update_text(self, message: str):
        self.text_display.append(message)

    def _has_repository(self) -> bool:
        if self.repository is None:
            logger.warning("No repository available")
            self.status.showMessage("No data store available")
            return False
        return True

    def _confirm(self, title: str, question: str) -> bool:
        reply = QtWidgets.QMessageBox.question(
            self,
            title,
            question,
            QtWidgets.QMessageBox.StandardButton.Yes | QtWidgets.QMessageBox.StandardButton.No,
        )
        return reply == QtWidgets.QMessageBox.StandardButton.Yes

    # --- Loading ---
    def refresh(self) -> None:
        """Reload summary, transactions and budgets from the repository."""
        if not self._has_repository():
            return
        self.load_summary()
        self.load_transactions()
        self.load_budgets()

    def load_summary(self) -> None:
        if not self._has_repository():
            return
        income = self.repository.total_income()
        expenses = self.repository.total_expenses()
        net = self.repository.net_balance()
        self.income_label.setText(f"Income\n{_money(income)}")
        self.expenses_label.setText(f"Expenses\n{_money(expenses)}")
        self.net_label.setText(f"Net Balance\n{_money(net)}")
        color = INCOME_COLOR if net >= 0 else EXPENSE_COLOR
        self.net_label.setStyleSheet(f"font-weight: bold; font-size: 13px; color: {color.name()};")

    def _query_transactions(self, filters: dict) -> list:
        if "start_date" in filters or "end_date" in filters:
            rows = self.repository.get_transactions_by_date_range(
                filters.get("start_date"), filters.get("end_date")
            )
        elif "category" in filters:
            rows = self.repository.get_transactions_by_category(filters["category"])
        else:
            rows = self.repository.get_transactions()
        if "category" in filters:
            rows = [t for t in rows if t.category == filters["category"]]
        if "type" in filters:
            rows = [t for t in rows if t.type == filters["type"]]
        # newest first
        return sorted(rows, key=lambda t: t.date, reverse=True)

    def load_transactions(self) -> None:
        """Populate the transactions table, honouring the active filter."""
        if not self._has_repository():
            return
        try:
            rows = self._query_transactions(self._filters)
        except Exception as e:
            self.show_error("Load failed", "Failed to load transactions", e)
            self.status.showMessage("Load failed")
            return
        self._populate_transactions(rows)
        if self._filters:
            self.status.showMessage(f"{len(rows)} transaction(s) match the filter")

    def _populate_transactions(self, rows: List) -> None:
        """Populate the transactions table with Transaction objects."""
        self.tx_table.setRowCount(len(rows))
        for r_idx, tx in enumerate(rows):
            amount_item = QtWidgets.QTableWidgetItem(f"{tx.amount:,.2f}")
            amount_item.setForeground(QtGui.QBrush(INCOME_COLOR if tx.is_income else EXPENSE_COLOR))
            amount_item.setTextAlignment(
                QtCore.Qt.AlignmentFlag.AlignRight | QtCore.Qt.AlignmentFlag.AlignVCenter
            )
            self.tx_table.setItem(r_idx, 0, QtWidgets.QTableWidgetItem(str(tx.id)))
            self.tx_table.setItem(r_idx, 1, QtWidgets.QTableWidgetItem(tx.date.isoformat()))
            self.tx_table.setItem(r_idx, 2, QtWidgets.QTableWidgetItem(tx.description))
            self.tx_table.setItem(r_idx, 3, QtWidgets.QTableWidgetItem(tx.category))
            self.tx_table.setItem(r_idx, 4, QtWidgets.QTableWidgetItem(tx.type.capitalize()))
            self.tx_table.setItem(r_idx, 5, amount_item)
        self.tx_table.resizeColumnsToContents()

    def load_budgets(self) -> None:
        if not self._has_repository():
            return
        try:
            statuses = self.repository.budget_vs_actual()
        except Exception as e:
            self.show_error("Load failed", "Failed to load budgets", e)
            return
        self._populate_budgets(statuses)

    def _populate_budgets(self, statuses: List) -> None:
        self.budget_table.setRowCount(len(statuses))
        for r_idx, s in enumerate(statuses):
            pct = "n/a" if s.percentage is None else f"{s.percentage:.1f}%"
            pct_item = QtWidgets.QTableWidgetItem(pct)
            if s.percentage is None or s.percentage > 100:
                pct_item.setForeground(QtGui.QBrush(EXPENSE_COLOR))
            self.budget_table.setItem(r_idx, 0, QtWidgets.QTableWidgetItem(str(s.budget_id)))
            self.budget_table.setItem(r_idx, 1, QtWidgets.QTableWidgetItem(s.category))
            self.budget_table.setItem(r_idx, 2, QtWidgets.QTableWidgetItem(s.period.capitalize()))
            self.budget_table.setItem(r_idx, 3, QtWidgets.QTableWidgetItem(f"{s.budget_amount:,.2f}"))
            self.budget_table.setItem(r_idx, 4, QtWidgets.QTableWidgetItem(f"{s.actual_spent:,.2f}"))
            self.budget_table.setItem(r_idx, 5, QtWidgets.QTableWidgetItem(f"{s.remaining:,.2f}"))
            self.budget_table.setItem(r_idx, 6, pct_item)
        self.budget_table.resizeColumnsToContents()

    @staticmethod
    def _selected_id(table: QtWidgets.QTableWidget) -> Optional[str]:
        """Return the hidden id of the selected row, or None."""
        sel = table.selectionModel().selectedRows()
        if not sel:
            return None
        item = table.item(sel[0].row(), 0)
        return item.text() if item else None

    def _get_selected_transaction_id(self) -> Optional[str]:
        return self._selected_id(self.tx_table)

    def _get_selected_budget_id(self) -> Optional[str]:
        return self._selected_id(self.budget_table)

    def closeEvent(self, event):
        try:
            settings = QtCore.QSettings("pbm", APP_NAME)
            settings.setValue("geometry", self.saveGeometry())
        except Exception:
            logger.exception("Failed to save window geometry")
        super().closeEvent(event)

    # --- Transactions ---
    def on_add_clicked(self) -> None:
        """Open the transaction form and save a new entry."""
        logger.debug("on_add_clicked")
        if not self._has_repository():
            return
        dlg = TransactionForm(self, repository=self.repository)
        if not dlg.exec():
            self.status.showMessage("Add cancelled")
            return
        tx = dlg.get_transaction()
        if tx is None:
            self.status.showMessage("No transaction data")
            return
        if not self.repository.save_transaction(tx):
            self.show_error("Save failed", "Failed to save transaction")
            self.status.showMessage("Save failed")
            return
        self.update_text(f"Transaction added: {tx.description} ({tx.type}, {tx.amount})")
        self.refresh()
        self.status.showMessage("Transaction saved")

    def on_edit_clicked(self) -> None:
        logger.debug("on_edit_clicked")
        if not self._has_repository():
            return
        tx_id = self._get_selected_transaction_id()
        if tx_id is None:
            QtWidgets.QMessageBox.information(self, "Select transaction", "Please select a transaction to edit from the table.")
            self.status.showMessage("No transaction selected")
            return

        tx = self.repository.get_transaction_by_id(tx_id)
        if tx is None:
            self.show_error("Load failed", "The selected transaction no longer exists")
            self.refresh()
            return

        dlg = TransactionForm(self, repository=self.repository, transaction=tx)
        if not dlg.exec():
            self.status.showMessage("Edit cancelled")
            return
        updated = dlg.get_transaction()
        if updated is None:
            self.status.showMessage("No changes made")
            return
        if not self.repository.save_transaction(updated):
            self.show_error("Update failed", "Failed to update transaction")
            self.status.showMessage("Update failed")
            return
        self.update_text(f"Transaction updated: {updated.description}")
        self.refresh()
        self.status.showMessage("Transaction updated")

    def on_delete_clicked(self) -> None:
        """Delete the selected transaction after confirmation."""
        logger.debug("on_delete_clicked")
        if not self._has_repository():
            return
        tx_id = self._get_selected_transaction_id()
        if tx_id is None:
            QtWidgets.QMessageBox.information(self, "Select transaction", "Please select a transaction to delete from the table.")
            self.status.showMessage("No transaction selected")
            return
        if not self._confirm("Confirm delete", "Are you sure you want to delete this transaction?"):
            self.status.showMessage("Delete cancelled")
            return
        if not self.repository.delete_transaction(tx_id):
            self.show_error("Delete failed", "Failed to delete transaction")
            self.status.showMessage("Delete failed")
            return
        self.update_text("Transaction deleted")
        self.refresh()
        self.status.showMessage("Transaction deleted")

    def on_filter_search_clicked(self) -> None:
        """Collect filter criteria and reload the table with them."""
        logger.debug("on_filter_search_clicked")
        if not self._has_repository():
            return
        dlg = FilterDialog(self, categories=self.repository.all_categories())
        if dlg.exec():
            self._filters = dlg.get_filters()
            self.load_transactions()

    def on_clear_filter_clicked(self) -> None:
        self._filters = {}
        self.load_transactions()
        self.status.showMessage("Filter cleared")

    # --- Budgets ---
    def on_add_budget_clicked(self) -> None:
        logger.debug("on_add_budget_clicked")
        if not self._has_repository():
            return
        dlg = BudgetForm(self, repository=self.repository)
        if not dlg.exec():
            self.status.showMessage("Budget creation cancelled")
            return
        budget = dlg.get_budget()
        if budget is None:
            return
        if not self.repository.save_budget(budget):
            self.show_error("Save failed", "Failed to save budget")
            self.status.showMessage("Save failed")
            return
        self.update_text(f"Budget created: {budget.category} ({budget.period}, {budget.amount})")
        self.refresh()
        self.status.showMessage("Budget saved")

    def on_edit_budget_clicked(self) -> None:
        logger.debug("on_edit_budget_clicked")
        if not self._has_repository():
            return
        budget_id = self._get_selected_budget_id()
        if budget_id is None:
            QtWidgets.QMessageBox.information(self, "Select budget", "Please select a budget to edit.")
            return
        budget = self.repository.get_budget_by_id(budget_id)
        if budget is None:
            self.show_error("Load failed", "The selected budget no longer exists")
            self.refresh()
            return
        dlg = BudgetForm(self, repository=self.repository, budget=budget)
        if not dlg.exec():
            self.status.showMessage("Edit cancelled")
            return
        updated = dlg.get_budget()
        if updated is None:
            return
        if not self.repository.save_budget(updated):
            self.show_error("Update failed", "Failed to update budget")
            return
        self.update_text(f"Budget updated: {updated.category}")
        self.refresh()
        self.status.showMessage("Budget updated")

    def on_delete_budget_clicked(self) -> None:
        logger.debug("on_delete_budget_clicked")
        if not self._has_repository():
            return
        budget_id = self._get_selected_budget_id()
        if budget_id is None:
            QtWidgets.QMessageBox.information(self, "Select budget", "Please select a budget to delete.")
            return
        if not self._confirm("Confirm delete", "Are you sure you want to delete this budget?"):
            self.status.showMessage("Delete cancelled")
            return
        if not self.repository.delete_budget(budget_id):
            self.show_error("Delete failed", "Failed to delete budget")
            return
        self.update_text("Budget deleted")
        self.refresh()
        self.status.showMessage("Budget deleted")

    # --- Reports & utilities ---
    def on_statistics_clicked(self) -> None:
        """Show the reports view in a dialog."""
        logger.debug("on_statistics_clicked")
        if not self._has_repository():
            return
        try:
            dialog = QtWidgets.QDialog(self)
            dialog.setWindowTitle("Reports & Statistics")
            dialog.setGeometry(100, 100, 1000, 600)

            reports_view = ReportsView(parent=dialog, repository=self.repository)

            layout = QtWidgets.QVBoxLayout()
            layout.addWidget(reports_view)
            dialog.setLayout(layout)

            dialog.exec()
            self.status.showMessage("Statistics dialog closed")
        except Exception as e:
            self.show_error("Error", "Unable to open statistics view", e)

    def on_import_export_clicked(self) -> None:
        """Ask which import/export to run and dispatch to it."""
        logger.debug("on_import_export_clicked")
        if not self._has_repository():
            return

        msg_box = QtWidgets.QMessageBox(self)
        msg_box.setWindowTitle("Import or Export")
        msg_box.setText("What would you like to do?")
        msg_box.setIcon(QtWidgets.QMessageBox.Icon.Question)

        export_csv_btn = msg_box.addButton("Export CSV", QtWidgets.QMessageBox.ButtonRole.AcceptRole)
        import_csv_btn = msg_box.addButton("Import CSV", QtWidgets.QMessageBox.ButtonRole.AcceptRole)
        export_json_btn = msg_box.addButton("Backup (JSON)", QtWidgets.QMessageBox.ButtonRole.AcceptRole)
        import_json_btn = msg_box.addButton("Restore (JSON)", QtWidgets.QMessageBox.ButtonRole.AcceptRole)
        msg_box.addButton(QtWidgets.QMessageBox.StandardButton.Cancel)

        msg_box.exec()

        clicked_btn = msg_box.clickedButton()
        if clicked_btn == export_csv_btn:
            self._handle_export("csv")
        elif clicked_btn == import_csv_btn:
            self._handle_import("csv")
        elif clicked_btn == export_json_btn:
            self._handle_export("json")
        elif clicked_btn == import_json_btn:
            self._handle_import("json")
        else:
            self.status.showMessage("Import/Export cancelled")

    def _handle_export(self, fmt: str = "csv") -> None:
        """Export transactions to CSV, or everything to a JSON backup."""
        logger.debug("_handle_export(%s)", fmt)
        file_filter = "CSV Files (*.csv);;All Files (*)" if fmt == "csv" else "JSON Files (*.json);;All Files (*)"
        file_path, _ = QtWidgets.QFileDialog.getSaveFileName(self, "Export", "", file_filter)
        if not file_path:
            self.status.showMessage("Export cancelled")
            return

        if fmt == "csv":
            success = self.repository.export_to_csv(Path(file_path))
        else:
            success = self.repository.export_to_json(Path(file_path))

        if not success:
            self.show_error("Export failed", "Failed to export data")
            self.status.showMessage("Export failed")
            return
        self.update_text(f"Exported to {file_path}")
        self.status.showMessage("Export successful")
        QtWidgets.QMessageBox.information(self, "Success", f"Data exported to:\n{file_path}")

    def _handle_import(self, fmt: str = "csv") -> None:
        """Import transactions from CSV, or restore a JSON backup."""
        logger.debug("_handle_import(%s)", fmt)
        file_filter = "CSV Files (*.csv);;All Files (*)" if fmt == "csv" else "JSON Files (*.json);;All Files (*)"
        file_path, _ = QtWidgets.QFileDialog.getOpenFileName(self, "Import", "", file_filter)
        if not file_path:
            self.status.showMessage("Import cancelled")
            return

        if fmt == "csv":
            question = f"Import transactions from:\n{file_path}\n\nThis will add transactions to your data."
        else:
            question = f"Restore data from:\n{file_path}\n\nCollections in the file will replace your current data."
        if not self._confirm("Confirm Import", question):
            self.status.showMessage("Import cancelled")
            return

        if fmt == "csv":
            count = self.repository.import_from_csv(Path(file_path))
            if count == 0:
                self.show_error("Import warning", "No transactions were imported from the file")
                self.status.showMessage("Import completed with no rows")
                return
            message = f"Imported {count} transaction(s) from {file_path}"
        else:
            if not self.repository.import_from_json(Path(file_path)):
                self.show_error("Import failed", "Some data could not be restored; see the log for details")
                self.status.showMessage("Import failed")
                self.refresh()
                return
            message = f"Restored data from {file_path}"

        self.update_text(message)
        self.refresh()
        self.status.showMessage("Import successful")
        QtWidgets.QMessageBox.information(self, "Success", message)

    def on_reset_clicked(self) -> None:
        """Erase all data after confirmation and reseed default categories."""
        logger.debug("on_reset_clicked")
        if not self._has_repository():
            return
        if not self._confirm("Reset all data", "Delete ALL transactions, budgets and categories? This cannot be undone."):
            self.status.showMessage("Reset cancelled")
            return
        self.repository.reset_all()
        self._filters = {}
        self.update_text("All data cleared")
        self.refresh()
        self.status.showMessage("All data cleared")
