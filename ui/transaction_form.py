'''
    File Name: transaction_form.py
    Version: 2.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
import logging
from typing import Optional

from PyQt6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QFormLayout,
    QLineEdit,
    QDoubleSpinBox,
    QDateEdit,
    QComboBox,
    QPushButton,
    QHBoxLayout,
    QMessageBox,
)
from PyQt6.QtCore import QDate

from models.transaction import TRANSACTION_TYPES, Transaction

logger = logging.getLogger(__name__)


class TransactionForm(QDialog):
    """Dialog to create or edit a transaction.

    Usage:
        dlg = TransactionForm(parent, repository=repo)
        if dlg.exec():
            tx = dlg.get_transaction()

    The dialog only builds the `Transaction`; saving it is up to the caller.
    When editing, the returned transaction keeps the original id and
    creation time so saving replaces the stored record.
    """

    def __init__(self, parent=None, repository=None, transaction: Optional[Transaction] = None, kind: str = "expense"):
        super().__init__(parent)
        self.repository = repository
        self._original = transaction
        self._transaction: Optional[Transaction] = None

        self.setWindowTitle("Edit Transaction" if transaction else "Add Transaction")
        self.setup_ui()

        if transaction:
            # populate fields for editing
            self._load_transaction(transaction)
        else:
            self.type.setCurrentText(kind)

    def setup_ui(self) -> None:
        layout = QVBoxLayout()

        form = QFormLayout()

        self.type = QComboBox()
        self.type.addItems(list(TRANSACTION_TYPES))
        form.addRow("Type:", self.type)

        self.description = QLineEdit()
        form.addRow("Description:", self.description)

        self.amount = QDoubleSpinBox()
        self.amount.setMinimum(0)
        self.amount.setMaximum(1_000_000_000)
        self.amount.setDecimals(2)
        form.addRow("Amount:", self.amount)

        self.date = QDateEdit()
        self.date.setCalendarPopup(True)
        self.date.setDisplayFormat("yyyy-MM-dd")
        self.date.setDate(QDate.currentDate())
        form.addRow("Date:", self.date)

        self.category = QComboBox()
        self.category.setEditable(True)
        form.addRow("Category:", self.category)

        layout.addLayout(form)

        # Buttons
        btn_layout = QHBoxLayout()
        self.save_btn = QPushButton("Save")
        self.cancel_btn = QPushButton("Cancel")
        btn_layout.addStretch(1)
        btn_layout.addWidget(self.save_btn)
        btn_layout.addWidget(self.cancel_btn)

        layout.addLayout(btn_layout)

        self.setLayout(layout)

        # Connections
        self.save_btn.clicked.connect(self.save_transaction)
        self.cancel_btn.clicked.connect(self.reject)
        self.type.currentTextChanged.connect(self._load_categories)

        # Category list follows the selected type
        self._load_categories(self.type.currentText())

    def _load_transaction(self, tx: Transaction) -> None:
        self.type.setCurrentText(tx.type)
        self.description.setText(tx.description)
        self.amount.setValue(float(tx.amount))
        self.date.setDate(QDate(tx.date.year, tx.date.month, tx.date.day))
        idx = self.category.findText(tx.category)
        if idx >= 0:
            self.category.setCurrentIndex(idx)
        else:
            self.category.setEditText(tx.category)

    def _load_categories(self, kind: str) -> None:
        self.category.clear()
        if self.repository is None:
            return
        try:
            for name in self.repository.get_categories_by_type(kind):
                self.category.addItem(str(name))
        except Exception:
            # keep the form usable with a free-text category
            logger.exception("Failed loading categories for %s", kind)

    def save_transaction(self) -> None:
        """Validate the fields, build the transaction and accept the dialog."""
        desc = self.description.text().strip()
        cat = self.category.currentText().strip()

        if not desc:
            QMessageBox.warning(self, "Validation", "Description must not be empty.")
            return
        if not cat:
            QMessageBox.warning(self, "Validation", "Please choose a category.")
            return

        try:
            tx = Transaction(
                type=self.type.currentText(),
                amount=f"{self.amount.value():.2f}",
                category=cat,
                description=desc,
                date=self.date.date().toString("yyyy-MM-dd"),
            )
        except ValueError as e:
            QMessageBox.warning(self, "Validation", str(e))
            return

        if self._original is not None:
            tx.id = self._original.id
            tx.created_at = self._original.created_at

        self._transaction = tx
        self.accept()

    def get_transaction(self) -> Optional[Transaction]:
        return self._transaction
