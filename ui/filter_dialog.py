'''
    File Name: filter_dialog.py
    Version: 2.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
from typing import Iterable, Optional
from PyQt6 import QtWidgets, QtCore

from models.transaction import TRANSACTION_TYPES


class FilterDialog(QtWidgets.QDialog):
    """Simple dialog to collect filter/search criteria for transactions.

    `get_filters()` returns a dict that may contain 'category', 'type',
    'start_date' and 'end_date'. Dates are only included when the date range
    box is ticked.
    """

    def __init__(self, parent=None, categories: Optional[Iterable[str]] = None):
        super().__init__(parent)
        self.setWindowTitle("Filter / Search Transactions")
        self.resize(420, 220)

        layout = QtWidgets.QVBoxLayout()
        form = QtWidgets.QFormLayout()

        self.category = QtWidgets.QComboBox()
        self.category.addItem("")
        for c in categories or []:
            self.category.addItem(str(c))

        self.type = QtWidgets.QComboBox()
        self.type.addItem("")
        self.type.addItems(list(TRANSACTION_TYPES))

        self.use_dates = QtWidgets.QCheckBox("Restrict to date range")

        self.start_date = QtWidgets.QDateEdit()
        self.start_date.setCalendarPopup(True)
        self.start_date.setDisplayFormat("yyyy-MM-dd")
        # default to one month ago
        self.start_date.setDate(QtCore.QDate.currentDate().addMonths(-1))

        self.end_date = QtWidgets.QDateEdit()
        self.end_date.setCalendarPopup(True)
        self.end_date.setDisplayFormat("yyyy-MM-dd")
        self.end_date.setDate(QtCore.QDate.currentDate())

        self.start_date.setEnabled(False)
        self.end_date.setEnabled(False)
        self.use_dates.toggled.connect(self.start_date.setEnabled)
        self.use_dates.toggled.connect(self.end_date.setEnabled)

        form.addRow("Category:", self.category)
        form.addRow("Type:", self.type)
        form.addRow(self.use_dates)
        form.addRow("Start date:", self.start_date)
        form.addRow("End date:", self.end_date)

        layout.addLayout(form)

        buttons = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.setLayout(layout)

    def get_filters(self) -> dict:
        """Return the criteria; only keys with non-empty values are present."""
        f = {}
        cat = self.category.currentText().strip()
        if cat:
            f["category"] = cat
        kind = self.type.currentText().strip()
        if kind:
            f["type"] = kind
        if self.use_dates.isChecked():
            f["start_date"] = self.start_date.date().toString("yyyy-MM-dd")
            f["end_date"] = self.end_date.date().toString("yyyy-MM-dd")
        return f
