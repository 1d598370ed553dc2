'''
    File Name: reports_view.py
    Version: 2.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
import logging
from datetime import date
from typing import Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSizePolicy, QComboBox, QSpinBox
from PyQt6.QtCore import Qt

from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas, NavigationToolbar2QT

from config import DEFAULT_CURRENCY
from models.period import period_range

logger = logging.getLogger(__name__)

CHART_TYPES = {
    "By Category": "category",
    "Monthly Trend": "month",
    "Income vs Expenses": "summary",
    "Budget vs Actual": "budget",
}

PERIODS = {
    "This Month": "month",
    "This Quarter": "quarter",
    "This Year": "year",
    "All Time": "all",
}

INCOME_COLOR = "#22c55e"
EXPENSE_COLOR = "#ef4444"
WARNING_COLOR = "#fbbf24"
PALETTE = ["#4c72b0", "#dd8452", "#55a868", "#c44e52", "#8172b3", "#937860", "#da8bc3"]


class ReportsView(QWidget):
    """Reports view with a matplotlib canvas over the repository aggregates.

    Features:
    - Spending by category, monthly income/expense trend, income vs
      expenses and budget vs actual charts
    - Period selector (month / quarter / year / all time) for the
      category and income-vs-expenses charts, year selector for the trend
    - Summary statistics label and clear empty state messaging
    """

    def __init__(self, parent=None, repository=None, today: Optional[date] = None):
        super().__init__(parent)
        self.repository = repository
        self._today = today
        self._current_chart_type = "category"
        self._current_period = "month"

        self._figure = Figure(figsize=(10, 6), dpi=100)
        self._canvas = FigureCanvas(self._figure)
        self._canvas.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._toolbar = NavigationToolbar2QT(self._canvas, self)

        # Create a single axis that we'll reuse for all plots
        self._ax = self._figure.add_subplot(111)

        self.setup_ui()

        try:
            self.plot_data()
        except Exception:
            logger.exception("Failed to initialize ReportsView")

    def today(self) -> date:
        if self._today is not None:
            return self._today
        if self.repository is not None:
            return self.repository.today()
        return date.today()

    def setup_ui(self) -> None:
        """Build the UI: title, selectors, toolbar, canvas, stats display and refresh button."""
        main_layout = QVBoxLayout()

        title = QLabel("Reports & Statistics")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-weight: bold; font-size: 14px;")
        main_layout.addWidget(title)

        controls_layout = QHBoxLayout()

        self._chart_combo = QComboBox()
        self._chart_combo.addItems(list(CHART_TYPES))
        self._chart_combo.currentTextChanged.connect(self._on_chart_type_changed)

        self._period_combo = QComboBox()
        self._period_combo.addItems(list(PERIODS))
        self._period_combo.currentTextChanged.connect(self._on_period_changed)

        self._year_spin = QSpinBox()
        self._year_spin.setRange(1970, 9999)
        self._year_spin.setValue(self.today().year)
        self._year_spin.valueChanged.connect(lambda _: self.plot_data())

        controls_layout.addWidget(QLabel("Chart Type:"))
        controls_layout.addWidget(self._chart_combo)
        controls_layout.addWidget(QLabel("Period:"))
        controls_layout.addWidget(self._period_combo)
        controls_layout.addWidget(QLabel("Year:"))
        controls_layout.addWidget(self._year_spin)
        controls_layout.addStretch()

        refresh_btn = QPushButton("Refresh")
        refresh_btn.clicked.connect(self.refresh)
        controls_layout.addWidget(refresh_btn)

        main_layout.addLayout(controls_layout)

        main_layout.addWidget(self._toolbar)
        main_layout.addWidget(self._canvas)

        self._stats_label = QLabel("")
        self._stats_label.setStyleSheet("padding: 5px; background-color: #f0f0f0; border-radius: 3px;")
        main_layout.addWidget(self._stats_label)

        self.setLayout(main_layout)

    def _on_chart_type_changed(self, chart_type: str) -> None:
        """Handle chart type selection change."""
        self._current_chart_type = CHART_TYPES.get(chart_type, "category")
        self.plot_data()

    def _on_period_changed(self, period: str) -> None:
        self._current_period = PERIODS.get(period, "month")
        self.plot_data()

    def refresh(self) -> None:
        """Re-read the repository and re-plot."""
        try:
            self.plot_data()
        except Exception:
            logger.exception("Failed to refresh reports")

    def _range(self):
        return period_range(self._current_period, self.today())

    def _update_stats(self) -> None:
        """Update statistics label with totals for the selected period."""
        if self.repository is None:
            self._stats_label.setText("No data available")
            return
        start, end = self._range()
        income = self.repository.total_income(start, end)
        expenses = self.repository.total_expenses(start, end)
        net = income - expenses
        self._stats_label.setText(
            f"Income: {income:,.2f} {DEFAULT_CURRENCY} | Expenses: {expenses:,.2f} {DEFAULT_CURRENCY} "
            f"| Net: {net:,.2f} {DEFAULT_CURRENCY}"
        )

    def _show_message(self, message: str) -> None:
        self._ax.text(0.5, 0.5, message, ha="center", va="center", fontsize=12, color="#666666")
        self._ax.set_xticks([])
        self._ax.set_yticks([])

    def plot_data(self) -> None:
        """Plot based on current chart type."""
        self._ax.clear()

        if self.repository is None:
            self._show_message("No data available")
            self._update_stats()
            self._canvas.draw()
            return

        try:
            if self._current_chart_type == "category":
                self._plot_by_category(self._ax)
            elif self._current_chart_type == "month":
                self._plot_by_month(self._ax)
            elif self._current_chart_type == "summary":
                self._plot_summary(self._ax)
            elif self._current_chart_type == "budget":
                self._plot_budgets(self._ax)
            self._update_stats()
            self._canvas.draw()
        except Exception:
            logger.exception("Failed to plot data for chart type: %s", self._current_chart_type)
            self._ax.clear()
            self._ax.text(0.5, 0.5, "Error rendering chart", ha="center", va="center")
            self._canvas.draw()

    def _plot_by_category(self, ax) -> None:
        """Pie of expenses per category for the selected period."""
        start, end = self._range()
        spending = self.repository.spending_by_category(start, end)
        if not spending:
            self._show_message("No expense data available\nAdd transactions to see statistics")
            return
        labels = list(spending)
        values = [float(v) for v in spending.values()]
        colors = [PALETTE[i % len(PALETTE)] for i in range(len(labels))]
        ax.pie(values, labels=labels, colors=colors, autopct="%1.1f%%", startangle=90)
        ax.set_title("Spending by Category")
        ax.axis("equal")

    def _plot_by_month(self, ax) -> None:
        """Income and expense lines for the twelve months of the chosen year."""
        year = self._year_spin.value()
        series = self.repository.monthly_series(year)
        labels = [key[5:] for key in series]
        income = [float(m.income) for m in series.values()]
        expense = [float(m.expense) for m in series.values()]
        x = range(len(labels))
        ax.plot(x, income, marker="o", linewidth=2, color=INCOME_COLOR, label="Income")
        ax.plot(x, expense, marker="o", linewidth=2, color=EXPENSE_COLOR, label="Expenses")
        ax.fill_between(x, income, alpha=0.1, color=INCOME_COLOR)
        ax.fill_between(x, expense, alpha=0.1, color=EXPENSE_COLOR)
        ax.set_xticks(list(x))
        ax.set_xticklabels(labels)
        ax.set_ylabel(f"Amount ({DEFAULT_CURRENCY})")
        ax.set_title(f"Monthly Trend {year}")
        ax.legend()
        ax.grid(alpha=0.3)

    def _plot_summary(self, ax) -> None:
        """Income vs expenses bars for the selected period."""
        start, end = self._range()
        income = float(self.repository.total_income(start, end))
        expenses = float(self.repository.total_expenses(start, end))
        if income == 0 and expenses == 0:
            self._show_message("No transactions in this period")
            return
        bars = ax.bar(["Income", "Expenses"], [income, expenses], color=[INCOME_COLOR, EXPENSE_COLOR])
        for bar, value in zip(bars, (income, expenses)):
            ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(),
                    f"{value:,.2f}", ha="center", va="bottom", fontsize=10)
        ax.set_ylabel(f"Amount ({DEFAULT_CURRENCY})")
        ax.set_title("Income vs Expenses")
        ax.grid(axis="y", alpha=0.3)

    def _plot_budgets(self, ax) -> None:
        """Budget amount next to actual spending for every budget."""
        statuses = self.repository.budget_vs_actual(self.today())
        if not statuses:
            self._show_message("No budgets set\nCreate a budget to track spending")
            return
        labels = [s.category for s in statuses]
        x = list(range(len(labels)))
        width = 0.4
        spent_colors = []
        for s in statuses:
            if s.percentage is None or s.percentage > 100:
                spent_colors.append(EXPENSE_COLOR)
            elif s.percentage > 80:
                spent_colors.append(WARNING_COLOR)
            else:
                spent_colors.append(INCOME_COLOR)
        ax.bar([i - width / 2 for i in x], [float(s.budget_amount) for s in statuses],
               width, color="#4c72b0", label="Budget")
        ax.bar([i + width / 2 for i in x], [float(s.actual_spent) for s in statuses],
               width, color=spent_colors, label="Spent")
        ax.set_xticks(x)
        ax.set_xticklabels(labels, rotation=45, ha="right")
        ax.set_ylabel(f"Amount ({DEFAULT_CURRENCY})")
        ax.set_title("Budget vs Actual")
        ax.legend()
        ax.grid(axis="y", alpha=0.3)
