'''
    File Name: config.py
    Version: 3.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''

from pathlib import Path
import logging
import os

# Project paths & files
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
DB_FILENAME = "budget.db"
DATABASE_PATH = DATA_DIR / DB_FILENAME   # Path object

# Storage backend: "sqlite" (default), "json" (directory of files) or "memory"
STORAGE_BACKEND = os.environ.get("BUDGET_TRACKER_BACKEND", "sqlite")
STORAGE_LOCATION = os.environ.get("BUDGET_TRACKER_DATA") or None  # backend default when unset

# Physical keys of the three persisted collections
STORAGE_KEYS = {
    "transactions": "budget_app_transactions",
    "budgets": "budget_app_budgets",
    "categories": "budget_app_categories",
}

# App metadata
APP_NAME = "Budget Tracker"
APP_VERSION = "3.0.0"

# UI / formatting
DEFAULT_CURRENCY = "EUR"
DATE_FORMAT = "%Y-%m-%d"
STYLESHEET_PATH = BASE_DIR / "resources" / "styles.qss"
RECENT_LIMIT = 5

# Transactions CSV export column order
CSV_HEADERS = ["Date", "Description", "Category", "Type", "Amount"]

# Seeded once into an empty store; never migrated afterwards
DEFAULT_CATEGORIES = {
    "expense": [
        "Food & Dining",
        "Transportation",
        "Shopping",
        "Entertainment",
        "Bills & Utilities",
        "Healthcare",
        "Education",
        "Travel",
        "Housing",
        "Insurance",
        "Personal Care",
        "Gifts & Donations",
        "Other",
    ],
    "income": [
        "Salary",
        "Freelance",
        "Business",
        "Investments",
        "Rental Income",
        "Bonuses",
        "Other Income",
    ],
}

# Logging (simple default; main.py calls logging.basicConfig(**LOGGING_CONFIG))
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
}

# Helpers
def ensure_data_dir():
    """
    Ensure the data directory exists. Store creation should be handled
    by the store itself (see `database.store.create_store`).
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
