'''
    File Name: main.py
    Version: 3.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
import sys
import logging

from PyQt6 import QtWidgets

from config import APP_NAME, APP_VERSION, LOGGING_CONFIG, ensure_data_dir
from database.repository import BudgetRepository
from database.store import create_store
from ui.main_window import MainWindow

logging.basicConfig(**LOGGING_CONFIG)
logger = logging.getLogger(__name__)


def build_repository() -> BudgetRepository:
    """Create the configured store and the single repository the UI works with."""
    store = create_store()
    logger.info("Using %s", type(store).__name__)
    return BudgetRepository(store)


def main() -> int:
    # Ensure runtime dirs exist early
    try:
        ensure_data_dir()
    except Exception:
        logger.exception("Failed to ensure data directory exists")

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)

    # Friendly global exception hook that logs and shows a dialog
    def _excepthook(exc_type, exc_value, exc_tb):
        logger.error("Uncaught exception", exc_info=(exc_type, exc_value, exc_tb))
        try:
            QtWidgets.QMessageBox.critical(None, "Unhandled Exception", str(exc_value))
        except Exception:
            logger.debug("Could not show the unhandled exception dialog")
        # Delegate to default handler as well
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = _excepthook

    repository = build_repository()
    window = MainWindow(repository=repository)
    # Show window (MainWindow restores geometry / default size)
    window.show()

    # Use exec() (PyQt6) and return exit code
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
