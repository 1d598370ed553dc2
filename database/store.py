'''
    File Name: store.py
    Version: 3.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
    Description: Durable storage for the three persisted collections.
'''

from abc import ABC, abstractmethod
from datetime import datetime, timezone
import json
import logging
import os
from pathlib import Path
import sqlite3
import tempfile
from typing import Any, Dict, Optional, Union

import config

logger = logging.getLogger(__name__)

TRANSACTIONS = "transactions"
BUDGETS = "budgets"
CATEGORIES = "categories"
COLLECTIONS = (TRANSACTIONS, BUDGETS, CATEGORIES)


class Store(ABC):
    """Key-value storage of whole collections.

    Every collection is stored as one JSON document and replaced as a whole.
    Implementations never raise from `read`, `write` or `erase`:

    - `read` returns None when nothing was written or the medium is
      unavailable or corrupt.
    - `write` returns False on serialization or medium errors and leaves the
      previously stored value intact.
    - `erase` is idempotent.
    """

    @staticmethod
    def storage_key(collection: str) -> str:
        return config.STORAGE_KEYS.get(collection, collection)

    @staticmethod
    def _serialize(collection: str, value: Any) -> Optional[str]:
        try:
            return json.dumps(value)
        except (TypeError, ValueError):
            logger.exception("Failed serializing collection %s", collection)
            return None

    @abstractmethod
    def read(self, collection: str) -> Optional[Any]:
        ...

    @abstractmethod
    def write(self, collection: str, value: Any) -> bool:
        ...

    @abstractmethod
    def erase(self, collection: str) -> None:
        ...


class MemoryStore(Store):
    """Process-local store; values are kept serialized so failures match disk backends."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    def read(self, collection: str) -> Optional[Any]:
        raw = self._data.get(self.storage_key(collection))
        if raw is None:
            return None
        return json.loads(raw)

    def write(self, collection: str, value: Any) -> bool:
        payload = self._serialize(collection, value)
        if payload is None:
            return False
        self._data[self.storage_key(collection)] = payload
        return True

    def erase(self, collection: str) -> None:
        self._data.pop(self.storage_key(collection), None)


class JsonFileStore(Store):
    """One `<key>.json` file per collection inside `directory`."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, collection: str) -> Path:
        return self.directory / f"{self.storage_key(collection)}.json"

    def read(self, collection: str) -> Optional[Any]:
        path = self._path(collection)
        if not path.exists():
            return None
        try:
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError):
            logger.warning("Unreadable collection file %s; treating as empty", path, exc_info=True)
            return None

    def write(self, collection: str, value: Any) -> bool:
        payload = self._serialize(collection, value)
        if payload is None:
            return False
        path = self._path(collection)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # write next to the target, then swap it in
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.directory, suffix=".tmp", delete=False
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
            os.replace(tmp_name, path)
            return True
        except OSError:
            logger.exception("Failed writing collection %s to %s", collection, path)
            if tmp_name and os.path.exists(tmp_name):
                try:
                    os.remove(tmp_name)
                except OSError:
                    logger.debug("Could not remove temp file %s", tmp_name)
            return False

    def erase(self, collection: str) -> None:
        path = self._path(collection)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError:
            logger.exception("Failed erasing collection file %s", path)


class SQLiteStore(Store):
    """All collections in a single SQLite table keyed by storage key."""

    def __init__(self, db_path: Union[str, Path, None] = None):
        # prefer explicit path, otherwise config value
        self.db_path = Path(db_path) if db_path is not None else Path(config.DATABASE_PATH)
        self._ready = False

    def _connect(self):
        """Return a new sqlite3 connection to the configured DB path."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(str(self.db_path))

    def ensure_database(self) -> None:
        """
        Ensure the SQLite database file exists and initialize schema.
        Safe to call multiple times.
        """
        if self._ready:
            return
        logger.debug("Ensuring database exists at %s", self.db_path)
        conn = self._connect()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS collections (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
                """
            )
            conn.commit()
        finally:
            conn.close()
        self._ready = True
        logger.info("Initialized store database at %s", self.db_path)

    def read(self, collection: str) -> Optional[Any]:
        key = self.storage_key(collection)
        try:
            self.ensure_database()
            conn = self._connect()
            try:
                row = conn.execute("SELECT value FROM collections WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except Exception:
            logger.exception("Failed reading collection %s", collection)
            return None
        if row is None:
            return None
        try:
            return json.loads(row[0])
        except ValueError:
            logger.warning("Corrupt value stored for collection %s; treating as empty", collection)
            return None

    def write(self, collection: str, value: Any) -> bool:
        payload = self._serialize(collection, value)
        if payload is None:
            return False
        key = self.storage_key(collection)
        try:
            self.ensure_database()
            conn = self._connect()
            try:
                # connection context manager commits or rolls back the replace
                with conn:
                    conn.execute(
                        "INSERT OR REPLACE INTO collections (key, value, updated_at) VALUES (?, ?, ?)",
                        (key, payload, datetime.now(timezone.utc).isoformat()),
                    )
            finally:
                conn.close()
            return True
        except Exception:
            logger.exception("Failed writing collection %s", collection)
            return False

    def erase(self, collection: str) -> None:
        key = self.storage_key(collection)
        try:
            self.ensure_database()
            conn = self._connect()
            try:
                with conn:
                    conn.execute("DELETE FROM collections WHERE key = ?", (key,))
            finally:
                conn.close()
        except Exception:
            logger.exception("Failed erasing collection %s", collection)


def create_store(backend: Optional[str] = None, location: Union[str, Path, None] = None) -> Store:
    """Build the configured store backend ("sqlite", "json" or "memory")."""
    backend = (backend or config.STORAGE_BACKEND).lower()
    location = location if location is not None else config.STORAGE_LOCATION
    if backend == "sqlite":
        return SQLiteStore(location or config.DATABASE_PATH)
    if backend == "json":
        return JsonFileStore(location or config.DATA_DIR)
    if backend == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown storage backend: {backend!r}")
