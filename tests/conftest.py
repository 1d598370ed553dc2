'''
    File Name: conftest.py
    Version: 1.0.0
    Date: 17/10/2026
    Author: Pablo Bartolomé Molina
'''
import os
from datetime import datetime, timezone

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from database.repository import BudgetRepository
from database.store import MemoryStore


class FixedClock:
    """Callable clock returning a settable instant."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class SequentialIds:
    def __init__(self):
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"id-{self.count}"


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def repo(store, clock):
    return BudgetRepository(store, clock=clock, id_factory=SequentialIds())
