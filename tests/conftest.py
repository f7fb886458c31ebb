"""Shared fixtures for the SWOT tests."""

import pytest

from swot.items.models import AnalysisSet, Item, Priority
from swot.session import Session
from swot.storage.repository import Repository


class MemoryStore:
    """Dict-backed key-value store with the same get/set surface as RedisStore."""

    def __init__(self, initial=None):
        self.values = dict(initial or {})
        self.writes = 0

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value
        self.writes += 1


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def repository(store):
    return Repository(store, key="swot-test")


@pytest.fixture
def session(repository):
    return Session(repository)


@pytest.fixture
def sample_set():
    """One item per category, with fixed ids and timestamps."""
    return AnalysisSet(
        strengths=[Item(id="s1", text="Loyal customers", priority=Priority.HIGH, responsible="Ana", created_at=1000)],
        weaknesses=[Item(id="w1", text="Slow delivery", priority=Priority.CRITICAL, created_at=2000)],
        opportunities=[Item(id="o1", text="New market", priority=Priority.LOW, responsible="Bruno", created_at=3000)],
        threats=[Item(id="t1", text="Price war", created_at=4000)],
    )
