"""
Shared fixtures for Device Care tests.
"""

from datetime import date

import pytest

from core.joins import Denormalizer
from core.store import DataStore


@pytest.fixture
def store():
    """A fresh store seeded with the default dataset."""
    return DataStore.from_seed()


@pytest.fixture
def views(store):
    """Full views over the seeded store."""
    return Denormalizer(store)


@pytest.fixture
def today():
    """Fixed reference date so warranty expiry is deterministic."""
    return date(2025, 3, 1)
