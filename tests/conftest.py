"""Test configuration and fixtures for the lending library.

Fixtures provide:
1. A clean configuration singleton per test
2. Sample records from the mini project walkthrough
3. A populated collection manager
"""

import os
from collections.abc import Generator

import pytest

from lending_library.collection import CollectionManager
from lending_library.config import LibraryConfig, reset_config
from lending_library.models.record import Record


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset the global configuration and drop LENDING_LIBRARY_* env vars."""
    for key in list(os.environ):
        if key.upper().startswith("LENDING_LIBRARY_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def test_config() -> LibraryConfig:
    """Lenient configuration used by most tests."""
    return LibraryConfig(library_name="test-library")


@pytest.fixture
def strict_config() -> LibraryConfig:
    """Configuration that refuses returns of records not lent out."""
    return LibraryConfig(library_name="strict-library", strict_returns=True)


@pytest.fixture
def orwell() -> Record:
    return Record(title="1984", author="George Orwell", identifier="978-0451524935")


@pytest.fixture
def huxley() -> Record:
    return Record(title="Brave New World", author="Aldous Huxley", identifier="978-0060850524")


@pytest.fixture
def library(test_config: LibraryConfig, orwell: Record, huxley: Record) -> CollectionManager:
    """Collection holding '1984' then 'Brave New World'."""
    manager = CollectionManager(test_config)
    manager.add_record(orwell)
    manager.add_record(huxley)
    return manager
