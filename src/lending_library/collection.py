"""
Collection manager for the lending library.

The collection owns an ordered list of records. It offers:
1. Appending records (insertion order kept, duplicates allowed)
2. Case-insensitive title lookup (first match wins)
3. Availability listings that rescan on every call

Borrowing and returning stay on the record itself; the collection only adds
``return_record`` so that its configured return policy is applied.
"""

import logging
import threading
from collections.abc import Iterator

from .config import LibraryConfig, get_config
from .models.record import Record

logger = logging.getLogger(__name__)


class CollectionManager:
    """An ordered, growing collection of lendable records."""

    def __init__(self, config: LibraryConfig | None = None):
        self.config = config or get_config()
        self._records: list[Record] = []
        self._lock = threading.RLock()

    # === Mutation ===

    def add_record(self, record: Record) -> Record:
        """Append a record to the end of the collection and return it."""
        if not isinstance(record, Record):
            raise TypeError(f"Expected Record, got {type(record).__name__}")
        with self._lock:
            self._records.append(record)
            count = len(self._records)
        logger.info("Added '%s' to %s (%d records)", record.title, self.config.library_name, count)
        return record

    def return_record(self, record: Record) -> bool:
        """Return a record using this collection's return policy."""
        return record.return_item(strict=self.config.strict_returns)

    # === Queries ===

    def find_by_title(self, title: str) -> Record | None:
        """
        Find a record by title, ignoring case.

        Returns:
            The first matching record in insertion order, or None.
        """
        wanted = title.casefold()
        with self._lock:
            for record in self._records:
                if record.title.casefold() == wanted:
                    return record
        logger.debug("No record titled '%s' in %s", title, self.config.library_name)
        return None

    def list_available(self) -> list[Record]:
        """Records that can be borrowed right now, in insertion order."""
        with self._lock:
            return [record for record in self._records if record.is_available]

    def list_borrowed(self) -> list[Record]:
        """Records currently lent out, in insertion order."""
        with self._lock:
            return [record for record in self._records if not record.is_available]

    def summary(self) -> dict[str, int]:
        """Counts of total, available and borrowed records."""
        with self._lock:
            total = len(self._records)
            available = sum(1 for record in self._records if record.is_available)
        return {
            "total": total,
            "available": available,
            "borrowed": total - available,
        }

    @property
    def records(self) -> tuple[Record, ...]:
        """Snapshot of all records in insertion order."""
        with self._lock:
            return tuple(self._records)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __contains__(self, record: object) -> bool:
        with self._lock:
            return any(existing is record for existing in self._records)

    def __repr__(self) -> str:
        return f"CollectionManager(name={self.config.library_name!r}, records={len(self)})"
