"""
Record model for the lending library.

A record is one lendable item (a book) in the collection. Its identity
(title, author, identifier) is fixed at creation; only its availability
changes, and only through ``borrow`` and ``return_item``.

The model uses:
1. Pydantic v2 for type checking and serialization
2. A frozen configuration so identity fields cannot be reassigned
3. A private attribute for the availability flag, exposed read-only
"""

import logging
import threading

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, computed_field

from .lendable import AvailabilityStatus, Lendable

logger = logging.getLogger(__name__)


class Record(BaseModel, Lendable):
    """
    A single lendable item with identity and availability state.

    New records are always available. ``borrow`` succeeds only on an
    available record; ``return_item`` marks the record available again.
    """

    title: str = Field(
        ...,
        description="The title of the item",
        examples=["1984", "Brave New World"],
    )

    author: str = Field(
        ...,
        description="Author of the item",
        examples=["George Orwell", "Aldous Huxley"],
    )

    identifier: str = Field(
        ...,
        description="Catalog identifier, usually an ISBN",
        examples=["978-0451524935", "978-0060850524"],
    )

    _available: bool = PrivateAttr(default=True)
    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        json_schema_extra={
            "example": {
                "title": "1984",
                "author": "George Orwell",
                "identifier": "978-0451524935",
            }
        },
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_available(self) -> bool:
        """True while the record is on the shelf."""
        return self._available

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> AvailabilityStatus:
        """Availability as a display label."""
        return AvailabilityStatus.from_flag(self._available)

    def describe(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.identifier}) - {self.status.value}"

    def borrow(self) -> bool:
        """
        Lend the record out.

        Returns:
            True if the record was available and is now borrowed,
            False if it was already borrowed (no state change).
        """
        with self._lock:
            if not self._available:
                logger.debug("Borrow refused, already lent out: %s", self.title)
                return False
            self._available = False
        logger.debug("Borrowed: %s", self.title)
        return True

    def return_item(self, strict: bool = False) -> bool:
        """
        Take the record back.

        By default a return always succeeds, even if the record was never
        borrowed. With ``strict=True`` that case is a no-op returning False.
        """
        with self._lock:
            if self._available and strict:
                logger.debug("Return refused, not lent out: %s", self.title)
                return False
            if self._available:
                logger.debug("Return of a record that was not lent out: %s", self.title)
            self._available = True
        logger.debug("Returned: %s", self.title)
        return True

    def __str__(self) -> str:
        return self.describe()
