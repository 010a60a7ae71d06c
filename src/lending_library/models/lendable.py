"""
Lending capability shared by everything the library can lend out.

Callers that lend things depend on ``Lendable`` rather than on whatever
attributes an object happens to have. New kinds of lendable items implement
this interface and become usable everywhere a ``Lendable`` is accepted.
"""

from abc import ABC, abstractmethod
from enum import Enum


class AvailabilityStatus(str, Enum):
    """Two-state availability of a lendable item."""

    AVAILABLE = "Available"
    BORROWED = "Borrowed"

    @classmethod
    def from_flag(cls, available: bool) -> "AvailabilityStatus":
        return cls.AVAILABLE if available else cls.BORROWED


class Lendable(ABC):
    """Operations an item must support to be lent out."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """True when the item can currently be borrowed."""

    @abstractmethod
    def borrow(self) -> bool:
        """Lend the item out. Returns False if it is already borrowed."""

    @abstractmethod
    def return_item(self, strict: bool = False) -> bool:
        """
        Take the item back.

        With ``strict`` set, returning an item that is not lent out is
        refused and reported as False.
        """

    @abstractmethod
    def describe(self) -> str:
        """Human-readable one-line description including the status label."""
