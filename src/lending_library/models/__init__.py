"""
Lending library models.

- Lendable: the lending capability interface
- AvailabilityStatus: Available / Borrowed label
- Record: a lendable catalog item
"""

from .lendable import AvailabilityStatus, Lendable
from .record import Record

__all__ = [
    "AvailabilityStatus",
    "Lendable",
    "Record",
]
