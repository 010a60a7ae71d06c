"""
Lending Library Package.

An in-memory lending library built from two pieces:

Key Components:
- models: the Lendable interface and the Record model (pydantic)
- collection: CollectionManager, an ordered collection with lookup and listing
- config: settings with pydantic-settings
- logging_setup: stderr logging for entry points
"""

__version__ = "0.1.0"

from .collection import CollectionManager
from .config import LibraryConfig, get_config, reset_config
from .models import AvailabilityStatus, Lendable, Record

__all__ = [
    "__version__",
    "AvailabilityStatus",
    "CollectionManager",
    "Lendable",
    "LibraryConfig",
    "Record",
    "get_config",
    "reset_config",
]
