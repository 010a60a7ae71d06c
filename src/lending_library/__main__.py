"""Console demo of the lending library.

Replays the mini project walkthrough:
1. Build a collection and add two books
2. Describe every record
3. Borrow the same book twice (second attempt is refused)
4. List what is still available
5. Return the book
"""

import logging

from .collection import CollectionManager
from .config import LibraryConfig, get_config
from .logging_setup import configure_logging
from .models.record import Record

logger = logging.getLogger(__name__)


def run_demo(config: LibraryConfig | None = None) -> CollectionManager:
    """Run the walkthrough, printing each step, and return the collection."""
    config = config or get_config()
    library = CollectionManager(config)

    library.add_record(Record(title="1984", author="George Orwell", identifier="978-0451524935"))
    library.add_record(
        Record(title="Brave New World", author="Aldous Huxley", identifier="978-0060850524")
    )

    print(f"=== {config.library_name} ===")
    for record in library:
        print(record.describe())
    print()

    book = library.find_by_title("1984")
    if book is None:
        print("'1984' not found")
        return library

    for _ in range(2):
        if book.borrow():
            print(f"You borrowed '{book.title}'.")
        else:
            print(f"'{book.title}' is already borrowed.")
    print()

    print("Available records:")
    for record in library.list_available():
        print(f"  {record.describe()}")
    print()

    if library.return_record(book):
        print(f"You returned '{book.title}'.")
    else:
        print(f"'{book.title}' was not borrowed.")
    print(book.describe())

    missing = library.find_by_title("nonexistent")
    print(f"Lookup 'nonexistent': {'not found' if missing is None else 'found'}")

    return library


def main() -> None:
    """Entry point for ``python -m lending_library``."""
    config = get_config()
    configure_logging(config)
    logger.info("Starting %s demo", config.library_name)
    library = run_demo(config)
    logger.info("Demo finished: %s", library.summary())


if __name__ == "__main__":
    main()
