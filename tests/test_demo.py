"""Tests for the console demo and logging setup."""

import logging
from collections.abc import Generator

import pytest

from lending_library.__main__ import main, run_demo
from lending_library.config import LibraryConfig
from lending_library.logging_setup import configure_logging


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """Restore the package logger after a test installs handlers on it."""
    logger = logging.getLogger("lending_library")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestRunDemo:
    """The mini project walkthrough."""

    def test_output(self, capsys):
        run_demo(LibraryConfig(library_name="demo-library"))

        lines = capsys.readouterr().out.splitlines()

        assert lines == [
            "=== demo-library ===",
            "1984 by George Orwell (ISBN: 978-0451524935) - Available",
            "Brave New World by Aldous Huxley (ISBN: 978-0060850524) - Available",
            "",
            "You borrowed '1984'.",
            "'1984' is already borrowed.",
            "",
            "Available records:",
            "  Brave New World by Aldous Huxley (ISBN: 978-0060850524) - Available",
            "",
            "You returned '1984'.",
            "1984 by George Orwell (ISBN: 978-0451524935) - Available",
            "Lookup 'nonexistent': not found",
        ]

    def test_final_state(self, capsys):
        library = run_demo(LibraryConfig(library_name="demo-library"))

        assert library.summary() == {"total": 2, "available": 2, "borrowed": 0}

    def test_strict_config_gives_same_walkthrough(self, capsys):
        """Test that the returned book was borrowed, so strict mode accepts it."""
        run_demo(LibraryConfig(library_name="demo-library", strict_returns=True))

        assert "You returned '1984'." in capsys.readouterr().out

    def test_main(self, capsys, package_logger):
        main()

        out = capsys.readouterr().out
        assert out.startswith("=== lending-library ===")


class TestConfigureLogging:
    """Handler installation on the package logger."""

    def test_sets_level(self, package_logger):
        configure_logging(LibraryConfig(log_level="WARNING"))
        assert package_logger.level == logging.WARNING

    def test_debug_overrides_level(self, package_logger):
        configure_logging(LibraryConfig(log_level="ERROR", debug=True))
        assert package_logger.level == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self, package_logger):
        configure_logging(LibraryConfig())
        configure_logging(LibraryConfig())

        named = [h for h in package_logger.handlers if h.get_name() == "lending_library"]
        assert len(named) == 1

    def test_domain_events_are_logged(self, package_logger, caplog, test_config, orwell):
        from lending_library.collection import CollectionManager

        with caplog.at_level(logging.DEBUG, logger="lending_library"):
            manager = CollectionManager(test_config)
            manager.add_record(orwell)
            orwell.borrow()

        messages = [record.getMessage() for record in caplog.records]
        assert "Added '1984' to test-library (1 records)" in messages
        assert "Borrowed: 1984" in messages
