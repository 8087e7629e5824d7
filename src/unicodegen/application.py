#!/usr/bin/env python
"""Unicode Generator - convert between a character and its code point"""


import argparse
import logging
from importlib.metadata import version
from pathlib import Path
import sys
from typing import Optional

from unicodegen.catalog import (
    CatalogError,
    SymbolCatalog,
    default_catalog_path,
    load_catalog_file,
)
from unicodegen.mainwindow import MainWindow, ErrorHandler
from unicodegen.preferences import preferences, PrefKey
from unicodegen.root import Root, root
from unicodegen.utilities import TraversablePath, is_test

logger = logging.getLogger(__package__)

MESSAGE_FORMAT = "%(asctime)s: %(levelname)s - %(message)s"
DEBUG_FORMAT = "%(asctime)s: %(levelname)s - %(filename)s:%(lineno)d - %(message)s"


class UnicodeGenerator:
    """Top level Unicode Generator application."""

    def __init__(self, args: Optional[list[str]] = None) -> None:
        """Initialize UnicodeGenerator class.

        Loads the symbol catalog, creates the main window and applies preferences.
        Exits if the symbol catalog cannot be loaded."""

        self.args = parse_args(args)

        if self.args.version:
            print(version("unicodegen"))
            sys.exit(0)

        self.logging_init()
        logger.info("Unicode Generator started")

        self.initialize_preferences()

        catalog = load_catalog(catalog_path(self.args))

        Root()
        self.mainwindow = MainWindow(catalog)
        self.logging_add_gui()

        preferences.set_callback(PrefKey.THEME_NAME, self.mainwindow.set_theme)
        preferences.set_callback(PrefKey.TEXT_FONT_SIZE, self.mainwindow.set_font_size)
        preferences.set_callback(
            PrefKey.CHARACTER_NAMES, lambda _value: self.mainwindow.update_name()
        )
        preferences.run_callbacks()

    def initialize_preferences(self) -> None:
        """Set default preferences and load settings from the prefs file."""
        preferences.set_default(PrefKey.ROOT_GEOMETRY, "500x500")
        preferences.set_default(PrefKey.THEME_NAME, "Dark")
        preferences.set_default(PrefKey.TEXT_FONT_SIZE, 24)
        preferences.set_default(PrefKey.CHARACTER_NAMES, True)
        preferences.set_default(PrefKey.CATALOG_FILENAME, "")

        # If `--nohome` argument given, Prefs are not loaded & saved in Prefs file
        preferences.set_permanent(not self.args.nohome)
        preferences.load(self.args.prefsfile)

    def run(self) -> None:
        """Run the app."""
        root().mainloop()

    def logging_init(self) -> None:
        """Set up basic logger until GUI is ready."""
        if self.args.debug:
            log_level = logging.DEBUG
            console_log_level = logging.DEBUG
            formatter = logging.Formatter(DEBUG_FORMAT, "%H:%M:%S")
        else:
            log_level = logging.INFO
            console_log_level = logging.WARNING
            formatter = logging.Formatter(MESSAGE_FORMAT, "%H:%M:%S")
        logger.setLevel(log_level)
        # Output to console
        console_handler = logging.StreamHandler()
        console_handler.setLevel(console_log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    def logging_add_gui(self) -> None:
        """Add handler to display error messages via the GUI."""
        if is_test():
            return
        alert_handler = ErrorHandler()
        alert_handler.setLevel(logging.ERROR)
        alert_handler.setFormatter(logging.Formatter(MESSAGE_FORMAT, "%H:%M:%S"))
        logger.addHandler(alert_handler)


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line args.

    Args:
        args: Arguments to parse instead of those on the command line,
            in which case running under test is assumed.
    """
    if args is None:
        args = sys.argv[1:]
    else:
        is_test(True)
    parser = argparse.ArgumentParser(
        prog="unicodegen",
        description="Convert between a Unicode character and its code point",
    )
    parser.add_argument(
        "-c",
        "--catalog",
        help="Symbol catalog file, one 'Label (character)' entry per line",
    )
    parser.add_argument(
        "-p",
        "--prefsfile",
        help="Basename of prefs file (default `UnicodeGenPrefs`)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Run in debug mode",
    )
    parser.add_argument(
        "--nohome",
        action="store_true",
        help="Do not load or save the Preferences file",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Display the version of Unicode Generator",
    )
    return parser.parse_args(args)


def catalog_path(args: argparse.Namespace) -> TraversablePath:
    """Return path of catalog file given on command line, in prefs,
    or supplied with the package, in that order of priority."""
    if args.catalog:
        return Path(args.catalog)
    if filename := preferences.get(PrefKey.CATALOG_FILENAME):
        return Path(filename)
    return default_catalog_path()


def load_catalog(path: TraversablePath) -> SymbolCatalog:
    """Load the symbol catalog, exiting if it can't be loaded."""
    try:
        return load_catalog_file(path)
    except CatalogError as exc:
        logger.critical(f"{exc}: {exc.__cause__}")
        sys.exit(1)


def main() -> None:
    """Main application function."""
    UnicodeGenerator().run()


if __name__ == "__main__":
    main()
