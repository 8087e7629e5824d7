"""Catalog of named symbols that the user can pick from"""

import importlib.resources
import logging
from typing import Iterator, Optional

import regex as re

from unicodegen import data
from unicodegen.utilities import TraversablePath

logger = logging.getLogger(__package__)

DATA_DIR = importlib.resources.files(data)
DEFAULT_CATALOG_FILE = "available_symbols.config"

# Non-greedy, so only the first parenthesized span is captured
_IN_BRACKETS_REGEX = re.compile(r"\((.*?)\)")


class CatalogError(Exception):
    """Raised when the catalog resource cannot be read."""


def extract_character(entry: str) -> Optional[str]:
    """Extract the character embedded in parentheses in a catalog entry.

    Args:
        entry: Catalog entry, e.g. "Backspace (⌫)".

    Returns:
        Text inside the first pair of parentheses, e.g. "⌫",
        or None if entry has no parenthesized text.
    """
    if match := _IN_BRACKETS_REGEX.search(entry):
        return match[1]
    return None


class SymbolCatalog:
    """Ordered list of catalog entries, as displayed to the user.

    Entries are stored as given: no sorting, de-duplication or validation.

    Attributes:
        entries: Catalog entries in display order.
    """

    def __init__(self, entries: list[str]) -> None:
        self.entries = entries

    @classmethod
    def load(cls, lines: list[str]) -> "SymbolCatalog":
        """Create a catalog with one entry per line, in the order given.

        Args:
            lines: Lines of the catalog resource.
        """
        return cls(list(lines))

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> str:
        return self.entries[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def character_at(self, index: int) -> Optional[str]:
        """Return the character embedded in the entry at the given index."""
        return extract_character(self.entries[index])


def load_catalog_file(path: TraversablePath) -> SymbolCatalog:
    """Load a catalog from a one-entry-per-line file.

    A trailing newline at the end of the file does not create an empty entry.

    Args:
        path: File to be loaded - accepts either a pathlib Path or
            an importlib.resources Traversable object.

    Raises:
        CatalogError: If the file cannot be read.
    """
    try:
        with path.open("r", encoding="utf-8") as fp:
            data = fp.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogError(f"Unable to read symbol catalog {path}") from exc
    lines = data.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    catalog = SymbolCatalog.load([line.rstrip("\r") for line in lines])
    logger.debug(f"Loaded {len(catalog)} catalog entries from {path}")
    return catalog


def default_catalog_path() -> TraversablePath:
    """Return path of the catalog file supplied with the package."""
    return DATA_DIR.joinpath(DEFAULT_CATALOG_FILE)
