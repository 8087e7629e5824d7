"""Handle preferences"""

import copy
from enum import StrEnum, auto
import json
import logging
import os
from typing import Any, Callable, Optional

from unicodegen.utilities import is_x11, is_test, load_dict_from_json

logger = logging.getLogger(__package__)

PREFS_BASENAME = "UnicodeGenPrefs"
TEST_PREFS_BASENAME = "UnicodeGenPrefs_test"


class PrefKey(StrEnum):
    """Enum class to store preferences keys."""

    ROOT_GEOMETRY = auto()
    THEME_NAME = auto()
    TEXT_FONT_SIZE = auto()
    CHARACTER_NAMES = auto()
    CATALOG_FILENAME = auto()


def prefs_directory() -> str:
    """Return directory where the prefs file is kept on this OS."""
    if is_x11():
        return os.path.join(os.path.expanduser("~"), ".unicodegenprefs")
    return os.path.join(os.path.expanduser("~"), "Documents", PREFS_BASENAME)


class Preferences:
    """Settings for the window, theme, fonts and symbol catalog.

    The application calls `set_default` for each key it uses, and `set_callback`
    where a change must be reflected in the UI. Once the UI exists, it calls
    `run_callbacks` so the loaded values take effect.

    Conversion results are never stored here.

    Attributes:
        dict: Values that differ from the defaults.
        defaults: Default value for each key.
        callbacks: Function to call with new value when a key changes.
        permanent: Whether values are loaded from and saved to `prefsfile`.
        prefsdir: Directory containing prefs file.
        prefsfile: Full path of JSON prefs file.
    """

    def __init__(self) -> None:
        """Initialize preferences class."""
        self.dict: dict[PrefKey, Any] = {}
        self.defaults: dict[PrefKey, Any] = {}
        self.callbacks: dict[PrefKey, Callable[[Any], None]] = {}
        self.permanent = False
        self.prefsdir = ""
        self.prefsfile = ""

    def get(self, key: PrefKey) -> Any:
        """Get preference value, or its default if not set."""
        return copy.deepcopy(self.dict.get(key, self.defaults.get(key)))

    def set(self, key: PrefKey, value: Any) -> None:
        """Set preference value, save, and run its callback, if value has changed.

        Args:
            key: Name of preference.
            value: Value for preference.
        """
        if self.get(key) == value:
            return
        self.dict[key] = copy.deepcopy(value)
        self.save()
        if key in self.callbacks:
            self.callbacks[key](value)

    def set_default(self, key: PrefKey, default: Any) -> None:
        """Set default preference value."""
        self.defaults[key] = default

    def set_callback(self, key: PrefKey, callback: Callable[[Any], None]) -> None:
        """Set function to call with the new value whenever preference changes."""
        self.callbacks[key] = callback

    def set_permanent(self, permanent: bool) -> None:
        """Set whether prefs should be loaded from and saved to prefs file.

        Args:
            permanent: True if prefs file should be used.
        """
        self.permanent = permanent

    def save(self) -> None:
        """Save preferences dictionary to JSON file, if permanent."""
        if not self.permanent:
            return

        try:
            os.makedirs(self.prefsdir, exist_ok=True)
        except OSError:
            logger.error(f"Unable to create {self.prefsdir}")
            return

        try:
            with open(self.prefsfile, "w", encoding="utf-8") as fp:
                json.dump(self.dict, fp, indent=2, ensure_ascii=False)
        except OSError:
            logger.error(f"Unable to save preferences to {self.prefsfile}")

    def load(self, prefs_basefile: Optional[str]) -> None:
        """Locate prefs file and, if permanent, load values from it.

        Unknown keys in the file are ignored.

        Args:
            prefs_basefile: Basename of prefs file, or None for the default.
        """
        self.prefsdir = prefs_directory()
        # Tests use their own file, so they never touch the user's settings
        if is_test():
            basename = TEST_PREFS_BASENAME
        else:
            basename = prefs_basefile or PREFS_BASENAME
        self.prefsfile = os.path.join(self.prefsdir, f"{basename}.json")

        if is_test() and os.path.exists(self.prefsfile):
            os.remove(self.prefsfile)

        if not self.permanent:
            return

        if loaded_dict := load_dict_from_json(self.prefsfile):
            for key, value in loaded_dict.items():
                try:
                    self.dict[PrefKey(key)] = value
                except ValueError:
                    logger.debug(f"'{key}' is not a valid PrefKey - ignored")

    def run_callbacks(self) -> None:
        """Call every callback with its current value.

        Should be called after prefs are loaded and UI is ready."""
        for key, callback in self.callbacks.items():
            callback(self.get(key))


preferences = Preferences()
