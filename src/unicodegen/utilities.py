"""Handy utility functions"""

import importlib.resources
import json
import platform
import logging
from pathlib import Path
import os.path
from typing import Any, Optional

logger = logging.getLogger(__package__)

TraversablePath = importlib.resources.abc.Traversable | Path

# Flag so application code can detect if within a pytest run - only use if really needed
# See: https://pytest.org/en/7.4.x/example/simple.html#detect-if-running-from-within-a-pytest-run
CALLED_FROM_TEST = False


def is_x11() -> bool:
    """Return true if running on Linux"""
    return _is_system("Linux")


def _is_system(system: str) -> bool:
    """Return true if running on given system

    Args:
        system: Name of system to check against
    """
    my_system = platform.system()
    assert my_system in ("Darwin", "Linux", "Windows")
    return my_system == system


def is_test(flag: Optional[bool] = None) -> bool:
    """Set and/or return whether running under test.

    Args:
        flag: If given, set whether running under test.
    """
    global CALLED_FROM_TEST
    if flag is not None:
        CALLED_FROM_TEST = flag
    return CALLED_FROM_TEST


def load_dict_from_json(filename: str) -> Optional[dict[str, Any]]:
    """If file exists, attempt to load into dict.

    Args:
        filename: Name of JSON file to load.

    Returns:
        Dictionary if loaded successfully, or None.
    """
    if os.path.isfile(filename):
        with open(filename, "r", encoding="utf-8") as fp:
            try:
                return json.load(fp)
            except json.decoder.JSONDecodeError as exc:
                logger.error(
                    f"Unable to load {filename} -- not valid JSON format\n" + str(exc)
                )
    return None
