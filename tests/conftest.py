"""Configure pytest."""

import tkinter as tk
from typing import Generator

import pytest

from unicodegen.application import UnicodeGenerator
from unicodegen.preferences import preferences
from unicodegen.root import destroy_root


@pytest.fixture
def unicodegen_app() -> Generator[UnicodeGenerator, None, None]:
    """Start Unicode Generator in "test" mode"""
    try:
        app = UnicodeGenerator(args=["--nohome"])  # Force command line args
    except tk.TclError as exc:
        destroy_root()
        pytest.skip(f"Tk display not available: {exc}")
    yield app  # Don't enter event loop
    destroy_root()  # Cleanup after test
    preferences.dict.clear()  # Next test starts from defaults
