"""Handle Tk root window"""

import logging
import traceback
import tkinter as tk

from types import TracebackType
from typing import Any

from unicodegen.preferences import preferences, PrefKey

logger = logging.getLogger(__package__)

_THE_ROOT = None


class Root(tk.Tk):
    """Inherits from Tk root window"""

    def __init__(self, **kwargs: Any) -> None:
        global _THE_ROOT
        assert _THE_ROOT is None
        super().__init__(**kwargs)
        _THE_ROOT = self

        self.title("Unicode Generator")
        self.geometry(preferences.get(PrefKey.ROOT_GEOMETRY))
        self.resizable(True, True)
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)
        self.save_config = False
        self.bind("<Configure>", self._handle_config)
        self.bind("<Escape>", lambda _event: self.quit())

    def report_callback_exception(
        self, exc: type[BaseException], val: BaseException, tb: TracebackType | None
    ) -> None:
        """Override tkinter exception reporting rather just
        writing it to stderr.
        """
        err = "Tkinter Exception\n" + "".join(traceback.format_exception(exc, val, tb))
        logger.error(err)

    def _handle_config(self, _event: tk.Event) -> None:
        """Callback from root window <Configure> event.

        By setting flag now, and queuing calls to _save_config,
        we ensure the flag will be true for the first call to
        _save_config when process becomes idle."""
        self.save_config = True
        self.after_idle(self._save_config)

    def _save_config(self) -> None:
        """Only save geometry when process becomes idle, and only once
        for a burst of config changes."""
        if self.save_config:
            preferences.set(PrefKey.ROOT_GEOMETRY, self.geometry())
            self.save_config = False


def root() -> Root:
    """Return the single instance of Root"""
    assert _THE_ROOT is not None
    return _THE_ROOT


def destroy_root() -> None:
    """Destroy the single instance of Root, so another can be created."""
    global _THE_ROOT
    if _THE_ROOT is not None:
        _THE_ROOT.destroy()
        _THE_ROOT = None
