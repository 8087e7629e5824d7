"""Define key components of main window"""

import logging
import tkinter as tk
from tkinter import messagebox
from tkinter import font as tk_font
from typing import Any

import darkdetect  # type: ignore[import-untyped]

from unicodegen.catalog import SymbolCatalog
from unicodegen.codepoint import character_name
from unicodegen.preferences import preferences, PrefKey
from unicodegen.root import root
from unicodegen.sync import SyncController

logger = logging.getLogger(__package__)

PAD = 10


class BaseColors:
    """Global base color settings (foreground/background)."""

    DEFAULT = {
        "Light": {
            "background": "#F1F1F1",
            "foreground": "#4A3F31",
            "field": "#FFFFFF",
            "select": "#A08DFC",
        },
        "Dark": {
            "background": "#061626",
            "foreground": "#DADADA",
            "field": "#0D2A45",
            "select": "#5A4FA0",
        },
    }


def theme_name_from_user(user_theme: str) -> str:
    """Return the theme to use given the name the user will see.

    Args:
        user_theme: "Default" to follow OS dark mode, or "Dark" or "Light".

    Returns:
        "Dark" or "Light".
    """
    match user_theme:
        case "Default":
            # darkdetect returns None if it cannot detect OS theme
            if darkdetect.theme() == "Light":
                return "Light"
            return "Dark"
        case "Dark" | "Light":
            return user_theme
        case _:
            assert False, "Bad user theme name"


class ErrorHandler(logging.Handler):
    """Handle GUI output of error messages."""

    def emit(self, record: logging.LogRecord) -> None:
        """Output error message to message box.

        Args:
            record: Record containing error message.
        """
        messagebox.showerror(title=record.levelname, message=record.getMessage())


class MainWindow:
    """Handles the construction of the main window with its basic widgets.

    Left pane holds the character ("Output") and code point ("Point Code")
    fields; right pane holds the catalog of symbols. Edits in either field,
    or selection of a symbol, are passed to the SyncController.

    Attributes:
        catalog: Symbols displayed in the list.
        controller: Keeps the two fields synchronized.
        character_var: Text of the character field.
        codepoint_var: Text of the code point field.
    """

    def __init__(self, catalog: SymbolCatalog) -> None:
        self.catalog = catalog

        self.text_font = tk_font.nametofont("TkDefaultFont").copy()
        self.entry_font = tk_font.nametofont("TkFixedFont").copy()
        self.entry_font.configure(weight="bold")

        self.character_var = tk.StringVar(root())
        self.codepoint_var = tk.StringVar(root())
        self.controller = SyncController(
            self.character_var.set, self.codepoint_var.set
        )

        self.paned_window = tk.PanedWindow(
            root(), orient=tk.HORIZONTAL, sashwidth=4, borderwidth=0
        )
        self.paned_window.grid(row=0, column=0, sticky="NSEW")

        self.fields_frame = tk.Frame(self.paned_window, padx=PAD, pady=PAD)
        self.fields_frame.columnconfigure(0, weight=1)
        # Spacer rows above, between and below the two fields
        for row in (0, 3, 7):
            self.fields_frame.rowconfigure(row, weight=1)
        self.paned_window.add(self.fields_frame, stretch="always")

        self.character_label = tk.Label(
            self.fields_frame, text="Output", font=self.text_font
        )
        self.character_label.grid(row=1, column=0)
        self.character_entry = tk.Entry(
            self.fields_frame,
            textvariable=self.character_var,
            font=self.entry_font,
            justify=tk.CENTER,
        )
        self.character_entry.grid(row=2, column=0, sticky="EW", pady=PAD)

        self.codepoint_label = tk.Label(
            self.fields_frame, text="Point Code", font=self.text_font
        )
        self.codepoint_label.grid(row=4, column=0)
        self.codepoint_entry = tk.Entry(
            self.fields_frame,
            textvariable=self.codepoint_var,
            font=self.entry_font,
            justify=tk.CENTER,
        )
        self.codepoint_entry.grid(row=5, column=0, sticky="EW", pady=PAD)

        self.name_label = tk.Label(self.fields_frame, text="", wraplength=200)
        self.name_label.grid(row=6, column=0)

        self.list_frame = tk.Frame(self.paned_window)
        self.list_frame.rowconfigure(0, weight=1)
        self.list_frame.columnconfigure(0, weight=1)
        self.paned_window.add(self.list_frame, stretch="always")

        self.symbol_list = tk.Listbox(
            self.list_frame,
            font=self.text_font,
            selectmode=tk.BROWSE,
            exportselection=False,
            activestyle=tk.NONE,
            borderwidth=0,
            highlightthickness=0,
        )
        self.symbol_list.insert(tk.END, *self.catalog)
        self.symbol_list.grid(row=0, column=0, sticky="NSEW")
        self.scrollbar = tk.Scrollbar(
            self.list_frame, orient=tk.VERTICAL, command=self.symbol_list.yview
        )
        self.symbol_list.configure(yscrollcommand=self.scrollbar.set)
        self.scrollbar.grid(row=0, column=1, sticky="NS")

        self.character_var.trace_add("write", self.character_edited)
        self.codepoint_var.trace_add("write", self.codepoint_edited)
        self.symbol_list.bind("<<ListboxSelect>>", self.symbol_selected)

        self.character_entry.focus_set()

    def character_edited(self, *_args: Any) -> None:
        """Called when the character field's text changes."""
        self.controller.on_character_field_edited(self.character_var.get())
        self.update_name()

    def codepoint_edited(self, *_args: Any) -> None:
        """Called when the code point field's text changes."""
        self.controller.on_codepoint_field_edited(self.codepoint_var.get())
        self.update_name()

    def symbol_selected(self, _event: tk.Event) -> None:
        """Called when a symbol is selected in the catalog list."""
        selection = self.symbol_list.curselection()
        if not selection:
            return
        self.controller.on_catalog_selected(self.catalog[selection[0]])
        self.update_name()

    def update_name(self) -> None:
        """Display Unicode name of the most recent valid character, if enabled."""
        if preferences.get(PrefKey.CHARACTER_NAMES):
            self.name_label.configure(
                text=character_name(self.controller.character_text)
            )
        else:
            self.name_label.configure(text="")

    def set_font_size(self, size: int) -> None:
        """Set size of all text in the main window."""
        self.text_font.configure(size=size)
        self.entry_font.configure(size=size)
        self.name_label.configure(font=(self.text_font.actual("family"), size // 2))

    def set_theme(self, user_theme: str) -> None:
        """Set colors of the main window widgets to match the given theme.

        Args:
            user_theme: Name of theme the user will see.
        """
        colors = BaseColors.DEFAULT[theme_name_from_user(user_theme)]
        background = colors["background"]
        foreground = colors["foreground"]
        root().configure(background=background)
        for widget in (self.paned_window, self.fields_frame, self.list_frame):
            widget.configure(background=background)
        for label in (self.character_label, self.codepoint_label, self.name_label):
            label.configure(background=background, foreground=foreground)
        for entry in (self.character_entry, self.codepoint_entry):
            entry.configure(
                background=colors["field"],
                foreground=foreground,
                insertbackground=foreground,
                highlightbackground=background,
            )
        self.symbol_list.configure(
            background=colors["field"],
            foreground=foreground,
            selectbackground=colors["select"],
            selectforeground=foreground,
        )
