"""Test preferences and the settings the application keeps in them"""

import json
import os
from pathlib import Path

import pytest

from unicodegen.application import UnicodeGenerator
from unicodegen.mainwindow import BaseColors
from unicodegen.preferences import (
    Preferences,
    PrefKey,
    preferences,
    prefs_directory,
)
from unicodegen.root import root
from unicodegen.utilities import _is_system, is_x11


def test_prefs_directory() -> None:
    """Test prefs directory depends on OS"""
    assert not _is_system("Android")
    if is_x11():
        assert prefs_directory().endswith(".unicodegenprefs")
    else:
        assert prefs_directory().endswith(os.path.join("Documents", "UnicodeGenPrefs"))


def test_app_defaults(unicodegen_app: UnicodeGenerator) -> None:
    """Test settings used by the application before user changes any"""
    assert preferences.get(PrefKey.ROOT_GEOMETRY) == "500x500"
    assert preferences.get(PrefKey.THEME_NAME) == "Dark"
    assert preferences.get(PrefKey.TEXT_FONT_SIZE) == 24
    assert preferences.get(PrefKey.CHARACTER_NAMES) is True
    assert preferences.get(PrefKey.CATALOG_FILENAME) == ""
    mainwindow = unicodegen_app.mainwindow
    assert mainwindow.entry_font.cget("size") == 24
    assert (
        mainwindow.character_entry.cget("background")
        == BaseColors.DEFAULT["Dark"]["field"]
    )


def test_font_size_callback(unicodegen_app: UnicodeGenerator) -> None:
    """Test changing font size pref resizes the fields"""
    mainwindow = unicodegen_app.mainwindow
    preferences.set(PrefKey.TEXT_FONT_SIZE, 30)
    assert mainwindow.entry_font.cget("size") == 30
    assert mainwindow.text_font.cget("size") == 30


def test_theme_callback(unicodegen_app: UnicodeGenerator) -> None:
    """Test changing theme pref recolors the window"""
    mainwindow = unicodegen_app.mainwindow
    preferences.set(PrefKey.THEME_NAME, "Light")
    light = BaseColors.DEFAULT["Light"]
    assert root().cget("background") == light["background"]
    for entry in (mainwindow.character_entry, mainwindow.codepoint_entry):
        assert entry.cget("background") == light["field"]
        assert entry.cget("foreground") == light["foreground"]
    assert mainwindow.symbol_list.cget("selectbackground") == light["select"]


def test_nohome_not_saved(unicodegen_app: UnicodeGenerator) -> None:
    """Test prefs aren't written to file with `--nohome`"""
    assert unicodegen_app.args.nohome
    assert not preferences.permanent
    preferences.set(PrefKey.TEXT_FONT_SIZE, 18)
    preferences.set(PrefKey.THEME_NAME, "Light")
    assert preferences.prefsfile
    assert not os.path.exists(preferences.prefsfile)


def test_callback_only_on_change() -> None:
    """Test callbacks run only when preference value changes"""
    prefs = Preferences()
    prefs.set_default(PrefKey.TEXT_FONT_SIZE, 24)
    values: list[int] = []
    prefs.set_callback(PrefKey.TEXT_FONT_SIZE, values.append)
    prefs.set(PrefKey.TEXT_FONT_SIZE, 24)  # Same as default
    prefs.set(PrefKey.TEXT_FONT_SIZE, 30)
    prefs.set(PrefKey.TEXT_FONT_SIZE, 30)
    prefs.set(PrefKey.TEXT_FONT_SIZE, 18)
    assert values == [30, 18]
    prefs.run_callbacks()
    assert values == [30, 18, 18]


def test_permanent_prefs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test prefs are saved to and reloaded from file when permanent"""
    monkeypatch.setattr(
        "unicodegen.preferences.prefs_directory", lambda: str(tmp_path / "prefs")
    )
    monkeypatch.setattr("unicodegen.preferences.is_test", lambda: False)

    prefs = Preferences()
    prefs.set_default(PrefKey.TEXT_FONT_SIZE, 24)
    prefs.set_permanent(True)
    prefs.load("MyPrefs")
    assert prefs.prefsfile == str(tmp_path / "prefs" / "MyPrefs.json")
    prefs.set(PrefKey.TEXT_FONT_SIZE, 30)
    with open(prefs.prefsfile, encoding="utf-8") as fp:
        assert json.load(fp) == {"text_font_size": 30}

    # Unknown keys in the file, e.g. from a newer version, are ignored
    with open(prefs.prefsfile, "w", encoding="utf-8") as fp:
        json.dump({"text_font_size": 30, "history": ["A"]}, fp)
    reloaded = Preferences()
    reloaded.set_default(PrefKey.TEXT_FONT_SIZE, 24)
    reloaded.set_permanent(True)
    reloaded.load("MyPrefs")
    assert reloaded.get(PrefKey.TEXT_FONT_SIZE) == 30
    assert list(reloaded.dict) == [PrefKey.TEXT_FONT_SIZE]


def test_non_permanent_prefs_not_loaded(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test an existing prefs file is ignored when not permanent"""
    monkeypatch.setattr("unicodegen.preferences.prefs_directory", lambda: str(tmp_path))
    monkeypatch.setattr("unicodegen.preferences.is_test", lambda: False)
    (tmp_path / "UnicodeGenPrefs.json").write_text(
        '{"theme_name": "Light"}', encoding="utf-8"
    )
    prefs = Preferences()
    prefs.set_default(PrefKey.THEME_NAME, "Dark")
    prefs.load(None)
    assert prefs.get(PrefKey.THEME_NAME) == "Dark"
    prefs.set(PrefKey.THEME_NAME, "Default")
    assert json.loads((tmp_path / "UnicodeGenPrefs.json").read_text("utf-8")) == {
        "theme_name": "Light"
    }
