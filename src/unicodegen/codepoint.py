"""Convert between a single character and its "U+<decimal>" code point notation"""

import unicodedata

import regex as re

CODEPOINT_PREFIX = "U"
CODEPOINT_SEPARATOR = "+"
MAX_CODEPOINT_VALUE = 2**32 - 1
# UTF-16 surrogates are not characters, and Tk cannot display them
SURROGATE_RANGE = range(0xD800, 0xE000)

BACKSPACE_NOTATION = "U+0008"
BACKSPACE_SYMBOL_NOTATION = "U+2408"
ERASE_TO_LEFT_NOTATION = "U+232B"
DELETE_NOTATION = "U+007F"
DELETE_SYMBOL_NOTATION = "U+2421"
ERASE_TO_RIGHT_NOTATION = "U+2326"

# Erasure characters and their notations. If one of these is echoed into
# an entry field, it triggers further edits that corrupt the field contents.
FORBIDDEN_NOTATIONS = frozenset(
    {
        BACKSPACE_NOTATION,
        BACKSPACE_SYMBOL_NOTATION,
        ERASE_TO_LEFT_NOTATION,
        DELETE_NOTATION,
        DELETE_SYMBOL_NOTATION,
        ERASE_TO_RIGHT_NOTATION,
        "\b",
        "␈",
        "⌫",
        "\x7f",
        "␡",
        "⌦",
    }
)

_DIGITS_REGEX = re.compile(r"[0-9]+")


class InvalidInput(ValueError):
    """Raised when text cannot be converted to/from code point notation."""


def encode(text: str) -> str:
    """Convert a single character to its code point notation.

    Args:
        text: Text containing one character, optionally surrounded by whitespace.

    Returns:
        Code point notation, e.g. "U+65" for "A".

    Raises:
        InvalidInput: If text is empty, forbidden, or not exactly one character.
    """
    char = text.strip()
    if not char:
        raise InvalidInput("empty string passed to character conversion")
    if char in FORBIDDEN_NOTATIONS:
        raise InvalidInput(f"erasure character {char!r} cannot be converted")
    if len(char) != 1:
        raise InvalidInput(f"{len(char)} characters given, expected exactly one")
    if ord(char) in SURROGATE_RANGE:
        raise InvalidInput(f"surrogate {ord(char)} is not a character")
    return f"{CODEPOINT_PREFIX}{CODEPOINT_SEPARATOR}{ord(char)}"


def decode(text: str) -> str:
    """Convert code point notation to the character it represents.

    Only a single "+" is permitted, and the value must be given in decimal.

    Args:
        text: Code point notation, e.g. "U+97", optionally surrounded by whitespace.

    Returns:
        The single character, e.g. "a" for "U+97".

    Raises:
        InvalidInput: If text is empty, forbidden, malformed, out of range,
            a surrogate, or represents an erasure character.
    """
    notation = text.strip()
    if not notation:
        raise InvalidInput("empty string passed to code point conversion")
    if notation in FORBIDDEN_NOTATIONS:
        raise InvalidInput(f"erasure notation {notation!r} cannot be converted")

    parts = notation.split(CODEPOINT_SEPARATOR)
    if len(parts) != 2:
        raise InvalidInput(f"{notation!r} must contain exactly one '+'")
    prefix, digits = parts
    if prefix != CODEPOINT_PREFIX:
        raise InvalidInput(f"{notation!r} does not start with 'U+'")
    if not _DIGITS_REGEX.fullmatch(digits):
        raise InvalidInput(f"{digits!r} is not a decimal number")

    value = int(digits)
    if value > MAX_CODEPOINT_VALUE:
        raise InvalidInput(f"{value} does not fit in 32 bits")
    if value in SURROGATE_RANGE:
        raise InvalidInput(f"surrogate {value} is not a character")
    try:
        char = chr(value)
    except (OverflowError, ValueError) as exc:
        raise InvalidInput(f"{value} is not a valid code point") from exc
    if char in FORBIDDEN_NOTATIONS:
        raise InvalidInput(f"{notation!r} is an erasure character")
    return char


def character_name(char: str) -> str:
    """Return Unicode name of character, or empty string if it has none."""
    try:
        return unicodedata.name(char)
    except (ValueError, TypeError):
        return ""
