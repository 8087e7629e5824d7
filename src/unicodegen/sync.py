"""Keep the character field and code point field consistent with each other"""

from enum import StrEnum, auto
import logging
from typing import Callable

from unicodegen.catalog import extract_character
from unicodegen.codepoint import InvalidInput, decode, encode

logger = logging.getLogger(__package__)


class SyncState(StrEnum):
    """Enum class to store whether an update is being propagated."""

    IDLE = auto()
    PROPAGATING = auto()


class SyncController:
    """Apply edits in one field to the other field.

    Setting a field from the controller will typically cause the presentation
    layer to report that field as edited. While the controller is propagating
    an update, such reports are ignored, so one user edit causes exactly one
    update of the other field.

    Conversion failures are not errors from the user's point of view (they are
    usually just incomplete input), so the fields are left as they are.

    Attributes:
        character_text: Most recent valid text of the character field.
        codepoint_text: Most recent valid text of the code point field.
        state: Whether an update is currently being propagated.
    """

    def __init__(
        self,
        set_character_text: Callable[[str], None],
        set_codepoint_text: Callable[[str], None],
    ) -> None:
        """Initialize the controller.

        Args:
            set_character_text: Function to display text in the character field.
            set_codepoint_text: Function to display text in the code point field.
        """
        self.set_character_text = set_character_text
        self.set_codepoint_text = set_codepoint_text
        self.character_text = ""
        self.codepoint_text = ""
        self.state = SyncState.IDLE

    def on_character_field_edited(self, new_text: str) -> None:
        """Update code point field to match edited character field."""
        if self.state == SyncState.PROPAGATING:
            return
        try:
            codepoint = encode(new_text)
        except InvalidInput as exc:
            logger.debug(f"Character not converted: {exc}")
            return
        self.state = SyncState.PROPAGATING
        try:
            self.character_text = new_text.strip()
            self.codepoint_text = codepoint
            self.set_codepoint_text(codepoint)
        finally:
            self.state = SyncState.IDLE

    def on_codepoint_field_edited(self, new_text: str) -> None:
        """Update character field to match edited code point field."""
        if self.state == SyncState.PROPAGATING:
            return
        try:
            char = decode(new_text)
        except InvalidInput as exc:
            logger.debug(f"Code point not converted: {exc}")
            return
        self.state = SyncState.PROPAGATING
        try:
            self.codepoint_text = new_text.strip()
            self.character_text = char
            self.set_character_text(char)
        finally:
            self.state = SyncState.IDLE

    def on_catalog_selected(self, entry: str) -> None:
        """Display the character from the selected catalog entry, and its code point.

        If the character cannot be converted, the code point field keeps its
        previous value.

        The controller is returned to whichever state it was in beforehand, so
        a selection reported during propagation does not end it early.

        Args:
            entry: Selected catalog entry, e.g. "Euro Sign (€)".
        """
        char = extract_character(entry)
        if char is None:
            return
        previous_state = self.state
        self.state = SyncState.PROPAGATING
        try:
            self.character_text = char
            self.set_character_text(char)
            try:
                codepoint = encode(char)
            except InvalidInput as exc:
                logger.debug(f"Catalog character not converted: {exc}")
                return
            self.codepoint_text = codepoint
            self.set_codepoint_text(codepoint)
        finally:
            self.state = previous_state
