#!/usr/bin/env python3
"""
Menu Service - Capture and restore flows

Capture: clipboard -> encoder -> history.
Restore: history -> picker -> encoder -> clipboard.
"""
import logging
from dataclasses import dataclass
from typing import Literal, Optional

from clipmenu.core.protocols import ClipboardPort, PickerPort
from clipmenu.errors import ClipboardReadError, ClipboardWriteError, NoHistoryError, NoMatchError
from clipmenu.services.encoder import LineEncoder
from clipmenu.services.history_service import HistoryService
from clipmenu.utils.formatting import format_preview, truncate_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuResult:
    status: Literal["copied", "cancelled"]
    text: Optional[str] = None
    preview: Optional[str] = None


class MenuService:
    """Orchestrates the clipboard, history and picker for one invocation"""

    def __init__(
        self,
        history: HistoryService,
        clipboard: ClipboardPort,
        picker: Optional[PickerPort] = None,
        encoder: Optional[LineEncoder] = None,
        menu_width: int = 80,
        preview_width: int = 50,
    ):
        """
        Initialize menu service

        Args:
            history: History service owning the history file
            clipboard: Clipboard backend
            picker: Picker used by the menu flow (not needed for capture)
            encoder: Encoder for restoring newlines, defaults to the history's encoder
            menu_width: Characters of each entry shown in the picker
            preview_width: Characters echoed back after a restore
        """
        self.history = history
        self.clipboard = clipboard
        self.picker = picker
        self.encoder = encoder or history.encoder
        self.menu_width = menu_width
        self.preview_width = preview_width

    def capture(self) -> bool:
        """Save the current clipboard text; unreadable clipboards count as empty."""
        try:
            text = self.clipboard.read()
        except ClipboardReadError as e:
            logger.debug(f"Clipboard read failed, treating as empty: {e}")
            text = ""
        return self.history.capture(text)

    def menu(self) -> MenuResult:
        """
        Capture, then let the user pick an entry and copy it back

        Raises:
            NoHistoryError: history is empty even after capturing
            NoMatchError: the selection does not match any entry
            ClipboardWriteError: the clipboard tool rejected the value
        """
        if self.picker is None:
            raise ValueError("menu flow requires a picker")

        self.capture()

        entries = self.history.list()
        if not entries:
            raise NoHistoryError("No clipboard history.")

        display = [truncate_text(entry, self.menu_width) for entry in entries]
        selection = self.picker.show(display)

        if isinstance(selection, int):
            if not 0 <= selection < len(display):
                raise NoMatchError(f"Selection index {selection} out of range")
            selection = display[selection]
        if not selection:
            logger.info("Picker cancelled")
            return MenuResult(status="cancelled")

        full_entry = self.history.restore_candidate(selection)
        restored = self.encoder.decode(full_entry)

        if not self.clipboard.write(restored):
            raise ClipboardWriteError(f"Could not copy to clipboard via {self.clipboard.name}")

        logger.info(f"Restored entry ({len(restored)} chars)")
        return MenuResult(
            status="copied",
            text=restored,
            preview=format_preview(selection, self.preview_width),
        )
