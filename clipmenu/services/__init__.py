"""Business logic services."""

from .clipboard_service import (
    SubprocessClipboard,
    WaylandClipboard,
    XclipClipboard,
    XselClipboard,
    detect_backend,
)
from .encoder import LineEncoder
from .history_service import HistoryService
from .menu_service import MenuResult, MenuService
from .picker_service import MenuPicker
from .snapshot_service import Snapshot, SnapshotService

__all__ = [
    "HistoryService",
    "LineEncoder",
    "MenuPicker",
    "MenuResult",
    "MenuService",
    "Snapshot",
    "SnapshotService",
    "SubprocessClipboard",
    "WaylandClipboard",
    "XclipClipboard",
    "XselClipboard",
    "detect_backend",
]
