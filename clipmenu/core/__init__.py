"""Core interfaces and dependency injection."""

from .protocols import ClipboardPort, PickerPort

__all__ = ["ClipboardPort", "PickerPort"]
