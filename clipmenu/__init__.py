"""Clipboard history for Wayland and X11 desktops."""

__version__ = "0.3.0"
