"""Utility functions."""

from .formatting import format_preview, format_size, truncate_text

__all__ = ["format_preview", "format_size", "truncate_text"]
