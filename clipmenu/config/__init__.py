"""Configuration management."""

from .paths import AppPaths

__all__ = ["AppPaths"]
