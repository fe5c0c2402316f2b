#!/usr/bin/env python3
"""
Snapshot Service - Copies a directory tree and its file contents as one text blob
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from clipmenu.settings import DEFAULT_IGNORE_DIRS

logger = logging.getLogger(__name__)

SEPARATOR = "----"
BINARY_PLACEHOLDER = "[binary file skipped]"
BINARY_SAMPLE_SIZE = 8192


@dataclass(frozen=True)
class Snapshot:
    directory: str
    file_count: int
    text: str

    @property
    def byte_count(self) -> int:
        return len(self.text.encode("utf-8"))


class SnapshotService:
    """Builds a file tree + file contents dump of a directory"""

    def __init__(self, ignore_dirs: Optional[Iterable[str]] = None):
        """
        Initialize snapshot service

        Args:
            ignore_dirs: Directory names pruned wherever they appear
        """
        self.ignore_dirs = set(ignore_dirs if ignore_dirs is not None else DEFAULT_IGNORE_DIRS)

    def build(self, directory: Union[str, Path]) -> Snapshot:
        """
        Render the snapshot text for a directory

        Raises:
            NotADirectoryError: directory does not exist or is not a directory
        """
        root = Path(directory)
        if not root.is_dir():
            raise NotADirectoryError(f"'{directory}' is not a directory.")

        entries, files = self._walk(root)

        parts = [f"File Tree:\n{SEPARATOR}\n", self._render_tree(str(directory), entries), f"\n{SEPARATOR}\n\n"]
        for rel_path in files:
            parts.append(f"{rel_path}\n{SEPARATOR}\n{self._read_file(root / rel_path)}\n{SEPARATOR}\n\n")

        logger.info(f"Snapshot of {directory}: {len(files)} files")
        return Snapshot(directory=str(directory), file_count=len(files), text="".join(parts))

    def _walk(self, root: Path) -> Tuple[List[str], List[str]]:
        """Collect every tree entry and every regular file, relative to root"""
        entries: List[str] = []
        files: List[str] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [d for d in dirnames if d not in self.ignore_dirs]
            rel_dir = Path(dirpath).relative_to(root)
            for name in dirnames:
                entries.append((rel_dir / name).as_posix())
            for name in filenames:
                if name in self.ignore_dirs:
                    continue
                rel_path = (rel_dir / name).as_posix()
                entries.append(rel_path)
                path = Path(dirpath) / name
                if path.is_file() and not path.is_symlink():
                    files.append(rel_path)
        return sorted(entries), sorted(files)

    @staticmethod
    def _render_tree(label: str, entries: List[str]) -> str:
        lines = [label]
        for rel_path in entries:
            depth = rel_path.count("/") + 1
            lines.append("    " * depth + rel_path.rsplit("/", 1)[-1])
        return "\n".join(lines)

    @staticmethod
    def _read_file(path: Path) -> str:
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.warning(f"Cannot read {path}: {e}")
            return f"[unreadable file: {e.strerror}]"

        if b"\x00" in data[:BINARY_SAMPLE_SIZE]:
            return BINARY_PLACEHOLDER
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError:
            return BINARY_PLACEHOLDER
        # Trailing newlines are dropped, matching shell command substitution
        return text.rstrip("\n")
