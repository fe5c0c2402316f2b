#!/usr/bin/env python3
"""
History Service - Ordered, deduplicated, bounded clipboard history

The history lives in a single newline-delimited text file, one encoded
entry per line, most recent first. Every operation re-reads the file;
nothing is cached between invocations.
"""
import fcntl
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from clipmenu.errors import NoMatchError, StorageError
from clipmenu.services.encoder import LineEncoder

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 50


class HistoryService:
    """Service owning the persisted clipboard history"""

    def __init__(
        self,
        history_path: Union[str, Path],
        max_entries: int = DEFAULT_MAX_ENTRIES,
        encoder: Optional[LineEncoder] = None,
    ):
        """
        Initialize history service

        Args:
            history_path: Path of the history file (created on first capture)
            max_entries: Upper bound on the number of stored entries
            encoder: Encoder used to flatten multi-line text
        """
        if max_entries <= 0:
            raise ValueError("max_entries must be > 0")
        self.history_path = Path(history_path)
        self.max_entries = max_entries
        self.encoder = encoder or LineEncoder()

    @property
    def lock_path(self) -> Path:
        return self.history_path.with_name(self.history_path.name + ".lock")

    def capture(self, raw_text: Optional[str]) -> bool:
        """
        Store clipboard text at the front of the history

        Args:
            raw_text: Decoded clipboard text

        Returns:
            True if the text was stored, False for empty input
        """
        if not raw_text:
            logger.debug("Empty clipboard, nothing to capture")
            return False

        line = self.encoder.encode(raw_text)

        with self._locked():
            entries = self._read_entries()
            entries = [entry for entry in entries if entry != line]
            entries.insert(0, line)
            del entries[self.max_entries:]
            self._write_entries(entries)

        logger.info(f"Captured entry ({len(raw_text)} chars), history size {len(entries)}")
        return True

    def list(self) -> List[str]:
        """Return the stored entries, most recent first (empty if there is no history yet)"""
        return self._read_entries()

    def restore_candidate(self, display_substring: str) -> str:
        """
        Find the stored entry a picker selection refers to

        The first entry containing the selection wins, so entries sharing a
        truncated prefix resolve to the most recent one.

        Args:
            display_substring: Possibly truncated display text chosen by the user

        Returns:
            The full encoded entry
        """
        if display_substring:
            for entry in self._read_entries():
                if display_substring in entry:
                    return entry
        raise NoMatchError(f"No history entry matches {display_substring!r}")

    def clear(self) -> None:
        """Remove the history file"""
        with self._locked():
            try:
                self.history_path.unlink()
            except FileNotFoundError:
                return
            except OSError as e:
                raise StorageError(f"Cannot remove {self.history_path}: {e}") from e
        logger.info(f"Cleared history at {self.history_path}")

    def _read_entries(self) -> List[str]:
        try:
            with open(self.history_path, "rb") as f:
                data = f.read()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError(f"Cannot read {self.history_path}: {e}") from e

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            # Undecodable bytes become U+FFFD and are written back that way on the next capture
            logger.warning(f"History file {self.history_path} is not valid UTF-8 ({e.reason}), replacing bad bytes")
            text = data.decode("utf-8", errors="replace")
        return [line for line in text.split("\n") if line]

    def _write_entries(self, entries: List[str]) -> None:
        """Replace the history file atomically via a temp file in the same directory"""
        directory = self.history_path.parent
        tmp_name = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="\n",
                dir=directory,
                prefix=f".{self.history_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                for entry in entries:
                    f.write(entry + "\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.history_path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Cannot write {self.history_path}: {e}") from e

    @contextmanager
    def _locked(self) -> Iterator[None]:
        """Hold an exclusive lock on the sidecar lock file"""
        try:
            self.lock_path.parent.mkdir(parents=True, exist_ok=True)
            lock_file = open(self.lock_path, "a")
        except OSError as e:
            raise StorageError(f"Cannot open lock file {self.lock_path}: {e}") from e

        with lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)
