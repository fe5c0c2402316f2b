"""
Encoder - one-line storage form for clipboard text
"""
import logging

from clipmenu.settings import DEFAULT_SENTINEL

logger = logging.getLogger(__name__)


class LineEncoder:
    """Swaps newlines for a sentinel character so each entry fits on one line"""

    def __init__(self, sentinel: str = DEFAULT_SENTINEL):
        if len(sentinel) != 1 or sentinel in ("\n", "\r"):
            raise ValueError(f"invalid sentinel {sentinel!r}")
        self.sentinel = sentinel

    def is_ambiguous(self, text: str) -> bool:
        """True when text already holds the sentinel and cannot round-trip"""
        return self.sentinel in text

    def encode(self, text: str) -> str:
        # Lossy when the sentinel is already present; the text is stored as is.
        if self.is_ambiguous(text):
            logger.warning(
                f"Clipboard text contains the sentinel {self.sentinel!r}; "
                "it will be restored as a newline"
            )
        return text.replace("\n", self.sentinel)

    def decode(self, line: str) -> str:
        return line.replace(self.sentinel, "\n")
