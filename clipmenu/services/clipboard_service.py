#!/usr/bin/env python3
"""
Clipboard Service - Reads and writes the system clipboard through CLI tools

Wayland sessions use wl-clipboard, X11 sessions use xclip or xsel. The
backend is chosen once at startup from the session environment.
"""
import logging
import os
import shutil
import subprocess
from typing import Callable, Mapping, Optional, Sequence

from clipmenu.core.protocols import ClipboardPort
from clipmenu.errors import BackendUnavailableError, ClipboardReadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 2.0


class SubprocessClipboard:
    """Clipboard backed by a pair of read/write commands"""

    name = "subprocess"
    read_cmd: Sequence[str] = ()
    write_cmd: Sequence[str] = ()

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    def read(self) -> str:
        """
        Read the current clipboard text

        Returns:
            Clipboard text with trailing newlines removed

        Raises:
            ClipboardReadError: the tool is missing, failed or timed out
        """
        try:
            result = subprocess.run(
                list(self.read_cmd),
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise ClipboardReadError(f"{self.read_cmd[0]} failed: {e}") from e

        if result.returncode != 0:
            # wl-paste and xclip both exit non-zero on an empty or non-text clipboard
            raise ClipboardReadError(
                f"{self.read_cmd[0]} exited with {result.returncode}: {result.stderr.strip()}"
            )
        return result.stdout.rstrip("\n")

    def write(self, text: str) -> bool:
        """Write text to the clipboard, returning False if the tool failed"""
        try:
            result = subprocess.run(
                list(self.write_cmd),
                input=text,
                text=True,
                # wl-copy and xclip fork a selection owner that keeps inherited pipes open
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.error(f"{self.write_cmd[0]} failed: {e}")
            return False

        if result.returncode != 0:
            logger.error(f"{self.write_cmd[0]} exited with {result.returncode}")
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(timeout={self.timeout})"


class WaylandClipboard(SubprocessClipboard):
    name = "wl-copy"
    read_cmd = ("wl-paste", "--no-newline", "--type", "text")
    write_cmd = ("wl-copy",)


class XclipClipboard(SubprocessClipboard):
    name = "xclip"
    read_cmd = ("xclip", "-selection", "clipboard", "-o")
    write_cmd = ("xclip", "-selection", "clipboard")


class XselClipboard(SubprocessClipboard):
    name = "xsel"
    read_cmd = ("xsel", "--clipboard", "--output")
    write_cmd = ("xsel", "--clipboard", "--input")


def _has_tools(backend: type, which: Callable[[str], Optional[str]]) -> bool:
    return all(which(cmd[0]) for cmd in (backend.read_cmd, backend.write_cmd))


def detect_backend(
    env: Optional[Mapping[str, str]] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
    timeout: float = DEFAULT_TIMEOUT,
) -> ClipboardPort:
    """
    Pick the clipboard backend for the current session

    Args:
        env: Environment to inspect (defaults to os.environ)
        which: Executable lookup, replaceable in tests
        timeout: Seconds to wait for each clipboard command

    Raises:
        BackendUnavailableError: no display server or no suitable tool
    """
    if env is None:
        env = os.environ

    if env.get("WAYLAND_DISPLAY"):
        if _has_tools(WaylandClipboard, which):
            logger.debug("Using Wayland clipboard (wl-clipboard)")
            return WaylandClipboard(timeout=timeout)
        raise BackendUnavailableError(
            "Wayland detected but 'wl-copy'/'wl-paste' not found. "
            "Install it:  sudo apt install wl-clipboard  /  sudo pacman -S wl-clipboard"
        )

    if env.get("DISPLAY"):
        for backend in (XclipClipboard, XselClipboard):
            if _has_tools(backend, which):
                logger.debug(f"Using X11 clipboard ({backend.name})")
                return backend(timeout=timeout)
        raise BackendUnavailableError(
            "X11 detected but neither 'xclip' nor 'xsel' found. "
            "Install one:  sudo apt install xclip"
        )

    raise BackendUnavailableError(
        "No display server detected (neither WAYLAND_DISPLAY nor DISPLAY is set)."
    )
