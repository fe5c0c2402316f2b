"""dmenu-style picker running as a child process."""

import logging
import shutil
import subprocess
from typing import List, Optional, Sequence

from clipmenu.errors import BackendUnavailableError

logger = logging.getLogger(__name__)


class MenuPicker:
    """Feeds options on stdin to bemenu (or any dmenu-compatible tool) and reads the choice back."""

    def __init__(self, command: str = "bemenu", args: Optional[Sequence[str]] = None):
        self.command = command
        self.args: List[str] = list(args) if args is not None else []

    def available(self) -> bool:
        return shutil.which(self.command) is not None

    def show(self, options: Sequence[str]) -> Optional[str]:
        """Block until the user picks an option; None means cancelled."""
        try:
            result = subprocess.run(
                [self.command, *self.args],
                input="\n".join(options) + "\n",
                stdout=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError as e:
            raise BackendUnavailableError(f"Picker '{self.command}' not found") from e

        if result.returncode != 0:
            logger.debug(f"{self.command} exited with {result.returncode}, treating as cancel")
            return None

        selection = result.stdout.rstrip("\n")
        return selection or None
