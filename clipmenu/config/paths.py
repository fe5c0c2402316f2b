"""Application paths configuration."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

HISTORY_FILE_NAME = "clipboard_history.txt"


def _xdg_dir(env: Mapping[str, str], var: str, fallback: str) -> Path:
    value = env.get(var)
    if value:
        return Path(value)
    return Path.home() / fallback


@dataclass(frozen=True)
class AppPaths:
    history_path: Path
    config_path: Path

    @classmethod
    def default(cls, env: Optional[Mapping[str, str]] = None) -> "AppPaths":
        if env is None:
            env = os.environ

        # Shares the cache file used by the clipmenu shell script
        cache_dir = _xdg_dir(env, "XDG_CACHE_HOME", ".cache")
        config_dir = _xdg_dir(env, "XDG_CONFIG_HOME", ".config")

        return cls(
            history_path=cache_dir / HISTORY_FILE_NAME,
            config_path=config_dir / "clipmenu" / "settings.yml",
        )
