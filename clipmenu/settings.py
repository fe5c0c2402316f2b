"""
clipmenu Settings Management
Loads and validates settings from settings.yml using Pydantic
"""
import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_SENTINEL = "␤"
DEFAULT_IGNORE_DIRS = [".git", "node_modules", "python_env", "__pycache__", ".venv", "venv"]


class HistorySettings(BaseModel):
    """History retention settings"""
    max_entries: int = Field(
        default=50,
        ge=1,
        le=10000,
        description="Maximum number of entries kept in the history file (1-10000)"
    )
    path: Optional[Path] = Field(
        default=None,
        description="Override for the history file location"
    )

    @field_validator('path')
    @classmethod
    def expand_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ~ in user supplied paths"""
        if v is None:
            return v
        return v.expanduser()


class EncodingSettings(BaseModel):
    """One-line storage encoding settings"""
    sentinel: str = Field(
        default=DEFAULT_SENTINEL,
        description="Character stored in place of newlines"
    )

    @field_validator('sentinel')
    @classmethod
    def validate_sentinel(cls, v: str) -> str:
        """Ensure the sentinel is a single non-newline character"""
        if len(v) != 1:
            raise ValueError("sentinel must be exactly one character")
        if v in ("\n", "\r"):
            raise ValueError("sentinel cannot be a line break")
        return v


class DisplaySettings(BaseModel):
    """Display-related settings"""
    menu_width: int = Field(
        default=80,
        ge=1,
        description="Characters of each entry shown in the picker"
    )
    preview_width: int = Field(
        default=50,
        ge=1,
        description="Characters of the copied entry echoed after a restore"
    )


class PickerSettings(BaseModel):
    """dmenu-compatible picker program"""
    command: str = Field(default="bemenu", min_length=1)
    args: List[str] = Field(default_factory=lambda: ["-l", "10", "-p", "📋 Clip:"])


class ClipboardSettings(BaseModel):
    """Clipboard tool settings"""
    timeout: float = Field(
        default=2.0,
        gt=0,
        description="Seconds to wait for the clipboard tool"
    )


class SnapshotSettings(BaseModel):
    """Directory snapshot settings"""
    ignore_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_DIRS))


class Settings(BaseModel):
    """Main settings model"""
    history: HistorySettings = Field(default_factory=HistorySettings)
    encoding: EncodingSettings = Field(default_factory=EncodingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    picker: PickerSettings = Field(default_factory=PickerSettings)
    clipboard: ClipboardSettings = Field(default_factory=ClipboardSettings)
    snapshot: SnapshotSettings = Field(default_factory=SnapshotSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to the XDG config location
        """
        if config_path is None:
            from clipmenu.config.paths import AppPaths
            config_path = AppPaths.default().config_path

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.debug(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing settings YAML {self.config_path}: {e}")
            return Settings()
        except OSError as e:
            logger.warning(f"Error reading settings {self.config_path}: {e}")
            return Settings()

        if config_data is None:
            logger.debug("Settings file is empty, using defaults")
            return Settings()
        if not isinstance(config_data, dict):
            logger.warning(f"Settings file {self.config_path} is not a mapping, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except ValidationError as e:
            logger.warning(f"Invalid settings in {self.config_path}: {e}")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        return settings
