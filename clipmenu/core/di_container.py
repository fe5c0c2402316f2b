"""Dependency injection container."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from clipmenu.config import AppPaths
from clipmenu.core.protocols import ClipboardPort, PickerPort
from clipmenu.services import (
    HistoryService,
    LineEncoder,
    MenuPicker,
    MenuService,
    SnapshotService,
    detect_backend,
)
from clipmenu.settings import Settings, SettingsManager


@dataclass
class AppContainer:
    settings: Settings
    paths: AppPaths

    _encoder: Optional[LineEncoder] = field(default=None, init=False, repr=False)
    _history_service: Optional[HistoryService] = field(default=None, init=False, repr=False)
    _clipboard: Optional[ClipboardPort] = field(default=None, init=False, repr=False)
    _picker: Optional[PickerPort] = field(default=None, init=False, repr=False)

    @property
    def encoder(self) -> LineEncoder:
        if self._encoder is None:
            self._encoder = LineEncoder(self.settings.encoding.sentinel)
        return self._encoder

    @property
    def history_service(self) -> HistoryService:
        if self._history_service is None:
            self._history_service = HistoryService(
                self.paths.history_path,
                max_entries=self.settings.history.max_entries,
                encoder=self.encoder,
            )
        return self._history_service

    @property
    def clipboard(self) -> ClipboardPort:
        """Probes the session on first access; raises BackendUnavailableError."""
        if self._clipboard is None:
            self._clipboard = detect_backend(timeout=self.settings.clipboard.timeout)
        return self._clipboard

    @property
    def picker(self) -> PickerPort:
        if self._picker is None:
            self._picker = MenuPicker(self.settings.picker.command, self.settings.picker.args)
        return self._picker

    def menu_service(self) -> MenuService:
        return MenuService(
            self.history_service,
            self.clipboard,
            picker=self.picker,
            encoder=self.encoder,
            menu_width=self.settings.display.menu_width,
            preview_width=self.settings.display.preview_width,
        )

    def snapshot_service(self) -> SnapshotService:
        return SnapshotService(self.settings.snapshot.ignore_dirs)

    @classmethod
    def create(
        cls,
        settings: Optional[Settings] = None,
        paths: Optional[AppPaths] = None,
        config_path: Optional[Path] = None,
        history_path: Optional[Path] = None,
        max_entries: Optional[int] = None,
    ) -> "AppContainer":
        """Build a container, applying command line overrides on top of the settings file"""
        default_paths = paths or AppPaths.default()
        config_path = Path(config_path) if config_path else default_paths.config_path
        if settings is None:
            settings = SettingsManager(config_path).settings

        if max_entries is not None:
            history = settings.history.model_copy(update={"max_entries": max_entries})
            settings = settings.model_copy(update={"history": history})

        resolved_history = history_path or settings.history.path or default_paths.history_path
        return cls(
            settings=settings,
            paths=AppPaths(history_path=Path(resolved_history), config_path=config_path),
        )
