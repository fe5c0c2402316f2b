"""Tests for dependency injection container."""

from pathlib import Path

import pytest
import yaml


@pytest.fixture
def paths(tmp_path: Path):
    from clipmenu.config import AppPaths

    return AppPaths(history_path=tmp_path / "history.txt", config_path=tmp_path / "settings.yml")


def test_container_create_reads_settings_file(paths):
    from clipmenu.core.di_container import AppContainer

    paths.config_path.write_text(yaml.safe_dump({"history": {"max_entries": 7}}))

    container = AppContainer.create(paths=paths)

    assert container.settings.history.max_entries == 7
    assert container.paths.history_path == paths.history_path


def test_container_cli_overrides_win(paths, tmp_path: Path):
    from clipmenu.core.di_container import AppContainer

    paths.config_path.write_text(yaml.safe_dump({
        "history": {"max_entries": 7, "path": str(tmp_path / "from_settings.txt")},
    }))

    container = AppContainer.create(
        paths=paths,
        history_path=tmp_path / "from_flag.txt",
        max_entries=3,
    )

    assert container.settings.history.max_entries == 3
    assert container.paths.history_path == tmp_path / "from_flag.txt"


def test_container_settings_path_beats_default(paths, tmp_path: Path):
    from clipmenu.core.di_container import AppContainer

    paths.config_path.write_text(yaml.safe_dump({"history": {"path": str(tmp_path / "custom.txt")}}))

    container = AppContainer.create(paths=paths)

    assert container.paths.history_path == tmp_path / "custom.txt"


def test_container_explicit_config_path(paths, tmp_path: Path):
    from clipmenu.core.di_container import AppContainer

    other = tmp_path / "other.yml"
    other.write_text(yaml.safe_dump({"display": {"menu_width": 40}}))

    container = AppContainer.create(paths=paths, config_path=other)

    assert container.settings.display.menu_width == 40
    assert container.paths.config_path == other


def test_container_history_service_lazy_singleton(paths):
    from clipmenu.core.di_container import AppContainer

    container = AppContainer.create(paths=paths)
    assert container._history_service is None

    service = container.history_service

    assert service is container.history_service
    assert service.history_path == paths.history_path
    assert service.max_entries == 50


def test_container_encoder_uses_configured_sentinel(paths):
    from clipmenu.core.di_container import AppContainer
    from clipmenu.settings import Settings

    settings = Settings(encoding={"sentinel": "¶"})

    container = AppContainer.create(settings=settings, paths=paths)

    assert container.encoder.sentinel == "¶"
    assert container.history_service.encoder is container.encoder


def test_container_clipboard_detection_is_lazy(paths, monkeypatch):
    from clipmenu.core import di_container
    from tests.fakes.fake_clipboard import FakeClipboard

    calls = []

    def fake_detect(timeout):
        calls.append(timeout)
        return FakeClipboard("x")

    monkeypatch.setattr(di_container, "detect_backend", fake_detect)
    container = di_container.AppContainer.create(paths=paths)
    assert calls == []

    clipboard = container.clipboard

    assert clipboard is container.clipboard
    assert calls == [2.0]


def test_container_menu_service_wiring(paths, monkeypatch):
    from clipmenu.core import di_container
    from clipmenu.services import MenuPicker
    from tests.fakes.fake_clipboard import FakeClipboard

    monkeypatch.setattr(di_container, "detect_backend", lambda timeout: FakeClipboard())
    container = di_container.AppContainer.create(paths=paths)

    service = container.menu_service()

    assert service.history is container.history_service
    assert isinstance(service.picker, MenuPicker)
    assert service.picker.command == "bemenu"
    assert service.menu_width == 80
    assert service.preview_width == 50
