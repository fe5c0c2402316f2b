"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def history_path(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "clipboard_history.txt"


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def history_service(history_path: Path):
    from clipmenu.services.history_service import HistoryService

    return HistoryService(history_path)


@pytest.fixture
def fake_clipboard():
    from tests.fakes.fake_clipboard import FakeClipboard

    return FakeClipboard()


@pytest.fixture
def fake_picker():
    from tests.fakes.fake_picker import FakePicker

    return FakePicker()
