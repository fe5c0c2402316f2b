"""Tests for clipboard backends and session detection."""

import subprocess

import pytest

from clipmenu.errors import BackendUnavailableError, ClipboardReadError


def _which(*available):
    return lambda name: f"/usr/bin/{name}" if name in available else None


class _RunRecorder:
    def __init__(self, returncode=0, stdout="", stderr="", exc=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.exc = exc
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.exc is not None:
            raise self.exc
        return subprocess.CompletedProcess(cmd, self.returncode, self.stdout, self.stderr)


def test_detect_wayland():
    from clipmenu.services.clipboard_service import WaylandClipboard, detect_backend

    backend = detect_backend(env={"WAYLAND_DISPLAY": "wayland-0", "DISPLAY": ":0"}, which=_which("wl-copy", "wl-paste", "xclip"))

    assert isinstance(backend, WaylandClipboard)
    assert backend.name == "wl-copy"


def test_detect_wayland_without_tools_fails_fast():
    from clipmenu.services.clipboard_service import detect_backend

    with pytest.raises(BackendUnavailableError, match="wl-copy"):
        detect_backend(env={"WAYLAND_DISPLAY": "wayland-0"}, which=_which("xclip"))


def test_detect_x11_prefers_xclip():
    from clipmenu.services.clipboard_service import XclipClipboard, detect_backend

    backend = detect_backend(env={"DISPLAY": ":0"}, which=_which("xclip", "xsel"))

    assert isinstance(backend, XclipClipboard)


def test_detect_x11_falls_back_to_xsel():
    from clipmenu.services.clipboard_service import XselClipboard, detect_backend

    backend = detect_backend(env={"DISPLAY": ":0"}, which=_which("xsel"))

    assert isinstance(backend, XselClipboard)


def test_detect_x11_without_tools():
    from clipmenu.services.clipboard_service import detect_backend

    with pytest.raises(BackendUnavailableError, match="xclip"):
        detect_backend(env={"DISPLAY": ":0"}, which=_which())


def test_detect_no_display_server():
    from clipmenu.services.clipboard_service import detect_backend

    with pytest.raises(BackendUnavailableError, match="No display server"):
        detect_backend(env={}, which=_which("wl-copy", "wl-paste", "xclip"))


def test_detect_passes_timeout():
    from clipmenu.services.clipboard_service import detect_backend

    backend = detect_backend(env={"DISPLAY": ":0"}, which=_which("xclip"), timeout=5.0)

    assert backend.timeout == 5.0


def test_read_returns_stdout_without_trailing_newlines(monkeypatch):
    from clipmenu.services.clipboard_service import XclipClipboard

    run = _RunRecorder(stdout="copied text\n\n")
    monkeypatch.setattr(subprocess, "run", run)

    assert XclipClipboard().read() == "copied text"
    assert run.calls[0][0] == ["xclip", "-selection", "clipboard", "-o"]


def test_read_keeps_inner_newlines(monkeypatch):
    from clipmenu.services.clipboard_service import WaylandClipboard

    monkeypatch.setattr(subprocess, "run", _RunRecorder(stdout="foo\nbar"))

    assert WaylandClipboard().read() == "foo\nbar"


def test_wayland_read_requests_text_only(monkeypatch):
    from clipmenu.services.clipboard_service import WaylandClipboard

    run = _RunRecorder(returncode=1, stderr="No suitable type of content copied")
    monkeypatch.setattr(subprocess, "run", run)

    with pytest.raises(ClipboardReadError):
        WaylandClipboard().read()
    assert run.calls[0][0] == ["wl-paste", "--no-newline", "--type", "text"]


def test_read_nonzero_exit_raises(monkeypatch):
    from clipmenu.services.clipboard_service import WaylandClipboard

    monkeypatch.setattr(subprocess, "run", _RunRecorder(returncode=1, stderr="Nothing is copied"))

    with pytest.raises(ClipboardReadError, match="Nothing is copied"):
        WaylandClipboard().read()


@pytest.mark.parametrize(
    "exc",
    [FileNotFoundError("wl-paste"), subprocess.TimeoutExpired(["wl-paste"], 2.0)],
)
def test_read_tool_failure_raises(monkeypatch, exc):
    from clipmenu.services.clipboard_service import WaylandClipboard

    monkeypatch.setattr(subprocess, "run", _RunRecorder(exc=exc))

    with pytest.raises(ClipboardReadError):
        WaylandClipboard().read()


def test_write_sends_text_on_stdin(monkeypatch):
    from clipmenu.services.clipboard_service import XselClipboard

    run = _RunRecorder()
    monkeypatch.setattr(subprocess, "run", run)

    assert XselClipboard().write("foo\nbar") is True
    cmd, kwargs = run.calls[0]
    assert cmd == ["xsel", "--clipboard", "--input"]
    assert kwargs["input"] == "foo\nbar"


def test_write_failure_returns_false(monkeypatch):
    from clipmenu.services.clipboard_service import WaylandClipboard

    monkeypatch.setattr(subprocess, "run", _RunRecorder(returncode=1, stderr="no seat"))

    assert WaylandClipboard().write("text") is False


def test_write_missing_tool_returns_false(monkeypatch):
    from clipmenu.services.clipboard_service import WaylandClipboard

    monkeypatch.setattr(subprocess, "run", _RunRecorder(exc=FileNotFoundError("wl-copy")))

    assert WaylandClipboard().write("text") is False
