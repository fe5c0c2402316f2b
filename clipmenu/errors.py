"""Error kinds raised by clipmenu services."""


class ClipMenuError(Exception):
    """Base class for all clipmenu errors"""


class NoHistoryError(ClipMenuError):
    """There is nothing stored in the history file yet"""


class NoMatchError(ClipMenuError):
    """A picker selection did not resolve to a stored entry"""


class StorageError(ClipMenuError):
    """Reading or writing the history file failed"""


class BackendUnavailableError(ClipMenuError):
    """No usable clipboard or picker tool was found"""


class ClipboardReadError(ClipMenuError):
    """The clipboard tool failed to produce text"""


class ClipboardWriteError(ClipMenuError):
    """The clipboard tool rejected the new value"""
