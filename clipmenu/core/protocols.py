"""Protocol definitions for dependency injection."""

from typing import Optional, Protocol, Sequence, Union


class ClipboardPort(Protocol):
    name: str

    def read(self) -> str: ...

    def write(self, text: str) -> bool: ...


class PickerPort(Protocol):
    def show(self, options: Sequence[str]) -> Optional[Union[int, str]]: ...
