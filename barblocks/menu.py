"""A click-driven menu: scroll through items and run the chosen shell command."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto

from barblocks.prelude import MouseButton


@dataclass(frozen=True)
class MenuItem:
    """One entry: the text shown, the command run and an optional confirmation prompt."""

    display: str
    cmd: str
    confirm_msg: str | None = None

    def spawn(self) -> subprocess.Popen:
        """Start the command in a shell without waiting for it."""
        try:
            return subprocess.Popen(["sh", "-c", self.cmd])
        except OSError as e:
            raise OSError(f"Failed to run '{self.cmd}'") from e


class _Mode(Enum):
    CLOSED = auto()
    SELECTING = auto()
    CONFIRMING = auto()


class Menu:
    """State of the menu block, advanced one click at a time."""

    def __init__(self, text: str, items: Sequence[MenuItem]) -> None:
        if not items:
            raise ValueError("menu needs at least one item")
        self.label = text
        self.items = list(items)
        self._mode = _Mode.CLOSED
        self._index = 0

    @property
    def text(self) -> str:
        """What the block currently shows."""
        if self._mode is _Mode.SELECTING:
            return self.items[self._index].display
        if self._mode is _Mode.CONFIRMING:
            return self.items[self._index].confirm_msg or ""
        return self.label

    @property
    def is_open(self) -> bool:
        return self._mode is not _Mode.CLOSED

    def _close(self) -> None:
        self._mode = _Mode.CLOSED
        self._index = 0

    def handle_click(self, button: MouseButton) -> MenuItem | None:
        """Apply a click; return the item whose command should run now, if any."""
        if self._mode is _Mode.CLOSED:
            if button is MouseButton.LEFT:
                self._mode = _Mode.SELECTING
                self._index = 0
            return None

        if self._mode is _Mode.CONFIRMING:
            item = self.items[self._index]
            self._close()
            return item if button is MouseButton.DOUBLE_LEFT else None

        count = len(self.items)
        if button is MouseButton.WHEEL_UP:
            self._index = (self._index + 1) % count
        elif button is MouseButton.WHEEL_DOWN:
            self._index = (self._index + count + 1) % count
        elif button is MouseButton.LEFT:
            item = self.items[self._index]
            if item.confirm_msg is not None:
                self._mode = _Mode.CONFIRMING
                return None
            self._close()
            return item
        elif button is MouseButton.RIGHT:
            self._close()
        return None