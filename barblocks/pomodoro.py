"""Pomodoro timer: settings, countdown texts and click handling."""

from __future__ import annotations

from dataclasses import dataclass

from barblocks.prelude import MouseButton

DEFAULT_TASK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_POMODOROS = 4
TICK_SECONDS = 10


@dataclass
class PomodoroConfig:
    """Messages and the optional notifier command."""

    message: str = "Pomodoro over! Take a break!"
    break_message: str = "Break over! Time to work!"
    notify_cmd: str | None = None
    blocking_cmd: bool = False

    def notify_command(self, msg: str) -> str | None:
        """The notifier command with ``{msg}`` filled in, or None without a notifier."""
        if self.notify_cmd is None:
            return None
        return self.notify_cmd.replace("{msg}", msg)


def minutes_left(left_seconds: float) -> int:
    """Whole minutes remaining, rounded up from whole seconds."""
    return (int(left_seconds) + 59) // 60


def task_text(pomodoro: int, left_seconds: float) -> str:
    """Countdown text of a task, with one bar per finished pomodoro."""
    minutes = minutes_left(left_seconds)
    if pomodoro == 0:
        return f"{minutes} min"
    return f"{'|' * pomodoro} {minutes} min"


def break_text(left_seconds: float) -> str:
    """Countdown text of a break."""
    return f"Break: {minutes_left(left_seconds)} min"


def adjust_number(number: int, button: MouseButton) -> int:
    """Scroll up to increase, down to decrease without going below zero."""
    if button is MouseButton.WHEEL_UP:
        return number + 1
    if button is MouseButton.WHEEL_DOWN:
        return max(number - 1, 0)
    return number