import pytest

from barblocks.pomodoro import (
    DEFAULT_TASK_MINUTES,
    PomodoroConfig,
    adjust_number,
    break_text,
    minutes_left,
    task_text,
)
from barblocks.prelude import MouseButton


def test_notify_command_substitutes_message():
    config = PomodoroConfig(notify_cmd="notify-send '{msg}'")
    assert config.notify_command(config.message) == "notify-send 'Pomodoro over! Take a break!'"
    assert config.notify_command(config.break_message) == "notify-send 'Break over! Time to work!'"


def test_notify_command_without_notifier():
    assert PomodoroConfig().notify_command("hello") is None


@pytest.mark.parametrize("k", [0, 1, 5, 25])
def test_minutes_left_exact(k):
    assert minutes_left(60 * k) == k


@pytest.mark.parametrize("k", [0, 4, 24])
def test_minutes_left_rounds_up(k):
    assert minutes_left(60 * k + 1) == k + 1
    assert minutes_left(60 * k + 59.9) == k + 1


def test_task_text_first():
    assert task_text(0, DEFAULT_TASK_MINUTES * 60) == f"{DEFAULT_TASK_MINUTES} min"


@pytest.mark.parametrize("pomodoro", [1, 2, 3])
def test_task_text_bars(pomodoro):
    text = task_text(pomodoro, 600)
    bars, rest = text.split(" ", 1)
    assert bars == "|" * pomodoro
    assert rest == task_text(0, 600)


def test_break_text():
    assert break_text(300) == "Break: 5 min"


def test_adjust_up():
    assert adjust_number(4, MouseButton.WHEEL_UP) == 5


def test_adjust_down_saturates():
    assert adjust_number(0, MouseButton.WHEEL_DOWN) == 0


@pytest.mark.parametrize("n", [1, 7, 25])
def test_adjust_round_trip(n):
    assert adjust_number(adjust_number(n, MouseButton.WHEEL_UP), MouseButton.WHEEL_DOWN) == n


@pytest.mark.parametrize("button", [MouseButton.LEFT, MouseButton.RIGHT, MouseButton.MIDDLE])
def test_other_buttons_keep_number(button):
    assert adjust_number(DEFAULT_TASK_MINUTES, button) == DEFAULT_TASK_MINUTES