"""Shared vocabulary of the status blocks: widget states and mouse buttons."""

from enum import Enum


class State(Enum):
    """Visual state of a widget, from calm to alarming."""

    IDLE = "idle"
    INFO = "info"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class MouseButton(Enum):
    """Mouse buttons a block can react to."""

    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"
    FORWARD = "forward"
    BACK = "back"
    DOUBLE_LEFT = "double_left"