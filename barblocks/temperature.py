"""System temperature: scales, thresholds and summary of sensor readings."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from barblocks.prelude import State

DEFAULT_FORMAT = "$average avg, $max max|"
DEFAULT_GOOD = 20.0
DEFAULT_IDLE = 45.0
DEFAULT_INFO = 60.0
DEFAULT_WARN = 80.0
VALID_RANGE = (-100.0, 150.0)


class TemperatureScale(Enum):
    """Unit in which temperatures are shown."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"

    def from_celsius(self, val: float) -> float:
        """Convert a Celsius value into this scale."""
        if self is TemperatureScale.FAHRENHEIT:
            return val * 1.8 + 32.0
        return val


@dataclass(frozen=True)
class Thresholds:
    """Upper bounds of the good, idle, info and warning states."""

    good: float
    idle: float
    info: float
    warning: float

    @classmethod
    def for_scale(
        cls,
        scale: TemperatureScale,
        good: float | None = None,
        idle: float | None = None,
        info: float | None = None,
        warning: float | None = None,
    ) -> Thresholds:
        """Given thresholds, with the defaults converted into ``scale`` for the rest."""
        return cls(
            good=scale.from_celsius(DEFAULT_GOOD) if good is None else good,
            idle=scale.from_celsius(DEFAULT_IDLE) if idle is None else idle,
            info=scale.from_celsius(DEFAULT_INFO) if info is None else info,
            warning=scale.from_celsius(DEFAULT_WARN) if warning is None else warning,
        )


def collect_readings(values: Iterable[float], scale: TemperatureScale) -> list[float]:
    """Keep plausible Celsius readings and convert them into ``scale``."""
    low, high = VALID_RANGE
    readings = []
    for value in values:
        if low <= value <= high:
            readings.append(scale.from_celsius(value))
        else:
            print(f"Temperature ({value}) outside of range ([-100, 150])", file=sys.stderr)
    return readings


def summarize(temps: Sequence[float]) -> tuple[float, float, float]:
    """Return (min, average, max); min and max are 0 and the average NaN when empty."""
    if not temps:
        return 0.0, math.nan, 0.0
    return min(temps), sum(temps) / len(temps), max(temps)


def temperature_state(max_temp: float, thresholds: Thresholds) -> State:
    """Widget state for the hottest reading."""
    if max_temp <= thresholds.good:
        return State.GOOD
    if max_temp <= thresholds.idle:
        return State.IDLE
    if max_temp <= thresholds.info:
        return State.INFO
    if max_temp <= thresholds.warning:
        return State.WARNING
    return State.CRITICAL