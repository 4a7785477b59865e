import math

import pytest

from barblocks.prelude import State
from barblocks.temperature import (
    TemperatureScale,
    Thresholds,
    collect_readings,
    summarize,
    temperature_state,
)


def test_celsius_is_identity():
    assert TemperatureScale.CELSIUS.from_celsius(37.5) == 37.5


def test_fahrenheit_defaults_match_documentation():
    t = Thresholds.for_scale(TemperatureScale.FAHRENHEIT)
    assert (t.good, t.idle, t.info, t.warning) == pytest.approx((68, 113, 140, 176))


def test_celsius_defaults():
    assert Thresholds.for_scale(TemperatureScale.CELSIUS) == Thresholds(20, 45, 60, 80)


def test_overrides_are_not_converted():
    t = Thresholds.for_scale(TemperatureScale.FAHRENHEIT, good=10, warning=90)
    assert t.good == 10
    assert t.warning == 90
    assert t.idle == pytest.approx(TemperatureScale.FAHRENHEIT.from_celsius(45))


def test_summarize():
    assert summarize([3.0, 1.0, 2.0]) == (1.0, 2.0, 3.0)


def test_summarize_empty():
    lo, avg, hi = summarize([])
    assert lo == 0.0 and hi == 0.0
    assert math.isnan(avg)


@pytest.mark.parametrize(
    "temp, state",
    [
        (20, State.GOOD),
        (20.5, State.IDLE),
        (45, State.IDLE),
        (60, State.INFO),
        (80, State.WARNING),
        (80.1, State.CRITICAL),
    ],
)
def test_temperature_state(temp, state):
    assert temperature_state(temp, Thresholds(20, 45, 60, 80)) is state


def test_collect_readings_filters_range(capsys):
    readings = collect_readings([50.0, 200.0, -150.0, -100.0, 150.0], TemperatureScale.CELSIUS)
    assert readings == [50.0, -100.0, 150.0]
    assert "outside of range" in capsys.readouterr().err


def test_collect_readings_converts():
    readings = collect_readings([20.0], TemperatureScale.FAHRENHEIT)
    assert readings == [TemperatureScale.FAHRENHEIT.from_celsius(20.0)]
    assert readings[0] == pytest.approx(68)