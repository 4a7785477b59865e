import json
import sys

import pytest

from barblocks.speedtest import SpeedtestResult, parse_speedtest_output, run_speedtest

SAMPLE = {"download": 93000000.5, "upload": 11000000.25, "ping": 25.0, "server": {"id": "1"}}


def test_parse_output():
    result = parse_speedtest_output(json.dumps(SAMPLE))
    assert result == SpeedtestResult(download=93000000.5, upload=11000000.25, ping=25.0)


def test_parse_bytes_and_integers():
    result = parse_speedtest_output(b'{"download": 10, "upload": 20, "ping": 30}')
    assert (result.download, result.upload, result.ping) == (10.0, 20.0, 30.0)


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[1, 2]",
        '{"download": 1, "upload": 2}',
        '{"download": "fast", "upload": 2, "ping": 3}',
        '{"download": true, "upload": 2, "ping": 3}',
        b"\xff\xfe",
    ],
)
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_speedtest_output(text)


def test_values():
    values = SpeedtestResult(download=1000.0, upload=500.0, ping=25.0).values()
    assert values["ping"] == pytest.approx(0.025)
    assert values["speed_down"] == 1000.0
    assert values["speed_up"] == 500.0


def test_run_speedtest_with_command():
    script = f"print({json.dumps(json.dumps(SAMPLE))})"
    result = run_speedtest([sys.executable, "-c", script])
    assert result.ping == 25.0
    assert result.download == 93000000.5


def test_run_speedtest_missing_program():
    with pytest.raises(OSError):
        run_speedtest(["definitely-not-a-real-program-xyz"])