"""Ping, download and upload speeds measured by speedtest-cli."""

from __future__ import annotations

import json
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_COMMAND = ("speedtest-cli", "--json")


@dataclass(frozen=True)
class SpeedtestResult:
    """One measurement: speeds in bits per second, ping in milliseconds."""

    download: float
    upload: float
    ping: float

    def values(self) -> dict[str, float]:
        """Placeholders: ping in seconds, speeds in bits per second."""
        return {
            "ping": self.ping * 1e-3,
            "speed_down": self.download,
            "speed_up": self.upload,
        }


def parse_speedtest_output(text: str | bytes) -> SpeedtestResult:
    """Parse the JSON printed by ``speedtest-cli --json``."""
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError("'speedtest-cli' produced non-UTF8 output") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError("'speedtest-cli' produced wrong JSON") from e
    if not isinstance(data, dict):
        raise ValueError("'speedtest-cli' produced wrong JSON")
    fields = {}
    for key in ("download", "upload", "ping"):
        value = data.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("'speedtest-cli' produced wrong JSON")
        fields[key] = float(value)
    return SpeedtestResult(**fields)


def run_speedtest(command: Sequence[str] = DEFAULT_COMMAND) -> SpeedtestResult:
    """Run the measuring command and parse its output."""
    try:
        completed = subprocess.run(list(command), stdout=subprocess.PIPE, check=False)
    except OSError as e:
        raise OSError("failed to run 'speedtest-cli'") from e
    return parse_speedtest_output(completed.stdout)