"""A toggle driven by shell commands that query, enable and disable it."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass
class ToggleConfig:
    """Commands and icons of a toggle block; ``interval`` None means refresh on click only."""

    command_on: str
    command_off: str
    command_state: str
    text: str | None = None
    icon_on: str = "toggle_on"
    icon_off: str = "toggle_off"
    interval: float | None = None

    def icon(self, toggled: bool) -> str:
        return self.icon_on if toggled else self.icon_off

    def command_for(self, toggled: bool) -> str:
        """The command a click runs: switch off when on, on when off."""
        return self.command_off if toggled else self.command_on


def shell(environ: Mapping[str, str] | None = None) -> str:
    """The shell from ``$SHELL``, falling back to ``sh``."""
    env = os.environ if environ is None else environ
    return env.get("SHELL", "sh")


def is_toggled(output: str | bytes) -> bool:
    """The toggle is on when the state command prints anything but whitespace."""
    if isinstance(output, bytes):
        try:
            output = output.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError("The output of command_state is invalid UTF-8") from e
    return bool(output.strip())


def query_state(shell: str, command: str) -> bool:
    """Run the state command and report whether the toggle is on."""
    try:
        completed = subprocess.run([shell, "-c", command], stdout=subprocess.PIPE, check=False)
    except OSError as e:
        raise OSError("Failed to run command_state") from e
    return is_toggled(completed.stdout)


def run_toggle_command(shell: str, command: str) -> bool:
    """Run an on/off command; return whether it exited successfully."""
    try:
        completed = subprocess.run([shell, "-c", command], stdout=subprocess.PIPE, check=False)
    except OSError as e:
        raise OSError("Failed to run command") from e
    return completed.returncode == 0