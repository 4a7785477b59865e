"""ALSA sound device driven through the amixer and alsactl commands."""

from __future__ import annotations

import subprocess

from barblocks.sound import DEFAULT_ALSA_DEVICE, DEFAULT_ALSA_NAME

_TRIM_CHARS = "[]%"


def parse_amixer_output(output: str) -> tuple[int, bool]:
    """Return (volume percent, muted) from the output of ``amixer get``."""
    lines = output.strip().splitlines()
    if not lines:
        raise ValueError("could not get sound info")
    fields = [
        word.strip(_TRIM_CHARS)
        for word in lines[-1].split()
        if word.startswith("[") and "dB" not in word
    ]
    if not fields:
        raise ValueError("could not get volume")
    volume_text = fields[0]
    if not volume_text.isdigit() or not volume_text.isascii():
        raise ValueError("could not parse volume to u32")
    volume = int(volume_text)
    if volume > 0xFFFF_FFFF:
        raise ValueError("could not parse volume to u32")
    muted = len(fields) > 1 and fields[1] == "off"
    return volume, muted


def capped_volume(volume: int, step: int, max_vol: int | None) -> int:
    """Apply a step to a volume, never below zero and never above ``max_vol``."""
    new_vol = max(0, volume + step)
    if max_vol is not None:
        return min(new_vol, max_vol)
    return new_vol


class AlsaDevice:
    """A mixer control of an ALSA device.

    ALSA offers no description, port or form factor, so those stay ``None``.
    """

    def __init__(
        self,
        name: str = DEFAULT_ALSA_NAME,
        device: str = DEFAULT_ALSA_DEVICE,
        natural_mapping: bool = False,
    ) -> None:
        self.name = name
        self.device = device
        self.natural_mapping = natural_mapping
        self.volume = 0
        self.muted = False
        self.output_description: str | None = None
        self.active_port: str | None = None
        self.form_factor: str | None = None
        self._monitor: subprocess.Popen | None = None

    @property
    def output_name(self) -> str:
        return self.name

    def _amixer(self, *args: str, error: str) -> subprocess.CompletedProcess:
        command = ["amixer"]
        if self.natural_mapping:
            command.append("-M")
        command += ["-D", self.device, *args]
        try:
            return subprocess.run(command, stdout=subprocess.PIPE, check=False)
        except OSError as e:
            raise OSError(error) from e

    def get_info(self) -> None:
        """Read the current volume and mute state."""
        completed = self._amixer("get", self.name, error="could not run amixer to get sound info")
        try:
            output = completed.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError("amixer produced non-UTF8 output") from e
        self.volume, self.muted = parse_amixer_output(output)

    def set_volume(self, step: int, max_vol: int | None = None) -> None:
        """Change the volume by ``step`` percent, capped at ``max_vol``."""
        new_volume = capped_volume(self.volume, step, max_vol)
        self._amixer("set", self.name, f"{new_volume}%", error="failed to set volume")
        self.volume = new_volume

    def toggle(self) -> None:
        """Mute or unmute the control."""
        self._amixer("set", self.name, "toggle", error="failed to toggle mute")
        self.muted = not self.muted

    def wait_for_update(self) -> None:
        """Block until ``alsactl monitor`` reports a change."""
        if self._monitor is None:
            try:
                self._monitor = subprocess.Popen(["alsactl", "monitor"], stdout=subprocess.PIPE)
            except OSError as e:
                raise OSError("Failed to start alsactl monitor") from e
        try:
            self._monitor.stdout.read1(1024)
        except OSError as e:
            raise OSError("Failed to read alsactl monitor output") from e

    def close(self) -> None:
        """Stop the change monitor, if it runs."""
        if self._monitor is not None:
            self._monitor.kill()
            self._monitor.wait()
            self._monitor = None

    def __enter__(self) -> AlsaDevice:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()