"""Volume level block: drivers, device kinds and icon selection."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

DEFAULT_FORMAT = "$volume.eng(2)|"
DEFAULT_STEP_WIDTH = 5
MAX_STEP_WIDTH = 50
DEFAULT_ALSA_NAME = "Master"
DEFAULT_ALSA_DEVICE = "default"

_HEADPHONE_FORM_FACTORS = frozenset({"headset", "headphone", "hands-free", "portable"})


class DeviceKind(Enum):
    """Whether the device plays sound or records it."""

    SINK = "sink"
    SOURCE = "source"

    @property
    def icon_prefix(self) -> str:
        return "volume" if self is DeviceKind.SINK else "microphone"


class SoundDriver(Enum):
    """Sound system used to read and change the volume."""

    AUTO = "auto"
    ALSA = "alsa"
    PULSEAUDIO = "pulseaudio"


def _volume_level(volume: int) -> str:
    if volume <= 0:
        return "muted"
    if volume <= 20:
        return "empty"
    if volume <= 70:
        return "half"
    return "full"


def volume_icon(
    volume: int,
    device_kind: DeviceKind,
    headphones_indicator: bool = False,
    form_factor: str | None = None,
    active_port: str | None = None,
) -> str:
    """Name of the icon for a volume level, or ``headphones`` when they are in use."""
    if headphones_indicator and device_kind is DeviceKind.SINK:
        if form_factor is None:
            headphones = active_port is not None and "headphones" in active_port
        else:
            headphones = form_factor in _HEADPHONE_FORM_FACTORS
        if headphones:
            return "headphones"
    return f"{device_kind.icon_prefix}_{_volume_level(volume)}"


def clamp_step(step_width: int) -> int:
    """Limit the scroll step to between 0 and 50 percent."""
    return min(max(step_width, 0), MAX_STEP_WIDTH)


def map_output_name(name: str, mappings: Mapping[str, str] | None) -> str:
    """Replace a device name by its configured alias, if it has one."""
    if mappings is None:
        return name
    return mappings.get(name, name)