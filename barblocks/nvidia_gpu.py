"""NVIDIA GPU statistics read from nvidia-smi, and fan control via nvidia-settings."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass

from barblocks.prelude import State

MEM_BTN = 1
FAN_BTN = 2
QUERY = (
    "--query-gpu=name,memory.total,utilization.gpu,memory.used,temperature.gpu,"
    "fan.speed,clocks.current.graphics,power.draw,"
)
FORMAT = "--format=csv,noheader,nounits"
DEFAULT_FORMAT = "$utilization $memory $temperature"
_SETTINGS_ERROR = "Failed to execute nvidia-settings"

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.IGNORECASE
)
_UNSIGNED_RE = re.compile(r"\+?\d+")
_U32_MAX = 0xFFFF_FFFF


@dataclass
class NvidiaGpuConfig:
    """Settings of the GPU block; thresholds are temperatures in degrees."""

    format: str = DEFAULT_FORMAT
    interval: int = 1
    gpu_id: int = 0
    idle: int = 50
    good: int = 70
    info: int = 75
    warning: int = 80


def _parse_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise ValueError(text)
    return float(text)


def _parse_u32(text: str) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    if value > _U32_MAX:
        raise ValueError(text)
    return value


@dataclass
class GpuInfo:
    """One sample: memory in the units nvidia-smi reports scaled by 1e-6, clocks likewise."""

    name: str
    mem_total: float
    utilization: float
    mem_used: float
    temperature: int
    fan_speed: int
    clocks: float
    power_draw: float

    @classmethod
    def parse(cls, line: str) -> GpuInfo:
        """Parse one CSV line of nvidia-smi output."""
        parts = iter(line.strip().split(", "))

        def take(prop: str, convert, scale: float | None = None):
            try:
                raw = next(parts)
            except StopIteration:
                raise ValueError(f"missing property: '{prop}'") from None
            try:
                value = convert(raw)
            except ValueError:
                raise ValueError(f"bad property '{prop}'") from None
            return value * scale if scale is not None else value

        return cls(
            name=take("name", str),
            mem_total=take("mem_total", _parse_float, 1e-6),
            utilization=take("utilization", _parse_float),
            mem_used=take("mem_used", _parse_float, 1e-6),
            temperature=take("temperature", _parse_u32),
            fan_speed=take("fan_speed", _parse_u32),
            clocks=take("clocks", _parse_float, 1e-6),
            power_draw=take("power_draw", _parse_float),
        )

    def values(self, show_mem_total: bool = False) -> dict[str, object]:
        """Placeholders of the block."""
        return {
            "name": self.name,
            "utilization": self.utilization,
            "memory": self.mem_total if show_mem_total else self.mem_used,
            "temperature": self.temperature,
            "fan_speed": self.fan_speed,
            "clocks": self.clocks,
            "power": self.power_draw,
        }


def temperature_state(temperature: float, config: NvidiaGpuConfig) -> State:
    """Map a temperature onto a widget state using the config's upper bounds."""
    if temperature <= config.idle:
        return State.IDLE
    if temperature <= config.good:
        return State.GOOD
    if temperature <= config.info:
        return State.INFO
    if temperature <= config.warning:
        return State.WARNING
    return State.CRITICAL


def nvidia_smi_args(interval: int, gpu_id: int) -> list[str]:
    """Command line that makes nvidia-smi print a sample every ``interval`` seconds."""
    return ["nvidia-smi", "-l", str(interval), "-i", str(gpu_id), QUERY, FORMAT]


def fan_speed_args(gpu_id: int, speed: int | None) -> list[str]:
    """Command line that sets a fixed fan speed, or hands control back when ``speed`` is None."""
    if speed is None:
        return ["nvidia-settings", "-a", f"[gpu:{gpu_id}]/GPUFanControlState=0"]
    return [
        "nvidia-settings",
        "-a",
        f"[gpu:{gpu_id}]/GPUFanControlState=1",
        "-a",
        f"[fan:{gpu_id}]/GPUTargetFanSpeed={speed}",
    ]


def set_fan_speed(gpu_id: int, speed: int | None) -> None:
    """Run nvidia-settings to change the fan speed; raise RuntimeError on failure."""
    try:
        completed = subprocess.run(fan_speed_args(gpu_id, speed), check=False)
    except OSError as e:
        raise RuntimeError(_SETTINGS_ERROR) from e
    if completed.returncode != 0:
        raise RuntimeError(_SETTINGS_ERROR)