"""Memory and swap usage read from /proc/meminfo (plus the ZFS ARC cache)."""

from __future__ import annotations

import dataclasses
import math
import re
from dataclasses import dataclass
from enum import Enum

from barblocks.prelude import State

MEMINFO_PATH = "/proc/meminfo"
ARCSTATS_PATH = "/proc/spl/kstat/zfs/arcstats"

DEFAULT_FORMAT_MEM = "$mem_free.eng(3,B,M)/$mem_total.eng(3,B,M)($mem_total_used_percents.eng(2))"
DEFAULT_FORMAT_SWAP = "$swap_free.eng(3,B,M)/$swap_total.eng(3,B,M)($swap_used_percents.eng(2))"

_MEMINFO_FIELDS = {
    "MemTotal:": "mem_total",
    "MemFree:": "mem_free",
    "Buffers:": "buffers",
    "Cached:": "cached",
    "SReclaimable:": "s_reclaimable",
    "Shmem:": "shmem",
    "SwapTotal:": "swap_total",
    "SwapFree:": "swap_free",
}

_ARC_SIZE_RE = re.compile(r"size\s+\d+\s+(\d+)")
_UNSIGNED_RE = re.compile(r"\+?\d+")


class MemType(Enum):
    """Which view the block shows."""

    MEMORY = "memory"
    SWAP = "swap"

    def toggled(self) -> MemType:
        """Return the other view."""
        return MemType.SWAP if self is MemType.MEMORY else MemType.MEMORY

    @property
    def icon(self) -> str:
        return "memory_mem" if self is MemType.MEMORY else "memory_swap"


@dataclass
class MemoryConfig:
    """Settings of the memory block."""

    format_mem: str = DEFAULT_FORMAT_MEM
    format_swap: str = DEFAULT_FORMAT_SWAP
    display_type: MemType = MemType.MEMORY
    clickable: bool = True
    interval: float = 5
    warning_mem: float = 80.0
    warning_swap: float = 80.0
    critical_mem: float = 95.0
    critical_swap: float = 95.0

    @classmethod
    def from_dict(cls, data: dict) -> MemoryConfig:
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown field(s): {', '.join(sorted(unknown))}")
        values = dict(data)
        if "display_type" in values and not isinstance(values["display_type"], MemType):
            values["display_type"] = MemType(values["display_type"])
        return cls(**values)

    def format_for(self, memtype: MemType) -> str:
        return self.format_mem if memtype is MemType.MEMORY else self.format_swap


def _ratio_percent(part: float, whole: float) -> float:
    """Percentage with IEEE semantics for a zero denominator."""
    if whole == 0:
        if part == 0:
            return math.nan
        return math.copysign(math.inf, part)
    return part / whole * 100.0


@dataclass(frozen=True)
class MemState:
    """Raw figures from /proc/meminfo in KiB; ``zfs_arc_cache`` is in bytes."""

    mem_total: int = 0
    mem_free: int = 0
    buffers: int = 0
    cached: int = 0
    s_reclaimable: int = 0
    shmem: int = 0
    swap_total: int = 0
    swap_free: int = 0
    zfs_arc_cache: int = 0

    def _bytes(self) -> dict[str, float]:
        mem_total = self.mem_total * 1024.0
        mem_free = self.mem_free * 1024.0
        swap_total = self.swap_total * 1024.0
        swap_free = self.swap_free * 1024.0
        buffers = self.buffers * 1024.0
        cached = (self.cached + self.s_reclaimable - self.shmem) * 1024.0 + float(self.zfs_arc_cache)
        mem_total_used = mem_total - mem_free
        mem_used = mem_total_used - (buffers + cached)
        return {
            "mem_total": mem_total,
            "mem_free": mem_free,
            "mem_total_used": mem_total_used,
            "mem_used": mem_used,
            "mem_avail": mem_total - mem_used,
            "swap_total": swap_total,
            "swap_free": swap_free,
            "swap_used": swap_total - swap_free,
            "buffers": buffers,
            "cached": cached,
        }

    def values(self) -> dict[str, float]:
        """All placeholders: byte amounts and their percentages."""
        b = self._bytes()
        mem_total = b["mem_total"]
        swap_total = b["swap_total"]
        return {
            "mem_total": mem_total,
            "mem_free": b["mem_free"],
            "mem_free_percents": _ratio_percent(b["mem_free"], mem_total),
            "mem_total_used": b["mem_total_used"],
            "mem_total_used_percents": _ratio_percent(b["mem_total_used"], mem_total),
            "mem_used": b["mem_used"],
            "mem_used_percents": _ratio_percent(b["mem_used"], mem_total),
            "mem_avail": b["mem_avail"],
            "mem_avail_percents": _ratio_percent(b["mem_avail"], mem_total),
            "swap_total": swap_total,
            "swap_free": b["swap_free"],
            "swap_free_percents": _ratio_percent(b["swap_free"], swap_total),
            "swap_used": b["swap_used"],
            "swap_used_percents": _ratio_percent(b["swap_used"], swap_total),
            "buffers": b["buffers"],
            "buffers_percent": _ratio_percent(b["buffers"], mem_total),
            "cached": b["cached"],
            "cached_percent": _ratio_percent(b["cached"], mem_total),
        }

    def state(self, memtype: MemType, config: MemoryConfig) -> State:
        """Widget state for the given view under the config's thresholds."""
        b = self._bytes()
        if memtype is MemType.MEMORY:
            usage = _ratio_percent(b["mem_used"], b["mem_total"])
            critical, warning = config.critical_mem, config.warning_mem
        else:
            usage = _ratio_percent(b["swap_used"], b["swap_total"])
            critical, warning = config.critical_swap, config.warning_swap
        if usage > critical:
            return State.CRITICAL
        if usage > warning:
            return State.WARNING
        return State.IDLE


def parse_meminfo(text: str) -> MemState:
    """Parse the contents of /proc/meminfo."""
    fields: dict[str, int] = {}
    for line in text.splitlines():
        words = line.split()
        if not words:
            continue
        if len(words) < 2 or not _UNSIGNED_RE.fullmatch(words[1]):
            raise ValueError("failed to parse /proc/meminfo")
        attr = _MEMINFO_FIELDS.get(words[0])
        if attr is not None:
            fields[attr] = int(words[1])
    return MemState(**fields)


def parse_arcstats(text: str) -> int:
    """Return the ZFS ARC cache size in bytes from arcstats contents."""
    match = _ARC_SIZE_RE.search(text)
    if match is None:
        raise ValueError("failed to find zfs_arc_cache size")
    return int(match.group(1))


def read_memstate(meminfo_path: str = MEMINFO_PATH, arcstats_path: str = ARCSTATS_PATH) -> MemState:
    """Read memory figures, adding the ZFS ARC cache when it is available."""
    try:
        with open(meminfo_path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise FileNotFoundError(f"{meminfo_path} does not exist") from e
    state = parse_meminfo(text)
    try:
        with open(arcstats_path, encoding="utf-8") as f:
            arcstats = f.read()
    except OSError:
        return state
    return dataclasses.replace(state, zfs_arc_cache=parse_arcstats(arcstats))