"""Network throughput bookkeeping: byte counters, speeds and history graphs."""

from __future__ import annotations

import math
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import TypeVar

DEFAULT_FORMAT = "$speed_down.eng(3,B,K)$speed_up.eng(3,B,K)"
DEFAULT_INTERVAL = 2
HISTORY_LENGTH = 8

T = TypeVar("T")


@dataclass(frozen=True)
class NetStats:
    """Cumulative byte counters of a network interface."""

    rx_bytes: int = 0
    tx_bytes: int = 0

    def __sub__(self, other: NetStats) -> NetStats:
        if not isinstance(other, NetStats):
            return NotImplemented
        rx = self.rx_bytes - other.rx_bytes
        tx = self.tx_bytes - other.tx_bytes
        if rx < 0 or tx < 0:
            raise ValueError("byte counters went backwards")
        return NetStats(rx_bytes=rx, tx_bytes=tx)


def push_to_hist(hist: MutableSequence[T], elem: T) -> None:
    """Drop the oldest entry of ``hist`` and append ``elem`` at the end, in place."""
    hist[0] = elem
    hist[:] = [*hist[1:], hist[0]]


def _rate(amount: float, elapsed: float) -> float:
    if elapsed == 0:
        return math.nan if amount == 0 else math.copysign(math.inf, amount)
    return amount / elapsed


def compute_speeds(
    old_stats: NetStats | None,
    new_stats: NetStats | None,
    elapsed: float,
) -> tuple[float, float]:
    """Return (download, upload) in bytes per second; zero without two samples."""
    if old_stats is None or new_stats is None:
        return 0.0, 0.0
    diff = new_stats - old_stats
    return _rate(float(diff.rx_bytes), elapsed), _rate(float(diff.tx_bytes), elapsed)