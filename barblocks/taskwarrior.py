"""Number of tasks matching taskwarrior filters."""

from __future__ import annotations

import itertools
import os
import re
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass, field

from barblocks.prelude import State

DEFAULT_INTERVAL = 600
DEFAULT_FORMAT = "$done|$count.eng(1)"
DEFAULT_DATA_LOCATION = "~/.task"

_UNSIGNED_RE = re.compile(r"\+?\d+")
_U32_MAX = 0xFFFF_FFFF


@dataclass(frozen=True)
class TaskFilter:
    """A named taskwarrior filter expression."""

    name: str
    filter: str


def _default_filters() -> list[TaskFilter]:
    return [TaskFilter(name="pending", filter="-COMPLETED -DELETED")]


@dataclass
class TaskwarriorConfig:
    """Settings of the taskwarrior block."""

    interval: float = DEFAULT_INTERVAL
    warning_threshold: int = 10
    critical_threshold: int = 20
    hide_when_zero: bool = False
    filters: list[TaskFilter] = field(default_factory=_default_filters)
    format: str = DEFAULT_FORMAT
    data_location: str = DEFAULT_DATA_LOCATION

    @property
    def expanded_data_location(self) -> str:
        return os.path.expandvars(os.path.expanduser(self.data_location))

    def filter_cycle(self) -> Iterator[TaskFilter]:
        """Endless iterator over the filters, in order; a right click moves to the next."""
        if not self.filters:
            raise ValueError("failed to get next filter")
        return itertools.cycle(self.filters)


def task_state(count: int, warning_threshold: int, critical_threshold: int) -> State:
    """Critical or warning once the count reaches a threshold, idle otherwise."""
    if count >= critical_threshold:
        return State.CRITICAL
    if count >= warning_threshold:
        return State.WARNING
    return State.IDLE


def task_values(count: int, filter_name: str) -> dict[str, object]:
    """Placeholders: the count, the filter name and the ``done``/``single`` flags."""
    values: dict[str, object] = {"count": count, "filter_name": filter_name}
    if count == 0:
        values["done"] = True
    if count == 1:
        values["single"] = True
    return values


def parse_task_count(output: str | bytes) -> int:
    """Parse the number printed by ``task ... count``."""
    if isinstance(output, bytes):
        try:
            output = output.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(
                "failed to get the number of tasks from taskwarrior (invalid UTF-8)"
            ) from e
    text = output.strip()
    if not _UNSIGNED_RE.fullmatch(text) or int(text) > _U32_MAX:
        raise ValueError("could not parse the result of taskwarrior")
    return int(text)


def get_number_of_tasks(filter: str) -> int:
    """Ask taskwarrior how many tasks match ``filter``."""
    try:
        completed = subprocess.run(
            ["task", "rc.gc=off", filter, "count"], stdout=subprocess.PIPE, check=False
        )
    except OSError as e:
        raise OSError("failed to run taskwarrior for getting the number of tasks") from e
    return parse_task_count(completed.stdout)