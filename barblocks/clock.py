"""The current time, formatted with strftime-style specifiers."""

from __future__ import annotations

import re
import time
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_FORMAT = "%a %d/%m %R"
DEFAULT_INTERVAL = 1

_SPEC_RE = re.compile(r"%(.)", re.DOTALL)
_COMPOSITE = {
    "R": "%H:%M",
    "T": "%H:%M:%S",
    "F": "%Y-%m-%d",
    "D": "%m/%d/%y",
}


def _expand(fmt: str) -> str:
    return _SPEC_RE.sub(lambda m: _COMPOSITE.get(m.group(1), m.group(0)), fmt)


def _resolve_zone(timezone: str | tzinfo) -> tzinfo:
    if isinstance(timezone, tzinfo):
        return timezone
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"invalid timezone: {timezone}") from e


def get_time(format: str = DEFAULT_FORMAT, timezone: str | tzinfo | None = None) -> str:
    """Format the current time in ``timezone``, or in the local zone when None."""
    if timezone is None:
        # Pick up changes to TZ made since the process started.
        if hasattr(time, "tzset"):
            time.tzset()
        now = datetime.now().astimezone()
    else:
        now = datetime.now(_resolve_zone(timezone))
    return now.strftime(_expand(format))