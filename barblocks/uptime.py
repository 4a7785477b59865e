"""System uptime shown in its two largest units."""

import re

UPTIME_PATH = "/proc/uptime"

_UNSIGNED_RE = re.compile(r"\+?\d+")


def parse_uptime(text: str) -> int:
    """Return the whole seconds from the contents of /proc/uptime."""
    head = text.split(".", 1)[0]
    if not _UNSIGNED_RE.fullmatch(head):
        raise ValueError("/proc/uptime has invalid content")
    return int(head)


def format_uptime(seconds: int) -> str:
    """Render seconds as weeks/days, days/hours, hours/minutes or minutes/seconds."""
    weeks, seconds = divmod(seconds, 604_800)
    days, seconds = divmod(seconds, 86_400)
    hours, seconds = divmod(seconds, 3_600)
    minutes, seconds = divmod(seconds, 60)
    if weeks > 0:
        return f"{weeks}w {days}d"
    if days > 0:
        return f"{days}d {hours}h"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m {seconds}s"


def read_uptime(path: str = UPTIME_PATH) -> int:
    """Read the system uptime in whole seconds."""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise OSError(f"Failed to read {path}") from e
    return parse_uptime(text)