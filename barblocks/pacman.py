"""Pending package updates reported by pacman and an optional AUR helper."""

from __future__ import annotations

import os
import re
import shutil
import subprocess
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from barblocks.prelude import State

DEFAULT_INTERVAL = 600
DEFAULT_FORMAT = "$pacman.eng(1)"
DEFAULT_PACMAN_DB = "/var/lib/pacman/"

_MISSING_AUR_COMMAND = "$aur or $both found in format string but no aur_command supplied"


@dataclass(frozen=True)
class Watched:
    """Which update sources the block has to query."""

    pacman: bool = False
    aur_command: str | None = None

    @property
    def aur(self) -> bool:
        return self.aur_command is not None

    @property
    def needs_fakeroot(self) -> bool:
        return self.pacman


def choose_watched(format_keys: Iterable[str], aur_command: str | None) -> Watched:
    """Decide which sources to query from the placeholders used in the formats."""
    keys = set(format_keys)
    aur = "aur" in keys
    pacman = "pacman" in keys
    both = "both" in keys
    if both or (pacman and aur):
        if aur_command is None:
            raise ValueError(_MISSING_AUR_COMMAND)
        return Watched(pacman=True, aur_command=aur_command)
    if pacman:
        return Watched(pacman=True)
    if aur:
        if aur_command is None:
            raise ValueError(_MISSING_AUR_COMMAND)
        return Watched(pacman=False, aur_command=aur_command)
    return Watched()


def get_updates_db_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Directory holding the scratch copy of the sync database."""
    env = os.environ if environ is None else environ
    custom = env.get("CHECKUPDATES_DB")
    if custom is not None:
        return Path(custom)
    tmp = env.get("TMPDIR") or "/tmp"
    user = env.get("USER", "")
    return Path(tmp) / f"checkup-db-{user}"


def get_update_count(updates: str) -> int:
    """Number of listed updates, not counting ignored packages."""
    return sum(1 for line in updates.splitlines() if "[ignored]" not in line)


def has_matching_update(updates: str, regex: str | re.Pattern[str]) -> bool:
    """Whether any listed update matches ``regex``."""
    pattern = re.compile(regex) if isinstance(regex, str) else regex
    return any(pattern.search(line) for line in updates.splitlines())


def update_state(total: int, warning: bool, critical: bool) -> State:
    """Idle when up to date, otherwise critical, warning or info."""
    if total == 0:
        return State.IDLE
    if critical:
        return State.CRITICAL
    if warning:
        return State.WARNING
    return State.INFO


def check_fakeroot_command_exists() -> None:
    """Raise RuntimeError unless fakeroot is on the PATH."""
    if shutil.which("fakeroot") is None:
        raise RuntimeError("fakeroot not found")


def _decode(output: bytes, message: str) -> str:
    try:
        return output.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(message) from e


def get_pacman_available_updates() -> str:
    """Refresh a private copy of the sync database and list pending updates."""
    updates_db = get_updates_db_dir()
    db_path = Path(os.environ.get("DBPath", DEFAULT_PACMAN_DB))

    try:
        updates_db.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OSError(f"Failed to create checkup-db directory at '{updates_db}'") from e

    local_cache = updates_db / "local"
    if not local_cache.exists():
        try:
            local_cache.symlink_to(db_path / "local")
        except OSError as e:
            raise OSError("Failed to created required symlink") from e

    env = {**os.environ, "LC_ALL": "C"}
    sync_cmd = f'fakeroot -- pacman -Sy --dbpath "{updates_db}" --logfile /dev/null'
    try:
        status = subprocess.run(
            ["sh", "-c", sync_cmd], env=env, stdout=subprocess.DEVNULL, check=False
        )
    except OSError as e:
        raise OSError("Failed to run command") from e
    if status.returncode != 0:
        raise RuntimeError("pacman -Sy exited with non zero exit status")

    query_cmd = f'fakeroot pacman -Qu --dbpath "{updates_db}"'
    try:
        completed = subprocess.run(
            ["sh", "-c", query_cmd], env=env, stdout=subprocess.PIPE, check=False
        )
    except OSError as e:
        raise OSError("There was a problem running the pacman commands") from e
    return _decode(completed.stdout, "Pacman produced non-UTF8 output")


def get_aur_available_updates(aur_command: str) -> str:
    """Run the AUR helper command and return what it printed."""
    try:
        completed = subprocess.run(
            ["sh", "-c", aur_command], stdout=subprocess.PIPE, check=False
        )
    except OSError as e:
        raise OSError(f"aur command: {aur_command} failed") from e
    return _decode(
        completed.stdout,
        "There was a problem while converting the aur command output to a string",
    )