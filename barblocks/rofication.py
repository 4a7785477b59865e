"""Pending notification count from the rofication daemon."""

from __future__ import annotations

import os
import re
import socket
from dataclasses import dataclass

from barblocks.prelude import State

_UNSIGNED_RE = re.compile(r"\+?\d+")
_SEPARATOR_RE = re.compile(r"[,\n]")


@dataclass
class RoficationConfig:
    """Settings of the rofication block."""

    interval: float = 1
    socket_path: str = "/tmp/rofi_notification_daemon"
    format: str = "$num.eng(1)"

    @property
    def expanded_socket_path(self) -> str:
        return os.path.expandvars(os.path.expanduser(self.socket_path))


def parse_response(response: str) -> tuple[int, int]:
    """Split a daemon response into (regular, critical) counts."""
    parts = _SEPARATOR_RE.split(response, maxsplit=1)
    if len(parts) != 2:
        raise ValueError("Incorrect response")
    num, crit = parts
    if not (_UNSIGNED_RE.fullmatch(num) and _UNSIGNED_RE.fullmatch(crit)):
        raise ValueError("Incorrect response")
    return int(num), int(crit)


def rofication_status(socket_path: str) -> tuple[int, int]:
    """Ask the daemon at ``socket_path`` for its notification counts."""
    with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as sock:
        try:
            sock.connect(socket_path)
        except OSError as e:
            raise OSError("Failed to connect to socket") from e
        try:
            sock.sendall(b"num")
        except OSError as e:
            raise OSError("Failed to write to socket") from e
        chunks = []
        try:
            while chunk := sock.recv(4096):
                chunks.append(chunk)
        except OSError as e:
            raise OSError("Failed to read from socket") from e
    try:
        response = b"".join(chunks).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError("Failed to read from socket") from e
    return parse_response(response)


def notification_state(num: int, crit: int) -> State:
    """Warning for critical notifications, info for any, idle otherwise."""
    if crit > 0:
        return State.WARNING
    if num > 0:
        return State.INFO
    return State.IDLE