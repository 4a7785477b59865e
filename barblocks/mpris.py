"""Playback status and track metadata of MPRIS media players."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PlaybackStatus(Enum):
    """The player's ``PlaybackStatus`` property."""

    PLAYING = "Playing"
    PAUSED = "Paused"
    STOPPED = "Stopped"

    @classmethod
    def from_name(cls, name: str) -> PlaybackStatus | None:
        """Return the status for its exact MPRIS name, or None when unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class PlayerMetadata:
    """The ``Metadata`` property of a player: a mapping of xesam keys to values."""

    data: Mapping[str, Any] = field(default_factory=dict)

    def title(self) -> str | None:
        """The track title, if present and not empty."""
        return _non_empty_str(self.data.get("xesam:title"))

    def artist(self) -> str | None:
        """The first listed artist, if present and not empty."""
        artists = self.data.get("xesam:artist")
        if not isinstance(artists, (list, tuple)) or not artists:
            return None
        return _non_empty_str(artists[0])

    def url(self) -> str | None:
        """The track URL, if present and not empty."""
        return _non_empty_str(self.data.get("xesam:url"))