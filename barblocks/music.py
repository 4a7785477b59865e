"""Current track and player selection for MPRIS media players."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from barblocks.mpris import PlaybackStatus, PlayerMetadata

NAME_PREFIX = "org.mpris.MediaPlayer2."
DEFAULT_FORMAT = "$combo.rot-str() $play|"
DEFAULT_SEPARATOR = " - "
DEFAULT_SEEK_STEP = 1_000

PLAY_PAUSE_BTN = 1
NEXT_BTN = 2
PREV_BTN = 3


def extract_player_name(full_name: str) -> str | None:
    """Return the part of an MPRIS bus name after the common prefix."""
    if full_name.startswith(NAME_PREFIX):
        return full_name[len(NAME_PREFIX):]
    return None


def player_matches(
    full_name: str,
    filter_name: str | None,
    exclude_regex: Iterable[str | re.Pattern[str]],
) -> bool:
    """Whether a bus name is an MPRIS player that passes the filter and exclusions."""
    name = extract_player_name(full_name)
    if name is None:
        return False
    if filter_name is not None and not name.startswith(filter_name):
        return False
    return not any(re.search(pattern, name) for pattern in exclude_regex)


@dataclass
class Player:
    """A media player on the bus and what it is playing."""

    bus_name: str
    owner: str
    status: PlaybackStatus | None = None
    title: str | None = None
    artist: str | None = None
    url: str | None = None

    @property
    def is_playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING

    def update_metadata(self, metadata: PlayerMetadata) -> None:
        """Replace the track information with that of ``metadata``."""
        self.title = metadata.title()
        self.artist = metadata.artist()
        self.url = metadata.url()

    def values(self, separator: str = DEFAULT_SEPARATOR) -> dict[str, str]:
        """Text placeholders: player, url, combo, title and artist when known."""
        name = extract_player_name(self.bus_name)
        if name is None:
            raise ValueError(f"not an MPRIS player name: {self.bus_name}")
        values = {"player": name}
        if self.url is not None:
            values["url"] = self.url
        title, artist = self.title, self.artist
        if title is not None and artist is not None:
            values["combo"] = f"{title}{separator}{artist}"
            values["title"] = title
            values["artist"] = artist
        elif title is not None:
            values["combo"] = title
            values["title"] = title
        elif artist is not None:
            values["combo"] = artist
            values["artist"] = artist
        elif self.url is not None:
            values["combo"] = self.url
        return values


@dataclass
class PlayerList:
    """The players known to the block and which one is shown."""

    players: list[Player] = field(default_factory=list)
    index: int | None = None

    def __post_init__(self) -> None:
        if self.index is None:
            for i, player in enumerate(self.players):
                self.index = i
                if player.is_playing:
                    break

    def __len__(self) -> int:
        return len(self.players)

    def add(self, player: Player) -> None:
        """Append a newly appeared player and show it."""
        self.players.append(player)
        self.index = len(self.players) - 1

    def remove_owner(self, owner: str) -> Player | None:
        """Drop the player with this bus owner, keeping the selection sensible."""
        pos = next((i for i, p in enumerate(self.players) if p.owner == owner), None)
        if pos is None:
            return None
        removed = self.players.pop(pos)
        if self.index is not None:
            if not self.players:
                self.index = None
            elif pos == self.index:
                self.index = 0
            elif pos < self.index:
                self.index -= 1
        return removed

    def cycle(self) -> None:
        """Show the next player, wrapping around to the first."""
        if self.index is None:
            return
        self.index = self.index + 1 if self.index + 1 < len(self.players) else 0

    def current(self) -> Player | None:
        """The player being shown, if any."""
        if self.index is None:
            return None
        return self.players[self.index]

    def find_owner(self, owner: str) -> Player | None:
        return next((p for p in self.players if p.owner == owner), None)