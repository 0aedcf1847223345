"""Media records reported by the VLC rc interface."""

from __future__ import annotations

from dataclasses import asdict, dataclass

MIN_VOLUME = 0
MAX_VOLUME = 200


def clamp_volume(volume: int) -> int:
    """Clamp a volume level into ``MIN_VOLUME..MAX_VOLUME``."""
    return max(MIN_VOLUME, min(MAX_VOLUME, volume))


@dataclass(frozen=True)
class Track:
    """A media track in the player's playlist.

    ``length`` is the ``HH:MM:SS`` text VLC prints and is not converted
    to a duration.
    """

    index: int
    title: str
    length: str

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.index} - {self.title} ({self.length})"


@dataclass(frozen=True)
class Subtitle:
    """A subtitle track of the current media. Index ``-1`` is "Disable"."""

    index: int
    title: str

    def to_dict(self) -> dict:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.index} - {self.title}"


Playlist = list[Track]
Subtitles = list[Subtitle]
