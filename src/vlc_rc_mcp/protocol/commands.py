"""rc command verbs and command-line builders.

Each builder returns the text of one command line without its
terminator; :func:`..framing.encode_command` adds it.
"""

from __future__ import annotations

from enum import Enum

from ..models.media import clamp_volume


class Command(str, Enum):
    """Command verbs understood by the rc interface."""

    PLAYLIST = "playlist"
    SUBTITLE_TRACK = "strack"
    VOLUME = "volume"
    IS_PLAYING = "is_playing"
    PLAY = "play"
    STOP = "stop"
    PAUSE = "pause"
    GET_TIME = "get_time"
    GET_TITLE = "get_title"
    SEEK = "seek"
    NEXT = "next"
    PREV = "prev"
    FULLSCREEN = "fullscreen"


def build_command(command: Command, *args: str) -> str:
    """Join a verb and its arguments into one command line."""
    return " ".join([command.value, *args])


def build_get_volume() -> str:
    return build_command(Command.VOLUME)


def build_set_volume(volume: int) -> str:
    """Build a ``volume <n>`` command.

    Args:
        volume: Requested level. Clamped to 0-200 before it is sent.
    """
    return build_command(Command.VOLUME, str(clamp_volume(volume)))


def build_seek(seconds: int) -> str:
    """Build a relative seek: ``seek +N`` for positive, ``seek -N`` otherwise.

    Args:
        seconds: Signed offset from the current position.
    """
    sign = "+" if seconds >= 0 else "-"
    return build_command(Command.SEEK, f"{sign}{abs(seconds)}")


def build_fullscreen(enabled: bool) -> str:
    return build_command(Command.FULLSCREEN, "on" if enabled else "off")
