"""High-level client for VLC's rc interface.

Every method writes one command and, where the command has a reply,
reads it back. Volume, play and stop cannot be confirmed from a single
round trip, so those re-query the player until it reports the requested
state (see :class:`ConvergencePolicy`).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from .errors import ConvergenceError
from .models.media import MAX_VOLUME, Playlist, Subtitles, clamp_volume
from .protocol.commands import (
    Command,
    build_command,
    build_fullscreen,
    build_get_volume,
    build_seek,
    build_set_volume,
)
from .protocol.parser import (
    parse_is_playing,
    parse_playlist,
    parse_subtitles,
    parse_time,
    parse_title,
    parse_volume,
)
from .transport.tcp_connection import DEFAULT_TIMEOUT, TCPConnection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConvergencePolicy:
    """Bounds for the set-and-confirm loops.

    Attributes:
        max_attempts: Mutate commands sent before giving up.
        interval: Seconds to wait after each mutate command.
    """

    max_attempts: int = 50
    interval: float = 0.05


class Client:
    """A connection to a VLC player's rc interface.

    Usage::

        with Client.connect("127.0.0.1:9090") as player:
            player.set_volume(50)
            for track in player.playlist():
                print(track)
    """

    def __init__(
        self,
        connection: TCPConnection,
        policy: ConvergencePolicy | None = None,
    ) -> None:
        self._connection = connection
        self.policy = policy or ConvergencePolicy()

    @classmethod
    def connect(
        cls,
        address: tuple[str, int] | str,
        timeout: float = DEFAULT_TIMEOUT,
        policy: ConvergencePolicy | None = None,
    ) -> Client:
        """Connect to the rc interface at ``address``.

        Raises:
            TransportError: If the connection cannot be established.
        """
        return cls(TCPConnection.connect(address, timeout=timeout), policy)

    @property
    def connected(self) -> bool:
        return self._connection.connected

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---- listings ----

    def playlist(self) -> Playlist:
        """Return the tracks in the playlist, in playlist order."""
        self._connection.write_command(build_command(Command.PLAYLIST))
        return parse_playlist(self._connection.read_block())

    def subtitles(self) -> Subtitles:
        """Return the subtitle tracks of the current media."""
        self._connection.write_command(build_command(Command.SUBTITLE_TRACK))
        return parse_subtitles(self._connection.read_block())

    # ---- volume ----

    def get_volume(self) -> int:
        """Return the current volume, clamped to ``MAX_VOLUME``.

        Raises:
            ParseError: If the reply is not a number.
        """
        volume = parse_volume(self._query(build_get_volume()))
        if volume > MAX_VOLUME:
            logger.warning(
                "VLC reported volume %d, clamping to %d", volume, MAX_VOLUME
            )
            return MAX_VOLUME
        return volume

    def set_volume(self, volume: int) -> None:
        """Set the volume and wait until the player reports it.

        Args:
            volume: Requested level; values outside 0-200 are clamped.

        Raises:
            ConvergenceError: If the player never reports the new level.
        """
        volume = clamp_volume(volume)
        self._converge(
            build_set_volume(volume),
            lambda: self.get_volume() == volume,
        )

    # ---- playback ----

    def is_playing(self) -> bool:
        """Return whether a track is loaded and playing.

        A paused track still counts as playing.
        """
        return parse_is_playing(self._query(build_command(Command.IS_PLAYING)))

    def play(self) -> None:
        """Start playback. Does nothing when the playlist is empty."""
        if not self.playlist():
            logger.debug("Playlist is empty, not starting playback")
            return
        self._converge(build_command(Command.PLAY), self.is_playing)

    def stop(self) -> None:
        """Stop playback and wait until the player reports it stopped."""
        self._converge(build_command(Command.STOP), lambda: not self.is_playing())

    def pause(self) -> bool:
        """Pause playback. Does nothing if the player is stopped.

        Returns:
            True if a pause was sent, False if the player was stopped.
        """
        if not self.is_playing():
            return False
        # "pause" toggles, so resume first to be sure it lands on paused.
        self._connection.write_command(build_command(Command.PLAY))
        self._connection.write_command(build_command(Command.PAUSE))
        return True

    def get_time(self) -> int | None:
        """Seconds elapsed in the current track, or None when stopped."""
        return parse_time(self._query(build_command(Command.GET_TIME)))

    def get_title(self) -> str | None:
        """Title of the current track, or None when nothing is loaded."""
        return parse_title(self._query(build_command(Command.GET_TITLE)))

    def forward(self, seconds: int) -> None:
        """Seek forward by ``seconds``."""
        if seconds < 0:
            raise ValueError(f"Seconds must be non-negative, got {seconds}")
        self._connection.write_command(build_seek(seconds))

    def rewind(self, seconds: int) -> None:
        """Seek backward by ``seconds``."""
        if seconds < 0:
            raise ValueError(f"Seconds must be non-negative, got {seconds}")
        self._connection.write_command(build_seek(-seconds))

    def next(self) -> None:
        self._connection.write_command(build_command(Command.NEXT))

    def prev(self) -> None:
        self._connection.write_command(build_command(Command.PREV))

    def fullscreen(self, enabled: bool) -> None:
        self._connection.write_command(build_fullscreen(enabled))

    # ---- helpers ----

    def _query(self, command: str) -> str:
        self._connection.write_command(command)
        return self._connection.read_line()

    def _converge(self, command: str, reached: Callable[[], bool]) -> None:
        """Send ``command`` until ``reached()`` holds.

        ``reached`` is checked before every send, so a player already in
        the target state costs one query and no command.

        Raises:
            ConvergenceError: After ``policy.max_attempts`` sends.
        """
        attempts = 0
        while not reached():
            if attempts >= self.policy.max_attempts:
                raise ConvergenceError(command, attempts)
            self._connection.write_command(command)
            attempts += 1
            time.sleep(self.policy.interval)
        if attempts:
            logger.debug("%r converged after %d attempt(s)", command, attempts)
