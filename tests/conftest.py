"""Pytest fixtures: a scripted in-memory VLC rc console."""

from __future__ import annotations

import socket

import pytest

from vlc_rc_mcp.client import Client, ConvergencePolicy
from vlc_rc_mcp.transport import tcp_connection

GREETING = (
    b"VLC media player 3.0.18 Vetinari\r\n"
    b"Command Line Interface initialized. Type `help' for help.\r\n"
    b"> "
)


class FakeVlc:
    """Socket double that answers rc commands the way VLC does.

    Every reply is followed by a ``"> "`` prompt, so stale prompts pile
    up in front of later replies exactly as they do on a real socket.

    ``volume_lag`` and ``play_lag`` make the player ignore that many
    ``volume N`` / ``play`` commands before applying one.
    """

    def __init__(
        self,
        tracks: list[tuple[int, str, str]] | None = None,
        subtitles: list[tuple[int, str]] | None = None,
        volume: int = 256,
        playing: bool = False,
        title: str = "",
        time: int = 0,
    ) -> None:
        self.tracks = tracks if tracks is not None else [
            (4, "Chopin Nocturnes.mp3", "01:50:55"),
            (5, "Bach (00:00:01).mp3", "00:03:12"),
        ]
        self.subtitles = subtitles if subtitles is not None else [
            (-1, "Disable *"),
            (2, "Track 1 - [English]"),
        ]
        self.volume = volume
        self.playing = playing
        self.paused = False
        self.title = title
        self.time = time
        self.fullscreen = False
        self.volume_lag = 0
        self.play_lag = 0
        self.stop_lag = 0

        self.sent: list[str] = []
        self.shutdowns: list[int] = []
        self.closed = False
        self.timeout: float | None = None
        self._out = bytearray(GREETING)

    # ---- socket interface ----

    def settimeout(self, timeout: float) -> None:
        self.timeout = timeout

    def sendall(self, data: bytes) -> None:
        for line in data.decode("ascii").splitlines():
            self.sent.append(line)
            self._handle(line)

    def recv(self, size: int) -> bytes:
        if self.closed:
            raise OSError("Bad file descriptor")
        if not self._out:
            raise socket.timeout("timed out")
        chunk = bytes(self._out[:size])
        del self._out[:size]
        return chunk

    def shutdown(self, how: int) -> None:
        self.shutdowns.append(how)

    def close(self) -> None:
        self.closed = True

    # ---- console ----

    def feed(self, data: bytes) -> None:
        """Queue raw bytes as if the player had printed them."""
        self._out += data

    def _reply(self, *lines: str) -> None:
        for line in lines:
            self._out += line.encode("utf-8") + b"\r\n"
        self._out += b"> "

    def _handle(self, line: str) -> None:
        verb, _, arg = line.partition(" ")
        if verb == "playlist":
            rows = [f"|   {i} - {title} ({length})" for i, title, length in self.tracks]
            self._reply(
                "+----[ Playlist - playlist ]",
                "| 1 - Playlist",
                *rows,
                "| 2 - Media Library",
                "+----[ End of playlist ]",
            )
        elif verb == "strack":
            rows = [f"| {i} - {title}" for i, title in self.subtitles]
            self._reply("+----[ spu-es ]", *rows, "+----[ end of spu-es ]")
        elif verb == "volume" and not arg:
            self._reply(str(self.volume))
        elif verb == "volume":
            if self.volume_lag:
                self.volume_lag -= 1
            else:
                self.volume = int(arg)
            self._reply()
        elif verb == "is_playing":
            self._reply("1" if self.playing else "0")
        elif verb == "play":
            if self.play_lag:
                self.play_lag -= 1
            elif self.tracks:
                self.playing = True
                self.paused = False
            self._reply()
        elif verb == "stop":
            if self.stop_lag:
                self.stop_lag -= 1
            else:
                self.playing = False
            self._reply()
        elif verb == "pause":
            self.paused = not self.paused
            self._reply()
        elif verb == "get_time":
            self._reply(str(self.time) if self.playing else "")
        elif verb == "get_title":
            self._reply(self.title if self.playing else "")
        elif verb == "seek":
            self.time = max(0, self.time + int(arg))
            self._reply()
        elif verb == "fullscreen":
            self.fullscreen = arg == "on"
            self._reply()
        elif verb in ("next", "prev"):
            self._reply()
        else:
            self._reply(f"Unknown command `{verb}'. Type `help' for help.")


@pytest.fixture
def fake_vlc(monkeypatch: pytest.MonkeyPatch) -> FakeVlc:
    """A fake player that ``socket.create_connection`` hands out."""
    fake = FakeVlc()
    monkeypatch.setattr(
        tcp_connection.socket,
        "create_connection",
        lambda address, timeout=None: fake,
    )
    return fake


@pytest.fixture
def client(fake_vlc: FakeVlc) -> Client:
    """A client connected to ``fake_vlc`` with a fast convergence policy."""
    player = Client.connect(
        ("127.0.0.1", 9090),
        policy=ConvergencePolicy(max_attempts=5, interval=0),
    )
    yield player
    player.close()
