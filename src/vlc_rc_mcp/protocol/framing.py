"""Line and prompt framing for the VLC rc console.

Exchange on the wire::

    server: VLC media player 3.0.18 Vetinari\r\n
            Command Line Interface initialized. Type `help' for help.\r\n
            >                                   <- greeting ends at the prompt
    client: volume\n
    server: 256\r\n
            >                                   <- ready for the next command
    client: playlist\n
    server: +----[ Playlist - playlist ]\r\n
            | 1 - Playlist\r\n
            |   4 - song.mp3 (00:03:12)\r\n
            +----[ End of playlist ]\r\n
            >                                   <- listing ends at the prompt

- Single-value replies end at ``LINE_TERMINATOR``.
- Listings and the greeting end at ``PROMPT``.
- The prompt left over from one reply shows up at the start of the next
  line that is read, so line reads are trimmed with :func:`trim_output`.
"""

from __future__ import annotations

PROMPT = b">"
LINE_TERMINATOR = b"\n"
ENCODING = "utf-8"

# Characters that leak into the front of a line read.
ARTIFACT_CHARS = PROMPT.decode("ascii") + " "


def encode_command(text: str) -> bytes:
    """Encode one command line, terminator included."""
    return text.encode("ascii", errors="replace") + LINE_TERMINATOR


def decode(data: bytes) -> str:
    """Decode console output, replacing invalid byte sequences."""
    return data.decode(ENCODING, errors="replace")


def trim_output(text: str) -> str:
    """Remove every leading prompt and space character.

    ``"> 25"`` and ``">  >25"`` both become ``"25"``. The end of the
    string is left alone.
    """
    return text.lstrip(ARTIFACT_CHARS)


def is_artifact(text: str) -> bool:
    """Return True if ``text`` holds nothing but prompts and whitespace."""
    return not text.replace(PROMPT.decode("ascii"), "").strip()
