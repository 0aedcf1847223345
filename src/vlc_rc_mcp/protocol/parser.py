"""Parsing of rc console replies.

Listings (``playlist``, ``strack``) are parsed one line at a time by the
grammar extractors; lines that are not list items (headers, footers,
blank lines) are skipped. Single-value replies have their own parsers.
"""

from __future__ import annotations

import re

from ..errors import ParseError
from ..models.media import Playlist, Subtitle, Subtitles, Track

# The title is greedy: it may contain " - " and "(..)" itself, so only
# the index at the front and the duration at the back anchor the row.
TRACK_PATTERN = re.compile(
    r"""
    \|                          # list item delimiter
    \s+
    \*?                         # current item marker
    (?P<index>\d+)
    \s+-\s+
    (?P<title>.+)
    \s\(
    (?P<length>\d\d:\d\d:\d\d)
    .*
    """,
    re.VERBOSE,
)

SUBTITLE_PATTERN = re.compile(
    r"""
    \|                          # list item delimiter
    \s+
    (?P<index>-?\d+)            # -1 is the "Disable" entry
    \s+-\s+
    (?P<title>.+)
    """,
    re.VERBOSE,
)

UNSIGNED_PATTERN = re.compile(r"\d+")


def parse_track(line: str) -> Track | None:
    """Parse one playlist row, e.g. ``| *1 - Bach.mp3 (01:50:55)``."""
    match = TRACK_PATTERN.search(line)
    if match is None:
        return None
    return Track(
        index=int(match["index"]),
        title=match["title"],
        length=match["length"],
    )


def parse_subtitle(line: str) -> Subtitle | None:
    """Parse one ``strack`` row, e.g. ``| 2 - Track 1 - [English]``."""
    match = SUBTITLE_PATTERN.search(line)
    if match is None:
        return None
    return Subtitle(index=int(match["index"]), title=match["title"])


def parse_playlist(block: str) -> Playlist:
    """Extract every track row of a ``playlist`` listing, in order."""
    tracks = (parse_track(line) for line in block.splitlines())
    return [track for track in tracks if track is not None]


def parse_subtitles(block: str) -> Subtitles:
    """Extract every subtitle row of a ``strack`` listing, in order."""
    subtitles = (parse_subtitle(line) for line in block.splitlines())
    return [subtitle for subtitle in subtitles if subtitle is not None]


def parse_volume(line: str) -> int:
    """Parse a ``volume`` reply.

    Raises:
        ParseError: If the reply is not an unsigned integer.
    """
    text = line.strip()
    if not UNSIGNED_PATTERN.fullmatch(text):
        raise ParseError(f"Expected a volume level, got {text!r}", text)
    return int(text)


def parse_time(line: str) -> int | None:
    """Parse a ``get_time`` reply. Returns None when nothing is playing."""
    text = line.strip()
    if not UNSIGNED_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_title(line: str) -> str | None:
    """Parse a ``get_title`` reply. An empty line means no current media."""
    return line.strip() or None


def parse_is_playing(line: str) -> bool:
    return line.strip() == "1"
