"""Protocol layer: prompt framing, command builders, and reply parsing."""

from .framing import PROMPT, decode, encode_command, trim_output
from .commands import Command, build_command
from .parser import parse_playlist, parse_subtitle, parse_subtitles, parse_track
